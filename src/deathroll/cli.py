"""Terminal front end: play a game, browse the odds or read the rules."""

import argparse
import logging
import sys

import termplotlib as tpl
from rich.logging import RichHandler

from . import config, render
from .algebra import Rational, Real64
from .dice import NumpyDice
from .engine import Game, play_out
from .exceptions import DeathRollError
from .probability import PREDEFINED_WAGERS, lose_probability_table

LOGGER = logging.getLogger(__name__)


def clamp_wager(value, floor):
    """Parse `value` as a wager no smaller than `floor`.

    Missing or non-numeric input falls back to the floor.
    """
    try:
        wager = int(value)
    except (TypeError, ValueError):
        return floor
    return max(floor, wager)


def setup_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(message)s",
        handlers=[RichHandler(markup=True, show_time=False, console=render.console)])


def cmd_play(args):
    wager = clamp_wager(args.wager, config.PLAY_FLOOR)
    seed = args.seed if args.seed is not None else config.seed
    game = Game(NumpyDice(seed))
    game.start(wager)

    if args.auto:
        game.state = play_out(game.state, game.dice)
        render.console.print(render.game_panel(game.state, wager))
        return 0

    render.console.print(render.game_panel(game.state, wager))
    while not game.state.finished:
        try:
            answer = args.input("Press Enter to roll (q to quit) ")
        except EOFError:
            break
        if answer.strip().lower() == "q":
            break
        game.roll()
        render.console.print(render.game_panel(game.state, wager))
    return 0


def cmd_stats(args):
    custom = [clamp_wager(w, config.CALCULATOR_FLOOR) for w in args.wager or []]
    wagers = list(PREDEFINED_WAGERS) + custom
    field = Rational() if args.exact else Real64()
    render.console.print(render.probability_table(wagers, field))

    if args.plot:
        ps = lose_probability_table(wagers)
        fig = tpl.figure()
        fig.barh(
            [round(float(p) * 100, 2) for p in ps],
            labels=[f"{w}g" for w in wagers],
            force_ascii=True
        )
        fig.show()
    return 0


def cmd_rules(args):
    render.console.print(render.rules_panel())
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog="deathroll",
        description="Death Rolling simulation."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", help="Play a game")
    play.add_argument("--wager", default=config.DEFAULT_WAGER,
                      help=f"Starting wager (minimum {config.PLAY_FLOOR})")
    play.add_argument("--seed", type=int, default=None, help="Seed for the dice")
    play.add_argument("--auto", action="store_true", help="Roll until the game ends")
    play.set_defaults(func=cmd_play, input=input)

    stats = sub.add_parser("stats", help="Loss probability of the first roller")
    stats.add_argument("--wager", action="append",
                       help=f"Extra wager to evaluate (minimum {config.CALCULATOR_FLOOR}), repeatable")
    stats.add_argument("--exact", action="store_true", help="Show exact fractions")
    stats.add_argument("--plot", action="store_true", help="Draw a bar chart")
    stats.set_defaults(func=cmd_stats)

    rules = sub.add_parser("rules", help="How to play")
    rules.set_defaults(func=cmd_rules)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        return args.func(args)
    except DeathRollError as e:
        render.report_error(e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
