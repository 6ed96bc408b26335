import logging

from rich import box
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .algebra import Field, Real64
from .engine import GameState, Status, next_roll_lose_probability
from .probability import lose_probability

console = Console()

RULES = (
    "Two players agree on a wager amount (minimum 5g).",
    "The first player rolls a number between 1 and the wager amount.",
    "The second player then rolls between 1 and the number the first player rolled.",
    "Players continue taking turns, rolling between 1 and the previous roll.",
    "The game ends when a player rolls a 1, resulting in their loss.",
)

ODDS = (
    "The probability of winning changes with each roll. The player who goes second has a "
    "slight advantage, as they always have one less number to potentially roll. However, as "
    "the numbers get smaller, the chances of rolling a 1 increase for both players."
)

STRATEGY = (
    "While Death Rolling is largely a game of chance, choosing the initial wager amount can "
    "affect your overall odds of winning. Higher wagers generally give a slight advantage to "
    "the first player, as there are more numbers to roll before reaching 1."
)


def format_percent(p):
    return f"{float(p) * 100:.2f}%"


def outcome_line(state: GameState):
    if state.status is not Status.FINISHED:
        return None
    return f"{state.winner.label} wins!"


def game_panel(state: GameState, wager=None):
    """The log and outcome of `state`, as shown after every roll."""
    header = []
    if wager is not None:
        header.append(f"Current wager: {wager}g")
    if state.status is not Status.NOT_STARTED:
        header.append(f"Current roll: {state.bound}")
    if wager is not None:
        header.append(f"Player 1 loss probability: {format_percent(lose_probability(wager))}")
    if state.status is Status.IN_PROGRESS:
        p = next_roll_lose_probability(state)
        header.append(f"{state.active_player.label} to roll, loss probability: {format_percent(p)}")

    lines = [Text(line) for line in header]
    if lines:
        lines.append(Text(""))
    lines.extend(Text(entry.describe()) for entry in state.log)
    outcome = outcome_line(state)
    if outcome is not None:
        lines.append(Text(outcome, style="bold"))
    return Panel(Group(*lines), title="Death Rolling Game", expand=False)


def probability_table(wagers, field: Field = Real64()):
    table = Table(box=box.SIMPLE_HEAVY)
    table.add_column("Wager", justify="right")
    table.add_column("Player 1 loss probability", justify="right")
    if not isinstance(field, Real64):
        table.add_column("Exact", justify="right")
    for wager in wagers:
        p = lose_probability(wager, field)
        row = [f"{wager}g", format_percent(p)]
        if not isinstance(field, Real64):
            row.append(str(p))
        table.add_row(*row)
    return table


def rules_panel():
    steps = "\n".join(f"{i}. {rule}" for i, rule in enumerate(RULES, start=1))
    body = Group(
        Text(steps),
        Text(""),
        Text("Understanding the Odds", style="bold"),
        Text(ODDS),
        Text(""),
        Text("Strategy", style="bold"),
        Text(STRATEGY),
    )
    return Panel(body, title="How to Play Death Rolling", expand=False)


def report_error(exc):
    console.print(Panel(f"[bold red]{escape(str(exc))}[/bold red]", expand=False, border_style="red"))
    logging.error(str(exc))
