"""Turn-by-turn death roll simulator.

A `GameState` is an immutable value. `start_game` builds a fresh one and
`roll` returns its successor, so a caller never sees a half-updated game.
"""

import dataclasses
import enum
import logging
from typing import Optional, Tuple, Union

from . import config
from .algebra import Field, Real64
from .dice import Dice, NumpyDice
from .exceptions import InvalidOperation
from .probability import lose_probability

LOGGER = logging.getLogger(__name__)


class Player(enum.Enum):
    PLAYER_ONE = 1
    PLAYER_TWO = 2

    @property
    def other(self):
        return Player.PLAYER_TWO if self is Player.PLAYER_ONE else Player.PLAYER_ONE

    @property
    def label(self):
        return f"Player {self.value}"


class Status(enum.Enum):
    NOT_STARTED = "not started"
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


@dataclasses.dataclass(frozen=True)
class Started:
    wager: int

    def describe(self):
        return f"Game started with a wager of {self.wager}g"


@dataclasses.dataclass(frozen=True)
class Rolled:
    player: Player
    value: int

    def describe(self):
        return f"{self.player.label} rolled: {self.value}"


LogEntry = Union[Started, Rolled]


@dataclasses.dataclass(frozen=True)
class GameState:
    bound: int = 0
    active_player: Player = Player.PLAYER_ONE
    status: Status = Status.NOT_STARTED
    loser: Optional[Player] = None
    log: Tuple[LogEntry, ...] = ()

    def __post_init__(self):
        if (self.status is Status.FINISHED) != (self.loser is not None):
            raise ValueError(f"A loser must be set exactly when the game is finished, got {self.status} and {self.loser}.")
        if self.status is Status.IN_PROGRESS and self.bound < 1:
            raise ValueError(f"Bound must be at least 1 during a game, got {self.bound}.")

    @property
    def finished(self):
        return self.status is Status.FINISHED

    @property
    def winner(self):
        return self.loser.other if self.loser is not None else None

    @property
    def rolls(self):
        return tuple(entry for entry in self.log if isinstance(entry, Rolled))


_default_dice = None


def default_dice():
    global _default_dice
    if _default_dice is None:
        LOGGER.debug("Creating default dice with seed %s.", config.seed)
        _default_dice = NumpyDice(config.seed)
    return _default_dice


def start_game(wager: int) -> GameState:
    """Begin a new game with `wager` as the first bound.

    The wager is expected to already respect the caller's floor.
    """
    LOGGER.debug("Starting game with wager %s.", wager)
    return GameState(
        bound=wager,
        active_player=Player.PLAYER_ONE,
        status=Status.IN_PROGRESS,
        loser=None,
        log=(Started(wager),),
    )


def roll(state: GameState, dice: Optional[Dice] = None) -> GameState:
    """Roll for the active player and return the resulting state.

    Raises `InvalidOperation` if the game isn't in progress or if `dice`
    produces a value outside `[1, bound]`.
    """
    if state.status is not Status.IN_PROGRESS:
        raise InvalidOperation(f"Can't roll when the game is {state.status.value}.", state)

    dice = dice if dice is not None else default_dice()
    value = dice.roll(state.bound)
    if not 1 <= value <= state.bound:
        raise InvalidOperation(f"Rolled {value}, outside 1..{state.bound}.", state)

    player = state.active_player
    log = state.log + (Rolled(player, value),)
    LOGGER.debug("%s rolled %s with bound %s.", player.label, value, state.bound)

    if value == 1:
        LOGGER.debug("%s loses.", player.label)
        return dataclasses.replace(state, status=Status.FINISHED, loser=player, log=log)

    return dataclasses.replace(state, bound=value, active_player=player.other, log=log)


def next_roll_lose_probability(state: GameState, field: Field = Real64()):
    """Loss probability of whoever rolls next, from the current bound."""
    if state.status is not Status.IN_PROGRESS:
        raise InvalidOperation(f"No next roll when the game is {state.status.value}.", state)
    return lose_probability(state.bound, field)


def play_out(state: GameState, dice: Optional[Dice] = None) -> GameState:
    """Keep rolling until somebody rolls a 1."""
    while not state.finished:
        state = roll(state, dice)
    return state


class Game:
    """Holds the single live game of a session."""

    def __init__(self, dice: Optional[Dice] = None):
        self.dice = dice
        self.state = GameState()

    def start(self, wager):
        self.state = start_game(wager)
        return self.state

    def roll(self):
        self.state = roll(self.state, self.dice)
        return self.state
