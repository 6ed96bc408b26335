"""Death Roll: a two player elimination dice game and its odds."""

from .algebra import Field, Real64, Rational
from .dice import Dice, NumpyDice, ScriptedDice
from .engine import (
    Game,
    GameState,
    LogEntry,
    Player,
    Rolled,
    Started,
    Status,
    next_roll_lose_probability,
    play_out,
    roll,
    start_game,
)
from .exceptions import DeathRollError, DiceExhausted, InvalidOperation
from .probability import (
    PREDEFINED_WAGERS,
    lose_probability,
    lose_probability_table,
    win_probability,
)
