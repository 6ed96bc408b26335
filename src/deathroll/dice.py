"""Sources of random rolls.

A dice object is anything with a `roll(bound)` method returning an integer
in `[1, bound]`. The engine never touches a random generator directly.
"""

import logging
from collections import deque
from typing import Iterable, Optional, Protocol

import numpy as np

from .exceptions import DiceExhausted

LOGGER = logging.getLogger(__name__)


class Dice(Protocol):
    def roll(self, bound: int) -> int:
        ...


class NumpyDice:
    """Uniform rolls drawn from a `numpy.random.Generator`."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def roll(self, bound: int) -> int:
        # `integers` excludes the upper limit.
        return int(self.rng.integers(1, bound + 1))

    def __repr__(self):
        return f"NumpyDice(rng={self.rng!r})"


class ScriptedDice:
    """Replays a fixed sequence of values, ignoring the bound."""

    def __init__(self, values: Iterable[int]):
        self._values = deque(int(v) for v in values)

    def roll(self, bound: int) -> int:
        if not self._values:
            raise DiceExhausted(f"No scripted value left for a roll against {bound}.")
        value = self._values.popleft()
        LOGGER.debug("Scripted roll %s against %s, %d left.", value, bound, len(self._values))
        return value

    def remaining(self):
        return len(self._values)
