"""Loss probability of the first roller for a given wager.

The calculator multiplies the chance of surviving one roll, `(n - 1) / n`,
for every `n` from the bound down to 2 and returns the complement. The
working bound drops by exactly one per step rather than to the rolled
value, so this is the fixed-decrement model the game has always displayed,
not the full recursive game tree.
"""

import logging

import numpy as np

from .algebra import Field, Real64

LOGGER = logging.getLogger(__name__)

PREDEFINED_WAGERS = (2, 10, 25, 50, 100)


def lose_probability(bound, field: Field = Real64()):
    r"""Probability that the player rolling first against `bound` loses.

>>>  lose_probability(2)
0.5
>>>  lose_probability(5, Rational())
Fraction(4, 5)

Args:
  bound: An integer >= 1. Not validated.
  field: The arithmetic to use. `Real64()` by default.

Returns:
  A number in [0, 1] of the field's type.
"""
    survival = field.one()
    n = bound
    while n > 1:
        survival = field.mul(survival, field.const_ratio(n - 1, n))
        n -= 1
    result = field.complement(survival)
    LOGGER.debug("lose_probability(%s) = %s using %s.", bound, result, field)
    return field.as_scalar(result)


def win_probability(bound, field: Field = Real64()):
    return field.as_scalar(field.complement(lose_probability(bound, field)))


def lose_probability_table(bounds):
    """Vectorised `lose_probability` over an array of bounds, as float64."""
    bounds = np.asarray(bounds, dtype=np.int64)
    if bounds.size == 0:
        return np.zeros(bounds.shape, dtype=np.float64)
    top = max(int(bounds.max()), 1)
    n = np.arange(2, top + 1, dtype=np.float64)
    # survival[k] is the product of (n - 1) / n for n = 2..k.
    survival = np.concatenate([[1.0, 1.0], np.cumprod((n - 1) / n)])
    return 1.0 - survival[np.clip(bounds, 1, None)]
