"""Exceptions used by the death roll engine"""

class DeathRollError(Exception):
    """Base class for errors raised by deathroll"""


class InvalidOperation(DeathRollError):
    """An operation was attempted in a state that doesn't allow it"""

    def __init__(self, message, state=None):
        super().__init__(message)
        if state is not None:
            self.state = state


class DiceExhausted(DeathRollError):
    """Scripted dice were asked for more values than they hold"""
