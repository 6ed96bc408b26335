from abc import ABC, abstractmethod
from fractions import Fraction
import numpy as np


class Field(ABC):
    """Arithmetic used along the probability axis."""

    dtype : type

    @abstractmethod
    def one(self):
        ...

    @abstractmethod
    def const_ratio(self, num: int, den: int):
        ...

    def mul(self, a, b):
        return a * b

    def sub(self, a, b):
        return a - b

    def complement(self, a):
        return self.sub(self.one(), a)

    def as_scalar(self, x):
        return x

    def __repr__(self):
        return f"{type(self).__name__}()"


class Real64(Field):
    dtype = np.float64

    def one(self):
        return self.dtype(1.0)

    def const_ratio(self, num, den):
        return self.dtype(num) / self.dtype(den)

    def as_scalar(self, x):
        return float(x)


# Exact. Denominators grow with the bound so this is
# only worth it when you need the fraction itself.
class Rational(Field):
    dtype = Fraction

    def one(self):
        return Fraction(1)

    def const_ratio(self, num, den):
        if den == 0:
            raise ZeroDivisionError("const_ratio with den=0")
        return Fraction(int(num), int(den))
