"""Finite field arithmetic over GF(256) using log/antilog tables."""

from core import rng
from core.tables import LOG, EXP, ORDER


def add(a: int, b: int) -> int:
    return a ^ b


def sub(a: int, b: int) -> int:
    """Subtraction is addition in characteristic 2."""
    return a ^ b


def mul(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return EXP[LOG[a] + LOG[b]]


def inverse(a: int) -> int:
    if a == 0:
        raise ZeroDivisionError("Cannot invert zero")
    return EXP[ORDER - LOG[a]]


def div(a: int, b: int) -> int:
    """Multiply a by the inverse of b. Raises ZeroDivisionError when b == 0."""
    if b == 0:
        raise ZeroDivisionError("Division by zero in GF(256)")
    return mul(a, EXP[ORDER - LOG[b]])


def power(a: int, exp: int) -> int:
    if a == 0:
        if exp < 0:
            raise ZeroDivisionError("Cannot invert zero")
        return 1 if exp == 0 else 0
    return EXP[(LOG[a] * exp) % ORDER]


class FieldElement:
    """Element of GF(256)."""

    __slots__ = ('value',)

    def __init__(self, value: int):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"{value} is not an element of GF(256)")
        self.value = value

    @staticmethod
    def _coerce(other):
        if isinstance(other, FieldElement):
            return other.value
        if isinstance(other, int):
            return FieldElement(other).value
        return None

    def __add__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return FieldElement(add(self.value, b))

    __radd__ = __add__

    def __sub__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return FieldElement(sub(self.value, b))

    def __rsub__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return FieldElement(sub(b, self.value))

    def __mul__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return FieldElement(mul(self.value, b))

    __rmul__ = __mul__

    def __truediv__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return FieldElement(div(self.value, b))

    def __rtruediv__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return FieldElement(div(b, self.value))

    def __neg__(self):
        # every element is its own additive inverse
        return FieldElement(self.value)

    def __pow__(self, exp):
        if isinstance(exp, FieldElement):
            exp = exp.value
        return FieldElement(power(self.value, exp))

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == other
        if isinstance(other, FieldElement):
            return self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"GF({self.value:#04x})"

    def __bool__(self):
        return self.value != 0

    def __int__(self):
        return self.value

    def inverse(self):
        """Multiplicative inverse via the antilog table: 3^(255 - log a)."""
        return FieldElement(inverse(self.value))

    def to_int(self):
        return self.value

    @staticmethod
    def random():
        """Return a random non-zero field element."""
        return FieldElement(rng.randbelow(ORDER) + 1)

    @staticmethod
    def random_including_zero():
        """Return a random field element (may be zero)."""
        return FieldElement(rng.randbelow(ORDER + 1))

    @staticmethod
    def zero():
        return FieldElement(0)

    @staticmethod
    def one():
        return FieldElement(1)
