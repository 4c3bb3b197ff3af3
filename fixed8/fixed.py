"""A 32-bit signed fixed-point number with 8 fractional bits."""

from __future__ import annotations

import math
import struct

FRACTIONAL_BITS = 8
_SCALE = 1 << FRACTIONAL_BITS
_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def _wrap(value: int) -> int:
    """Wrap an integer to the 32-bit two's complement range."""
    return ((value - _INT_MIN) % (1 << 32)) + _INT_MIN


def _to_f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _round_half_away(value: float) -> int:
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return whole


def format_float(value: float) -> str:
    """Format a float with six significant digits, trailing zeros dropped."""
    return f"{value:g}"


class Fixed:
    """Fixed-point value stored as a 32-bit integer scaled by 256.

    Instances are immutable; arithmetic and stepping return new values.
    """

    __slots__ = ("_raw",)

    def __init__(self, value: Fixed | int | float = 0) -> None:
        if isinstance(value, Fixed):
            self._raw = value._raw
        elif isinstance(value, int):
            if not _INT_MIN <= value <= _INT_MAX:
                raise OverflowError(f"integer {value} does not fit in 32 bits")
            self._raw = _wrap(value << FRACTIONAL_BITS)
        elif isinstance(value, float):
            if math.isnan(value):
                raise ValueError("cannot represent NaN as a fixed-point value")
            scaled = _to_f32(_to_f32(value) * _SCALE)
            raw = _round_half_away(scaled)
            if not _INT_MIN <= raw <= _INT_MAX:
                raise OverflowError(f"float {value} is out of fixed-point range")
            self._raw = raw
        else:
            raise TypeError(f"cannot build Fixed from {type(value).__name__}")

    @classmethod
    def from_raw(cls, raw: int) -> Fixed:
        """Build a value from its raw scaled representation."""
        if not isinstance(raw, int):
            raise TypeError("raw bits must be an integer")
        if not _INT_MIN <= raw <= _INT_MAX:
            raise OverflowError(f"raw value {raw} does not fit in 32 bits")
        return cls._from_bits(raw)

    @classmethod
    def _from_bits(cls, raw: int) -> Fixed:
        obj = cls.__new__(cls)
        obj._raw = _wrap(raw)
        return obj

    @property
    def raw(self) -> int:
        """The underlying scaled integer."""
        return self._raw

    def to_float(self) -> float:
        return _to_f32(float(self._raw)) / _SCALE

    def to_int(self) -> int:
        return self._raw >> FRACTIONAL_BITS

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        return format_float(self.to_float())

    def __repr__(self) -> str:
        return f"Fixed.from_raw({self._raw})"

    @staticmethod
    def _coerce(other: object) -> Fixed | None:
        if isinstance(other, Fixed):
            return other
        if isinstance(other, (int, float)):
            return Fixed(other)
        return None

    def __add__(self, other: object) -> Fixed:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed._from_bits(self._raw + rhs._raw)

    def __sub__(self, other: object) -> Fixed:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed._from_bits(self._raw - rhs._raw)

    def __mul__(self, other: object) -> Fixed:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed._from_bits(_wrap(self._raw * rhs._raw) >> FRACTIONAL_BITS)

    def __truediv__(self, other: object) -> Fixed:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._raw == 0:
            raise ZeroDivisionError("fixed-point division by zero")
        numerator = _wrap(self._raw << FRACTIONAL_BITS)
        quotient = abs(numerator) // abs(rhs._raw)
        if (numerator < 0) != (rhs._raw < 0):
            quotient = -quotient
        return Fixed._from_bits(quotient)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw == other._raw

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw != other._raw

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw < other._raw

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw <= other._raw

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw > other._raw

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw >= other._raw

    def __hash__(self) -> int:
        return hash((Fixed, self._raw))

    def increment(self) -> Fixed:
        """Return the value one smallest step (1/256) larger."""
        return Fixed._from_bits(self._raw + 1)

    def decrement(self) -> Fixed:
        """Return the value one smallest step (1/256) smaller."""
        return Fixed._from_bits(self._raw - 1)

    @staticmethod
    def min(a: Fixed, b: Fixed) -> Fixed:
        """Return the smaller value; the first one on a tie."""
        return a if a._raw <= b._raw else b

    @staticmethod
    def max(a: Fixed, b: Fixed) -> Fixed:
        """Return the larger value; the first one on a tie."""
        return a if a._raw >= b._raw else b