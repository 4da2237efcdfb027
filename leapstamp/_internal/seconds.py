"""Exact decimal seconds for Leapstamp.

All second-valued quantities are decimal.Decimal. Arithmetic goes through
a context sized from the operands with Inexact trapped, so every result
is exact; an operation that would round raises instead.

The exponent of a Decimal is its fractional precision and is carried
through arithmetic unchanged: Decimal("5.10") + 60 == Decimal("65.10").

This module is not part of the public API.
"""

from __future__ import annotations

import decimal
from decimal import Decimal

from leapstamp.errors import ParseError, ValidationError

_TRAPS = [
    decimal.Inexact,
    decimal.InvalidOperation,
    decimal.DivisionByZero,
    decimal.Overflow,
]

# Smallest precision ever used; matches the default context
_MIN_PRECISION = 28

SecondsLike = Decimal | int | str


def _digits(value: Decimal) -> int:
    sign, digits, exponent = value.as_tuple()
    return len(digits) + abs(exponent)


def _context(*operands: Decimal) -> decimal.Context:
    """Return a context wide enough to add the operands exactly."""
    precision = sum(_digits(d) for d in operands) + 2
    return decimal.Context(prec=max(precision, _MIN_PRECISION), traps=_TRAPS)


def to_seconds(value: SecondsLike, name: str = "seconds") -> Decimal:
    """Coerce a value to an exact, finite Decimal.

    Args:
        value: A Decimal, an int, or a decimal string such as "59.125".
        name: Field name used in error messages.

    Returns:
        The Decimal value. A negative zero is returned as positive zero.

    Raises:
        TypeError: If value is a float, a bool, or another type.
        ParseError: If a string is not a decimal number.
        ValidationError: If the value is NaN or infinite.

    Examples:
        >>> to_seconds("59.125")
        Decimal('59.125')
        >>> to_seconds(7)
        Decimal('7')
    """
    if isinstance(value, bool):
        raise TypeError(f"{name} must be a Decimal, int or str, got bool")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except decimal.InvalidOperation:
            raise ParseError(f"{name} is not a decimal number: {value!r}") from None
    else:
        raise TypeError(
            f"{name} must be a Decimal, int or str, got {type(value).__name__}"
        )

    if not result.is_finite():
        raise ValidationError(f"{name} must be finite, got {result}")
    if result.is_zero():
        result = result.copy_abs()
    return result


def add(left: Decimal, right: Decimal | int) -> Decimal:
    """Exact sum of two decimals."""
    right = Decimal(right)
    return _context(left, right).add(left, right)


def subtract(left: Decimal, right: Decimal | int) -> Decimal:
    """Exact difference of two decimals."""
    right = Decimal(right)
    return _context(left, right).subtract(left, right)


def quantum(value: Decimal) -> Decimal:
    """Return the unit in the last fractional place of value.

    Values without a fractional part have a quantum of 1.

    Examples:
        >>> quantum(Decimal("86400.25"))
        Decimal('0.01')
        >>> quantum(Decimal("86400"))
        Decimal('1')
    """
    exponent = value.as_tuple().exponent
    return Decimal((0, (1,), min(exponent, 0)))


def format_seconds(value: Decimal) -> str:
    """Render a second field as two integer digits plus the exact fraction.

    Examples:
        >>> format_seconds(Decimal("5.10"))
        '05.10'
        >>> format_seconds(Decimal("60"))
        '60'
    """
    text = format(value, "f")
    whole, _, fraction = text.partition(".")
    if fraction:
        return f"{whole.zfill(2)}.{fraction}"
    return whole.zfill(2)


__all__ = [
    "SecondsLike",
    "to_seconds",
    "add",
    "subtract",
    "quantum",
    "format_seconds",
]
