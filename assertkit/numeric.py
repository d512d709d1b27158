"""Numeric range and comparison checks using exact arithmetic."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from fractions import Fraction
from numbers import Number

__all__ = ["to_number", "between", "equal", "greater", "greater_or_equal"]


def to_number(value: object) -> Decimal:
    """Convert a number or numeric string to an exact ``Decimal``.

    Booleans, collections, ``None`` and other non-numeric values raise
    ``TypeError``; strings that do not hold a finite number and non-finite
    numbers raise ``ValueError``.
    """
    if isinstance(value, bool) or value is None:
        raise TypeError("number required")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(value)
    elif isinstance(value, Fraction):
        if value.denominator == 1:
            result = Decimal(value.numerator)
        else:
            result = Decimal(value.numerator) / Decimal(value.denominator)
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise ValueError(f"not a number: {value!r}") from exc
    elif isinstance(value, Number):
        try:
            result = Decimal(float(value))  # type: ignore[arg-type]
        except (TypeError, ValueError) as exc:
            raise TypeError("number required") from exc
    else:
        raise TypeError("number required")
    if not result.is_finite():
        raise ValueError(f"number must be finite: {value!r}")
    return result


def between(begin: object, end: object, number: object) -> bool:
    """Return whether ``begin <= number <= end``."""
    low, high, value = to_number(begin), to_number(end), to_number(number)
    return low <= value <= high


def equal(compare_against: object, number: object) -> bool:
    """Return whether ``number`` equals ``compare_against``."""
    return to_number(number) == to_number(compare_against)


def greater(compare_against: object, number: object) -> bool:
    """Return whether ``number`` is strictly greater than ``compare_against``."""
    return to_number(number) > to_number(compare_against)


def greater_or_equal(compare_against: object, number: object) -> bool:
    """Return whether ``number`` is greater than or equal to ``compare_against``."""
    return to_number(number) >= to_number(compare_against)