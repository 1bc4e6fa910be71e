"""Rounding helpers for cached aggregates."""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int = 0) -> Decimal:
    """Round half away from zero, like SQL ROUND, not banker's rounding.

    >>> round_half_up(4.25, 1)
    Decimal('4.3')
    >>> round_half_up(62.5)
    Decimal('63')
    """
    exponent = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP)
