"""Short, readable text for large numbers."""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal, localcontext

_SUFFIXES = (
    ("k", 10**3),
    ("m", 10**6),
    ("b", 10**9),
    ("t", 10**12),
    ("Qa", 10**15),
)
_LIMIT = 10**18


def abbreviate(n: int | float | Decimal) -> str:
    """Return ``n`` abbreviated with a suffix and two decimals, floored.

    Values below 1000 are rounded to a whole number; values above 10^18 are
    returned in full with two decimals. Exactly 10^18 yields an empty string.
    """
    value = n if isinstance(n, Decimal) else Decimal(n)
    if value.is_nan():
        return ""
    if value.is_infinite():
        return "-inf" if value < 0 else "inf"

    with localcontext() as ctx:
        ctx.prec = 80
        if value < 1000:
            return f"{value:.0f}"
        for suffix, unit in _SUFFIXES:
            if value < unit * 1000:
                hundredths = (value * 100 / unit).to_integral_value(
                    rounding=ROUND_FLOOR
                )
                return f"{hundredths / 100:.2f}{suffix}"
        if value > _LIMIT:
            return f"{value:.2f}"
    return ""