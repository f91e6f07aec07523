"""Which side of zero a signed quantity is on."""

from __future__ import annotations


def is_same_side(a: int, b: int) -> bool:
    """True when ``a`` and ``b`` have the same sign.

    Zero agrees with either side: ``is_same_side(0, x)`` and
    ``is_same_side(x, 0)`` are always True.
    """
    return a == 0 or b == 0 or (a > 0) == (b > 0)
