"""Fixed-point arithmetic on 18-decimal signed integers ("wad").

Every value is a plain Python int where ``1 * WAD`` represents 1.0.

Rounding is explicit:
- ``mul_wad`` / ``div_wad`` truncate toward zero (the on-chain convention for
  signed fixed-point), not toward -inf like Python's ``//``.
- ``div_ceil`` rounds up and is only defined for non-negative operands.
"""

from __future__ import annotations

from decimal import Decimal, localcontext

from .errors import ConfigurationError

WAD: int = 10**18
GWEI_PER_ETH: int = 10**9

# Enough digits for any wad that fits in int256.
_DECIMAL_PRECISION = 96


def _require_int(name: str, v: object) -> int:
    if not isinstance(v, int) or isinstance(v, bool):
        raise TypeError(f"{name} must be an int, got {type(v).__name__}")
    return v


def div_trunc(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def mul_wad(a: int, b: int) -> int:
    """``a * b`` in wad, truncated toward zero."""
    return div_trunc(a * b, WAD)


def div_wad(a: int, b: int) -> int:
    """``a / b`` in wad, truncated toward zero."""
    return div_trunc(a * WAD, b)


def div_ceil(a: int, b: int) -> int:
    """Ceiling of ``a / b`` for ``a >= 0`` and ``b > 0``."""
    if a < 0:
        raise ValueError(f"div_ceil numerator must be non-negative: {a}")
    if b <= 0:
        raise ValueError(f"div_ceil denominator must be positive: {b}")
    return -(-a // b)


def clamp(x: int, lo: int, hi: int) -> int:
    """``min(max(x, lo), hi)``.

    An inverted range would silently collapse to ``hi``; that is treated as a
    misconfiguration instead.
    """
    if lo > hi:
        raise ConfigurationError(f"clamp bounds inverted: lo={lo} > hi={hi}")
    return min(max(x, lo), hi)


def to_wad(value: int | str | Decimal) -> int:
    """Exact conversion of a decimal quantity to wad.

    ``int`` is taken as whole units (``to_wad(2) == 2 * WAD``). Floats are
    rejected because their binary value is rarely the decimal that was meant.
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise TypeError(f"cannot convert {type(value).__name__} to wad")
    if isinstance(value, int):
        return value * WAD
    if isinstance(value, str):
        try:
            value = Decimal(value.strip().replace("_", ""))
        except ArithmeticError as exc:
            raise ValueError(f"not a decimal number: {value!r}") from exc
    if not isinstance(value, Decimal):
        raise TypeError(f"cannot convert {type(value).__name__} to wad")
    if not value.is_finite():
        raise ValueError(f"wad value must be finite: {value}")

    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        scaled = value * WAD
        if scaled != scaled.to_integral_value():
            raise ValueError(f"{value} has more than 18 decimal places")
        return int(scaled)


def from_wad(value: int) -> Decimal:
    """Exact ``Decimal`` view of a wad (for display and logging)."""
    _require_int("value", value)
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        return Decimal(value) / WAD
