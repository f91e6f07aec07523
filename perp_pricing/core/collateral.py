"""Discount applied to non-cash collateral.

Collateral is valued as if it had to be sold into the spot market: the larger
the amount relative to the spot market's skew scale, the steeper the discount.

    discount = clamp(amount / (skew_scale * 2), min_discount, max_discount)
    price    = collateral_price * (1 - discount)
"""

from __future__ import annotations

from .errors import ConfigurationError
from .fixed_point import WAD, clamp, div_wad, mul_wad


def calc_collateral_discount(
    amount: int,
    spot_market_skew_scale: int,
    min_discount: int,
    max_discount: int,
) -> int:
    """Discount (wad fraction) for ``amount`` units of collateral.

    A zero skew scale has no depth to measure against; the minimum discount applies.
    """
    if not 0 <= min_discount <= max_discount <= WAD:
        raise ConfigurationError(
            f"collateral discount bounds must satisfy 0 <= min <= max <= 1 (wad), "
            f"got min={min_discount} max={max_discount}"
        )
    if spot_market_skew_scale < 0:
        raise ConfigurationError(f"spot_market_skew_scale must be non-negative: {spot_market_skew_scale}")
    if spot_market_skew_scale == 0:
        return min_discount
    return clamp(div_wad(amount, spot_market_skew_scale * 2), min_discount, max_discount)


def calc_discounted_collateral_price(
    collateral_price: int,
    amount: int,
    spot_market_skew_scale: int,
    min_discount: int,
    max_discount: int,
) -> int:
    discount = calc_collateral_discount(amount, spot_market_skew_scale, min_discount, max_discount)
    return mul_wad(collateral_price, WAD - discount)
