"""Price impact and PnL.

The fill price walks a linear premium curve ``price * (1 + skew / skew_scale)``.
Instead of integrating over the trade, it averages the premium-adjusted price
before and after the trade's size is added to the skew.
"""

from __future__ import annotations

from .fixed_point import div_trunc, div_wad, mul_wad


def _premium_adjusted_price(price: int, skew: int, skew_scale: int) -> int:
    premium = div_wad(skew, skew_scale)
    return price + mul_wad(price, premium)


def calc_fill_price(skew: int, skew_scale: int, size: int, price: int) -> int:
    """Average fill price of an order of ``size`` against a market with ``skew``.

    ``skew_scale == 0`` disables price impact and returns ``price`` unchanged.
    """
    if skew_scale == 0:
        return price
    price_before = _premium_adjusted_price(price, skew, skew_scale)
    price_after = _premium_adjusted_price(price, skew + size, skew_scale)
    return div_trunc(price_before + price_after, 2)


def calc_pnl(size: int, current_price: int, previous_price: int) -> int:
    """Unrealised PnL (no funding or fees): ``size * (current - previous)``."""
    return mul_wad(size, current_price - previous_price)
