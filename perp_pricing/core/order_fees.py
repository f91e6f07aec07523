"""Trading fee for an order, split into maker and taker portions.

An order that grows the skew (or keeps it on the same side while pushing it
further) pays the taker rate. An order that only shrinks the skew pays the
maker rate. An order that pushes the skew through zero pays maker on the part
that closes the skew and taker on the remainder.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidOrderError
from .fixed_point import WAD, div_wad, mul_wad
from .keeper import KeeperSettlementFee
from .pricing import calc_fill_price
from .side import is_same_side
from .types import (
    GlobalKeeperConfig,
    MarketFeeConfig,
    MarketSnapshot,
    OracleReading,
    OrderFeeRatios,
)


@dataclass(frozen=True)
class OrderFees:
    """Quote for an order: fill price, notional, trading fee and settlement fee."""

    fill_price: int
    notional: int
    order_fee: int
    ratios: OrderFeeRatios
    keeper_settlement_fee: KeeperSettlementFee


def calc_order_fee_ratios(skew_before: int, size_delta: int) -> OrderFeeRatios:
    """Taker/maker shares (wad, summing to 1) of an order of ``size_delta``."""
    if size_delta == 0:
        raise InvalidOrderError("size_delta must be non-zero")

    skew_after = skew_before + size_delta
    if is_same_side(skew_after, skew_before):
        if is_same_side(size_delta, skew_before):
            return OrderFeeRatios(taker=WAD, maker=0)
        return OrderFeeRatios(taker=0, maker=WAD)

    taker = div_wad(skew_after, size_delta)
    return OrderFeeRatios(taker=taker, maker=WAD - taker)


def calc_order_fees(
    market: MarketSnapshot,
    fee_config: MarketFeeConfig,
    keeper_config: GlobalKeeperConfig,
    oracle: OracleReading,
    size_delta: int,
    keeper_fee_buffer_usd: int = 0,
) -> OrderFees:
    """Price an order of ``size_delta`` against ``market``.

    Raises ``InvalidOrderError`` for a zero ``size_delta``; a null order has
    no meaningful fee.
    """
    if size_delta == 0:
        raise InvalidOrderError("size_delta must be non-zero")

    fill_price = calc_fill_price(market.skew, market.skew_scale, size_delta, market.oracle_price)
    ratios = calc_order_fee_ratios(market.skew, size_delta)

    notional = mul_wad(abs(size_delta), fill_price)
    order_fee = mul_wad(mul_wad(notional, ratios.taker), fee_config.taker_fee) + mul_wad(
        mul_wad(notional, ratios.maker), fee_config.maker_fee
    )

    return OrderFees(
        fill_price=fill_price,
        notional=notional,
        order_fee=order_fee,
        ratios=ratios,
        keeper_settlement_fee=KeeperSettlementFee(
            keeper_config=keeper_config,
            eth_price_usd=oracle.eth_price_usd,
            keeper_fee_buffer_usd=keeper_fee_buffer_usd,
        ),
    )
