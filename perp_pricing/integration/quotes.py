"""
Quoting facade over the pricing core.

`MarketPricer` binds one market's configuration to the global keeper settings
so callers only pass what changes per call: the market snapshot, the oracle
reading and the order or position being priced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.collateral import calc_discounted_collateral_price
from ..core.fixed_point import from_wad
from ..core.keeper import calc_flag_reward, calc_liquidation_keeper_fee
from ..core.order_fees import OrderFees, calc_order_fees
from ..core.pricing import calc_fill_price
from ..core.types import (
    CollateralDiscountConfig,
    FlagReward,
    GlobalKeeperConfig,
    MarketSnapshot,
    OracleReading,
    OrderIntent,
    PositionSnapshot,
)
from .config import MarketConfig, PricingConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderQuote:
    """Order fees plus the settlement fee estimated at the quoting block's base fee."""

    fees: OrderFees
    estimated_keeper_fee_usd: int

    @property
    def total_fee_usd(self) -> int:
        return self.fees.order_fee + self.estimated_keeper_fee_usd


@dataclass(frozen=True)
class MarketPricer:
    market: MarketConfig
    keeper: GlobalKeeperConfig
    collateral: CollateralDiscountConfig = CollateralDiscountConfig()

    @classmethod
    def from_config(cls, config: PricingConfig, market_name: str) -> MarketPricer:
        return cls(market=config.market(market_name), keeper=config.keeper, collateral=config.collateral)

    def fill_price(self, snapshot: MarketSnapshot, size_delta: int) -> int:
        return calc_fill_price(snapshot.skew, snapshot.skew_scale, size_delta, snapshot.oracle_price)

    def quote_order(self, snapshot: MarketSnapshot, oracle: OracleReading, intent: OrderIntent) -> OrderQuote:
        fees = calc_order_fees(
            snapshot,
            self.market.fees,
            self.keeper,
            oracle,
            intent.size_delta,
            intent.keeper_fee_buffer_usd,
        )
        quote = OrderQuote(
            fees=fees,
            estimated_keeper_fee_usd=fees.keeper_settlement_fee.evaluate(oracle.base_fee_per_gas),
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "order quote market=%s size=%s fill_price=%s order_fee=%s keeper_fee=%s",
                self.market.name,
                from_wad(intent.size_delta),
                from_wad(fees.fill_price),
                from_wad(fees.order_fee),
                from_wad(quote.estimated_keeper_fee_usd),
            )
        return quote

    def flag_reward(self, oracle: OracleReading, position: PositionSnapshot) -> FlagReward:
        reward = calc_flag_reward(oracle, position, self.keeper, self.market.liquidation)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "flag reward market=%s size=%s reward=%s (uncapped %s)",
                self.market.name,
                from_wad(position.size_abs),
                from_wad(reward.result),
                from_wad(reward.uncapped_usd),
            )
        return reward

    def liquidation_fee(self, oracle: OracleReading, position: PositionSnapshot) -> int:
        fee = calc_liquidation_keeper_fee(
            oracle,
            position.size_abs,
            self.market.liquidation.max_liquidation_capacity,
            self.keeper,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "liquidation fee market=%s size=%s fee=%s",
                self.market.name,
                from_wad(position.size_abs),
                from_wad(fee),
            )
        return fee

    def discounted_collateral_price(
        self, collateral_price: int, amount: int, spot_market_skew_scale: int
    ) -> int:
        return calc_discounted_collateral_price(
            collateral_price,
            amount,
            spot_market_skew_scale,
            self.collateral.min_discount,
            self.collateral.max_discount,
        )
