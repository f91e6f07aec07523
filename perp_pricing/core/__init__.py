"""
Core pricing formulas (pure, integer-only).

All values are 18-decimal fixed-point ints; see `fixed_point`.
"""

from .collateral import calc_collateral_discount, calc_discounted_collateral_price
from .errors import ConfigurationError, InvalidOrderError, PricingError
from .fixed_point import WAD, clamp, div_ceil, div_wad, from_wad, mul_wad, to_wad
from .keeper import (
    KeeperSettlementFee,
    bounded_keeper_fee,
    calc_flag_reward,
    calc_keeper_settlement_fee,
    calc_liquidation_iterations,
    calc_liquidation_keeper_fee,
    calc_transaction_cost_usd,
    keeper_fee_with_margin,
)
from .order_fees import OrderFees, calc_order_fee_ratios, calc_order_fees
from .pricing import calc_fill_price, calc_pnl
from .side import is_same_side
from .types import (
    CollateralDiscountConfig,
    FlagReward,
    GlobalKeeperConfig,
    MarketFeeConfig,
    MarketLiquidationConfig,
    MarketSnapshot,
    OracleReading,
    OrderFeeRatios,
    OrderIntent,
    PositionSnapshot,
)

__all__ = [
    "WAD",
    "clamp",
    "div_ceil",
    "div_wad",
    "from_wad",
    "mul_wad",
    "to_wad",
    "is_same_side",
    "calc_fill_price",
    "calc_pnl",
    "OrderFees",
    "calc_order_fee_ratios",
    "calc_order_fees",
    "KeeperSettlementFee",
    "bounded_keeper_fee",
    "calc_flag_reward",
    "calc_keeper_settlement_fee",
    "calc_liquidation_iterations",
    "calc_liquidation_keeper_fee",
    "calc_transaction_cost_usd",
    "keeper_fee_with_margin",
    "calc_collateral_discount",
    "calc_discounted_collateral_price",
    "CollateralDiscountConfig",
    "FlagReward",
    "GlobalKeeperConfig",
    "MarketFeeConfig",
    "MarketLiquidationConfig",
    "MarketSnapshot",
    "OracleReading",
    "OrderFeeRatios",
    "OrderIntent",
    "PositionSnapshot",
    "PricingError",
    "InvalidOrderError",
    "ConfigurationError",
]
