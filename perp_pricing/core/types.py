"""Value types for the pricing core.

All types are frozen dataclasses, constructed per call and discarded.

Units/conventions:
- Prices, sizes, skew, USD amounts and rates are wad ints (1.0 == 10**18).
- ``*_gas_units`` are plain gas counts.
- ``base_fee_per_gas`` is gwei in wad (``to_wad("0.05")`` is 0.05 gwei).
- ``skew`` and ``size_delta`` are signed (long > 0, short < 0).
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError
from .fixed_point import WAD


def _check_int(name: str, v: object) -> None:
    if not isinstance(v, int) or isinstance(v, bool):
        raise TypeError(f"{name} must be an int, got {type(v).__name__}")


def _check_non_negative(name: str, v: int) -> None:
    _check_int(name, v)
    if v < 0:
        raise ConfigurationError(f"{name} must be non-negative: {v}")


@dataclass(frozen=True)
class MarketSnapshot:
    """Market state needed to price an order."""

    skew: int
    skew_scale: int
    oracle_price: int

    def __post_init__(self) -> None:
        _check_int("skew", self.skew)
        _check_non_negative("skew_scale", self.skew_scale)
        _check_int("oracle_price", self.oracle_price)


@dataclass(frozen=True)
class MarketFeeConfig:
    maker_fee: int
    taker_fee: int

    def __post_init__(self) -> None:
        _check_non_negative("maker_fee", self.maker_fee)
        _check_non_negative("taker_fee", self.taker_fee)


@dataclass(frozen=True)
class MarketLiquidationConfig:
    """Per-market liquidation settings."""

    liquidation_reward_percent: int = 0
    max_liquidation_capacity: int = 0

    def __post_init__(self) -> None:
        _check_non_negative("liquidation_reward_percent", self.liquidation_reward_percent)
        _check_non_negative("max_liquidation_capacity", self.max_liquidation_capacity)


@dataclass(frozen=True)
class GlobalKeeperConfig:
    """Keeper compensation settings shared by every market."""

    keeper_settlement_gas_units: int
    keeper_flag_gas_units: int
    keeper_liquidation_gas_units: int
    keeper_profit_margin_percent: int
    keeper_profit_margin_usd: int
    min_keeper_fee_usd: int
    max_keeper_fee_usd: int

    def __post_init__(self) -> None:
        for name in (
            "keeper_settlement_gas_units",
            "keeper_flag_gas_units",
            "keeper_liquidation_gas_units",
            "keeper_profit_margin_percent",
            "keeper_profit_margin_usd",
            "min_keeper_fee_usd",
            "max_keeper_fee_usd",
        ):
            _check_non_negative(name, getattr(self, name))
        if self.min_keeper_fee_usd > self.max_keeper_fee_usd:
            raise ConfigurationError(
                f"min_keeper_fee_usd ({self.min_keeper_fee_usd}) exceeds "
                f"max_keeper_fee_usd ({self.max_keeper_fee_usd})"
            )


@dataclass(frozen=True)
class OracleReading:
    """ETH/USD price and block base fee, trusted as supplied."""

    eth_price_usd: int
    base_fee_per_gas: int

    def __post_init__(self) -> None:
        _check_non_negative("eth_price_usd", self.eth_price_usd)
        _check_non_negative("base_fee_per_gas", self.base_fee_per_gas)


@dataclass(frozen=True)
class OrderIntent:
    size_delta: int
    keeper_fee_buffer_usd: int = 0

    def __post_init__(self) -> None:
        # A zero size is rejected when fees are calculated, not here.
        _check_int("size_delta", self.size_delta)
        _check_non_negative("keeper_fee_buffer_usd", self.keeper_fee_buffer_usd)


@dataclass(frozen=True)
class PositionSnapshot:
    size_abs: int
    price: int

    def __post_init__(self) -> None:
        _check_non_negative("size_abs", self.size_abs)
        _check_non_negative("price", self.price)


@dataclass(frozen=True)
class OrderFeeRatios:
    """Share of an order's notional charged at the taker and maker rates."""

    taker: int
    maker: int

    @property
    def is_mixed(self) -> bool:
        return self.taker not in (0, WAD)


@dataclass(frozen=True)
class FlagReward:
    """Flag reward with its intermediate terms."""

    execution_cost_usd: int
    flag_fee_usd: int
    size_reward_usd: int
    uncapped_usd: int
    result: int


@dataclass(frozen=True)
class CollateralDiscountConfig:
    """Bounds on the discount applied to non-cash collateral (wad fractions)."""

    min_discount: int = 0
    max_discount: int = 0

    def __post_init__(self) -> None:
        _check_non_negative("min_discount", self.min_discount)
        _check_non_negative("max_discount", self.max_discount)
        if not self.min_discount <= self.max_discount <= WAD:
            raise ConfigurationError(
                f"collateral discount bounds must satisfy min <= max <= 1, "
                f"got min={self.min_discount} max={self.max_discount}"
            )
