"""Keeper compensation in USD.

Every keeper payment starts from the same quantity, the USD cost of the
keeper's transaction, and goes through one bounding function:

    cost   = gas_units * base_fee_per_gas * eth_price
    fee    = cost * (1 + margin_percent)            (settlement)
           = max(cost * (1 + margin_percent),
                 cost + margin_usd)                 (flag, liquidation)
    result = clamp(fee + reward, min_fee, max_fee)

Settlement is bounded on both sides. Flag and liquidation are only capped
from above; liquidation then multiplies the capped per-call fee by the number
of calls needed to liquidate the whole position, so the total may exceed the
cap.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError
from .fixed_point import GWEI_PER_ETH, WAD, clamp, div_ceil, div_trunc, mul_wad
from .types import FlagReward, GlobalKeeperConfig, MarketLiquidationConfig, OracleReading, PositionSnapshot


def calc_transaction_cost_usd(base_fee_per_gas: int, gas_units: int, eth_price: int) -> int:
    """USD cost (wad) of spending ``gas_units`` at ``base_fee_per_gas`` gwei.

    The gwei->ETH scale is applied here and nowhere else; the product is
    truncated once, at the end.
    """
    return div_trunc(gas_units * base_fee_per_gas * eth_price, GWEI_PER_ETH * WAD)


def keeper_fee_with_margin(
    execution_cost_usd: int,
    profit_margin_percent: int,
    profit_margin_usd: int | None = None,
) -> int:
    """Cost plus profit margin, before any bounds.

    With ``profit_margin_usd`` the larger of the percentage and flat margins wins.
    """
    fee = mul_wad(execution_cost_usd, WAD + profit_margin_percent)
    if profit_margin_usd is not None:
        fee = max(fee, execution_cost_usd + profit_margin_usd)
    return fee


def bounded_keeper_fee(
    gas_units: int,
    base_fee_per_gas: int,
    eth_price: int,
    *,
    profit_margin_percent: int,
    max_fee_usd: int,
    min_fee_usd: int = 0,
    profit_margin_usd: int | None = None,
    reward_usd: int = 0,
) -> int:
    """Keeper fee for one transaction, clamped to ``[min_fee_usd, max_fee_usd]``."""
    cost = calc_transaction_cost_usd(base_fee_per_gas, gas_units, eth_price)
    fee = keeper_fee_with_margin(cost, profit_margin_percent, profit_margin_usd)
    return clamp(fee + reward_usd, min_fee_usd, max_fee_usd)


def calc_keeper_settlement_fee(
    keeper_config: GlobalKeeperConfig,
    base_fee_per_gas: int,
    eth_price: int,
    keeper_fee_buffer_usd: int = 0,
) -> int:
    """Fee paid to the keeper that settles an order.

    The caller's buffer is added to the percentage margin.
    """
    return bounded_keeper_fee(
        keeper_config.keeper_settlement_gas_units,
        base_fee_per_gas,
        eth_price,
        profit_margin_percent=keeper_config.keeper_profit_margin_percent + keeper_fee_buffer_usd,
        min_fee_usd=keeper_config.min_keeper_fee_usd,
        max_fee_usd=keeper_config.max_keeper_fee_usd,
    )


@dataclass(frozen=True)
class KeeperSettlementFee:
    """Settlement fee with everything bound except the settling block's base fee.

    The base fee is only known when the order is settled, so quotes carry this
    object and call ``evaluate`` (or the object itself) later.
    """

    keeper_config: GlobalKeeperConfig
    eth_price_usd: int
    keeper_fee_buffer_usd: int = 0

    def evaluate(self, base_fee_per_gas: int) -> int:
        return calc_keeper_settlement_fee(
            self.keeper_config,
            base_fee_per_gas,
            self.eth_price_usd,
            self.keeper_fee_buffer_usd,
        )

    def __call__(self, base_fee_per_gas: int) -> int:
        return self.evaluate(base_fee_per_gas)


def calc_flag_reward(
    oracle: OracleReading,
    position: PositionSnapshot,
    keeper_config: GlobalKeeperConfig,
    liquidation_config: MarketLiquidationConfig,
) -> FlagReward:
    """Reward for flagging ``position`` for liquidation.

    Gas cost with the better of the two margins, plus a share of the position's
    notional, capped at ``max_keeper_fee_usd``.
    """
    cost = calc_transaction_cost_usd(
        oracle.base_fee_per_gas, keeper_config.keeper_flag_gas_units, oracle.eth_price_usd
    )
    flag_fee = keeper_fee_with_margin(
        cost, keeper_config.keeper_profit_margin_percent, keeper_config.keeper_profit_margin_usd
    )
    size_reward = mul_wad(
        mul_wad(position.size_abs, position.price), liquidation_config.liquidation_reward_percent
    )
    # Inputs are non-negative, so the lower bound of 0 never binds.
    result = clamp(flag_fee + size_reward, 0, keeper_config.max_keeper_fee_usd)
    return FlagReward(
        execution_cost_usd=cost,
        flag_fee_usd=flag_fee,
        size_reward_usd=size_reward,
        uncapped_usd=flag_fee + size_reward,
        result=result,
    )


def calc_liquidation_iterations(size_abs: int, max_liquidation_capacity: int) -> int:
    """Number of liquidation calls needed: ``ceil(size_abs / capacity)``."""
    if size_abs == 0:
        return 0
    if max_liquidation_capacity <= 0:
        raise ConfigurationError(
            f"max_liquidation_capacity must be positive: {max_liquidation_capacity}"
        )
    return div_ceil(size_abs, max_liquidation_capacity)


def calc_liquidation_keeper_fee(
    oracle: OracleReading,
    size_abs: int,
    max_liquidation_capacity: int,
    keeper_config: GlobalKeeperConfig,
) -> int:
    """Total fee for liquidating ``size_abs``; zero for an empty position.

    The per-call fee is capped at ``max_keeper_fee_usd``; the total is that
    times the number of calls.
    """
    iterations = calc_liquidation_iterations(size_abs, max_liquidation_capacity)
    if iterations == 0:
        return 0
    per_iteration = bounded_keeper_fee(
        keeper_config.keeper_liquidation_gas_units,
        oracle.base_fee_per_gas,
        oracle.eth_price_usd,
        profit_margin_percent=keeper_config.keeper_profit_margin_percent,
        profit_margin_usd=keeper_config.keeper_profit_margin_usd,
        max_fee_usd=keeper_config.max_keeper_fee_usd,
    )
    return per_iteration * iterations
