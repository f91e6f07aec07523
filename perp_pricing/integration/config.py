"""
Pricing configuration loaded from YAML.

Layout:

    keeper:
      keeper_settlement_gas_units: 1200000
      keeper_profit_margin_percent: "0.3"
      ...
    markets:
      ETH:
        maker_fee: "0.0002"
        ...
    collateral:
      min_discount: "0.01"
      max_discount: "0.05"

Decimal quantities are converted exactly to wad. Write fractional values as
quoted strings: YAML floats are binary and are rejected. Unquoted integers are
whole units (``max_keeper_fee_usd: 100`` is 100 USD).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from ..core.errors import ConfigurationError
from ..core.fixed_point import to_wad
from ..core.types import (
    CollateralDiscountConfig,
    GlobalKeeperConfig,
    MarketFeeConfig,
    MarketLiquidationConfig,
)

logger = logging.getLogger(__name__)

_GAS_FIELDS = (
    "keeper_settlement_gas_units",
    "keeper_flag_gas_units",
    "keeper_liquidation_gas_units",
)
_KEEPER_WAD_FIELDS = (
    "keeper_profit_margin_percent",
    "keeper_profit_margin_usd",
    "min_keeper_fee_usd",
    "max_keeper_fee_usd",
)
_MARKET_REQUIRED = ("maker_fee", "taker_fee")
_MARKET_OPTIONAL = ("liquidation_reward_percent", "max_liquidation_capacity")
_COLLATERAL_FIELDS = ("min_discount", "max_discount")


@dataclass(frozen=True)
class MarketConfig:
    name: str
    fees: MarketFeeConfig
    liquidation: MarketLiquidationConfig = field(default_factory=MarketLiquidationConfig)


@dataclass(frozen=True)
class PricingConfig:
    """Keeper settings plus per-market settings, keyed by market name."""

    keeper: GlobalKeeperConfig
    markets: Mapping[str, MarketConfig]
    collateral: CollateralDiscountConfig = field(default_factory=CollateralDiscountConfig)

    def market(self, name: str) -> MarketConfig:
        try:
            return self.markets[name]
        except KeyError:
            raise KeyError(f"unknown market: {name!r}") from None


def default_config_path() -> Path:
    return Path(__file__).resolve().parent / "defaults.yaml"


def _wad_field(section: str, name: str, raw: Any) -> int:
    if isinstance(raw, float):
        raise ConfigurationError(
            f"{section}.{name}: float {raw!r} is not exact; write it as a quoted decimal string"
        )
    if not isinstance(raw, (int, str, Decimal)) or isinstance(raw, bool):
        raise ConfigurationError(f"{section}.{name}: expected a decimal, got {type(raw).__name__}")
    try:
        return to_wad(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{section}.{name}: {exc}") from exc


def _gas_field(section: str, name: str, raw: Any) -> int:
    if not isinstance(raw, int) or isinstance(raw, bool):
        raise ConfigurationError(f"{section}.{name}: gas units must be an integer, got {raw!r}")
    return raw


def _check_keys(section: str, obj: Any, required: tuple[str, ...], optional: tuple[str, ...] = ()) -> None:
    if not isinstance(obj, Mapping):
        raise ConfigurationError(f"{section} must be a mapping")
    missing = [k for k in required if k not in obj]
    if missing:
        raise ConfigurationError(f"{section}: missing keys {missing}")
    unknown = sorted(set(obj) - set(required) - set(optional))
    if unknown:
        raise ConfigurationError(f"{section}: unknown keys {unknown}")


def keeper_config_from_dict(obj: Mapping[str, Any]) -> GlobalKeeperConfig:
    _check_keys("keeper", obj, _GAS_FIELDS + _KEEPER_WAD_FIELDS)
    kwargs: dict[str, int] = {}
    for name in _GAS_FIELDS:
        kwargs[name] = _gas_field("keeper", name, obj[name])
    for name in _KEEPER_WAD_FIELDS:
        kwargs[name] = _wad_field("keeper", name, obj[name])
    return GlobalKeeperConfig(**kwargs)


def market_config_from_dict(name: str, obj: Mapping[str, Any]) -> MarketConfig:
    section = f"markets.{name}"
    _check_keys(section, obj, _MARKET_REQUIRED, _MARKET_OPTIONAL)
    values = {k: _wad_field(section, k, obj[k]) for k in _MARKET_REQUIRED + _MARKET_OPTIONAL if k in obj}
    return MarketConfig(
        name=name,
        fees=MarketFeeConfig(maker_fee=values["maker_fee"], taker_fee=values["taker_fee"]),
        liquidation=MarketLiquidationConfig(
            liquidation_reward_percent=values.get("liquidation_reward_percent", 0),
            max_liquidation_capacity=values.get("max_liquidation_capacity", 0),
        ),
    )


def collateral_config_from_dict(obj: Mapping[str, Any]) -> CollateralDiscountConfig:
    _check_keys("collateral", obj, (), _COLLATERAL_FIELDS)
    return CollateralDiscountConfig(
        **{k: _wad_field("collateral", k, obj[k]) for k in _COLLATERAL_FIELDS if k in obj}
    )


def config_from_dict(obj: Mapping[str, Any]) -> PricingConfig:
    """Build a PricingConfig from a parsed mapping. Raises ConfigurationError."""
    _check_keys("config", obj, ("keeper",), ("markets", "collateral"))
    markets_raw = obj.get("markets") or {}
    if not isinstance(markets_raw, Mapping):
        raise ConfigurationError("markets must be a mapping of market name to settings")

    markets: dict[str, MarketConfig] = {}
    for name, raw in markets_raw.items():
        if not isinstance(name, str) or not name:
            raise ConfigurationError(f"market names must be non-empty strings, got {name!r}")
        markets[name] = market_config_from_dict(name, raw)

    return PricingConfig(
        keeper=keeper_config_from_dict(obj["keeper"]),
        markets=MappingProxyType(markets),
        collateral=collateral_config_from_dict(obj.get("collateral") or {}),
    )


def load_config(path: str | Path) -> PricingConfig:
    path = Path(path)
    try:
        obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"{path}: invalid YAML: {exc}") from exc
    if not isinstance(obj, Mapping):
        raise ConfigurationError(f"{path}: config YAML must be a mapping")
    config = config_from_dict(obj)
    logger.info("loaded pricing config from %s (%d markets)", path, len(config.markets))
    return config


@lru_cache(maxsize=1)
def load_default_config() -> PricingConfig:
    return load_config(default_config_path())
