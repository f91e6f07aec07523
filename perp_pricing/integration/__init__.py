"""
Configuration loading and quoting on top of `perp_pricing.core`.
"""

from .config import (
    MarketConfig,
    PricingConfig,
    config_from_dict,
    default_config_path,
    load_config,
    load_default_config,
)
from .quotes import MarketPricer, OrderQuote

__all__ = [
    "MarketConfig",
    "PricingConfig",
    "config_from_dict",
    "default_config_path",
    "load_config",
    "load_default_config",
    "MarketPricer",
    "OrderQuote",
]
