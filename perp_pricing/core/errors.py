"""Exception types for the pricing core.

The core raises these and never catches them; callers decide what to do.
"""

from __future__ import annotations


class PricingError(Exception):
    """Base class for all pricing errors."""


class InvalidOrderError(PricingError, ValueError):
    """Raised when an order cannot be priced (e.g. a zero size delta)."""


class ConfigurationError(PricingError, ValueError):
    """Raised when configuration values are inconsistent (e.g. inverted bounds)."""
