"""
Perpetual-futures pricing and keeper fee calculations.

- `perp_pricing.core`: pure, integer-only (18-decimal fixed point) formulas.
- `perp_pricing.integration`: configuration loading and a quoting facade.
"""

__version__ = "0.1.0"
