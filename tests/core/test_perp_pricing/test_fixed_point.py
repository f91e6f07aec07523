"""Tests for perp_pricing/core/fixed_point.py — wad arithmetic and conversion."""

from decimal import Decimal

import pytest

from perp_pricing.core.errors import ConfigurationError
from perp_pricing.core.fixed_point import (
    WAD,
    clamp,
    div_ceil,
    div_trunc,
    div_wad,
    from_wad,
    mul_wad,
    to_wad,
)


# ---------------------------------------------------------------------------
# Division rounding
# ---------------------------------------------------------------------------

class TestDivTrunc:
    def test_positive(self):
        assert div_trunc(7, 2) == 3

    def test_negative_numerator_truncates_toward_zero(self):
        # floor division would give -4
        assert div_trunc(-7, 2) == -3

    def test_negative_denominator(self):
        assert div_trunc(7, -2) == -3

    def test_both_negative(self):
        assert div_trunc(-7, -2) == 3

    def test_zero_divisor(self):
        with pytest.raises(ZeroDivisionError):
            div_trunc(1, 0)


class TestMulDivWad:
    def test_mul(self):
        assert mul_wad(to_wad("1.5"), to_wad(2)) == to_wad(3)

    def test_mul_truncates_toward_zero(self):
        assert mul_wad(-1, 1) == 0
        assert mul_wad(1, 1) == 0

    def test_div(self):
        assert div_wad(to_wad(3), to_wad(2)) == to_wad("1.5")

    def test_div_third(self):
        assert div_wad(WAD, 3 * WAD) == 333_333_333_333_333_333

    def test_div_negative_third(self):
        assert div_wad(-WAD, 3 * WAD) == -333_333_333_333_333_333


class TestDivCeil:
    def test_exact(self):
        assert div_ceil(20 * WAD, 10 * WAD) == 2

    def test_rounds_up(self):
        assert div_ceil(25 * WAD, 10 * WAD) == 3

    def test_one_unit_over(self):
        assert div_ceil(10 * WAD + 1, 10 * WAD) == 2

    def test_zero(self):
        assert div_ceil(0, 10) == 0

    def test_negative_numerator_rejected(self):
        with pytest.raises(ValueError):
            div_ceil(-1, 10)

    def test_zero_denominator_rejected(self):
        with pytest.raises(ValueError):
            div_ceil(1, 0)


# ---------------------------------------------------------------------------
# Clamp
# ---------------------------------------------------------------------------

class TestClamp:
    def test_inside(self):
        assert clamp(5, 0, 10) == 5

    def test_below(self):
        assert clamp(-1, 0, 10) == 0

    def test_above(self):
        assert clamp(11, 0, 10) == 10

    def test_degenerate_range(self):
        assert clamp(11, 7, 7) == 7

    def test_inverted_bounds_raise(self):
        with pytest.raises(ConfigurationError):
            clamp(5, 10, 0)


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

class TestToWad:
    def test_int_is_whole_units(self):
        assert to_wad(2) == 2 * WAD

    def test_decimal_string(self):
        assert to_wad("0.0005") == 500_000_000_000_000

    def test_negative_string(self):
        assert to_wad("-1.25") == -1_250_000_000_000_000_000

    def test_smallest_unit(self):
        assert to_wad(Decimal("1e-18")) == 1

    def test_too_many_decimals(self):
        with pytest.raises(ValueError):
            to_wad("1e-19")

    def test_float_rejected(self):
        with pytest.raises(TypeError):
            to_wad(0.1)  # type: ignore[arg-type]

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            to_wad(True)

    def test_garbage_string(self):
        with pytest.raises(ValueError):
            to_wad("abc")

    def test_nan(self):
        with pytest.raises(ValueError):
            to_wad("NaN")


class TestFromWad:
    def test_exact(self):
        assert from_wad(to_wad("1.25")) == Decimal("1.25")

    def test_one_unit(self):
        assert from_wad(1) == Decimal("1e-18")

    def test_rejects_non_int(self):
        with pytest.raises(TypeError):
            from_wad("1")  # type: ignore[arg-type]
