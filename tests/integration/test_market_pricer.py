"""Tests for perp_pricing/integration/quotes.py — MarketPricer facade."""

from __future__ import annotations

import logging

import pytest

from perp_pricing.core.errors import InvalidOrderError
from perp_pricing.core.fixed_point import to_wad
from perp_pricing.core.types import MarketSnapshot, OracleReading, OrderIntent, PositionSnapshot
from perp_pricing.integration.config import load_default_config
from perp_pricing.integration import quotes
from perp_pricing.integration.quotes import MarketPricer

ORACLE = OracleReading(eth_price_usd=to_wad(2000), base_fee_per_gas=to_wad(10))
SNAPSHOT = MarketSnapshot(skew=0, skew_scale=to_wad(1_000_000), oracle_price=to_wad(2000))


@pytest.fixture
def pricer() -> MarketPricer:
    return MarketPricer.from_config(load_default_config(), "ETH")


class TestOrderQuote:
    def test_fill_price(self, pricer):
        assert pricer.fill_price(SNAPSHOT, to_wad(10_000)) == to_wad(2010)

    def test_quote(self, pricer):
        q = pricer.quote_order(SNAPSHOT, ORACLE, OrderIntent(size_delta=to_wad(10_000)))
        assert q.fees.fill_price == to_wad(2010)
        assert q.fees.order_fee == to_wad(12_060)
        # 1.2M gas @ 10 gwei @ $2000 = $24; * 1.3
        assert q.estimated_keeper_fee_usd == to_wad("31.2")
        assert q.total_fee_usd == to_wad("12091.2")

    def test_settlement_fee_can_be_reevaluated(self, pricer):
        q = pricer.quote_order(SNAPSHOT, ORACLE, OrderIntent(size_delta=to_wad(1)))
        assert q.fees.keeper_settlement_fee(to_wad(1000)) == to_wad(100)

    def test_zero_size_propagates(self, pricer):
        with pytest.raises(InvalidOrderError):
            pricer.quote_order(SNAPSHOT, ORACLE, OrderIntent(size_delta=0))

    def test_logs_quote(self, pricer, caplog):
        with caplog.at_level(logging.DEBUG, logger="perp_pricing.integration.quotes"):
            pricer.quote_order(SNAPSHOT, ORACLE, OrderIntent(size_delta=to_wad(10_000)))
        assert "order quote market=ETH" in caplog.text
        assert "fill_price=2010" in caplog.text

    def test_no_formatting_when_debug_disabled(self, pricer, caplog, monkeypatch):
        def fail(value):
            raise AssertionError("from_wad called with DEBUG disabled")

        monkeypatch.setattr(quotes, "from_wad", fail)
        with caplog.at_level(logging.INFO, logger="perp_pricing.integration.quotes"):
            pricer.quote_order(SNAPSHOT, ORACLE, OrderIntent(size_delta=to_wad(10_000)))
            pricer.flag_reward(ORACLE, PositionSnapshot(size_abs=to_wad(10), price=to_wad(2000)))
            pricer.liquidation_fee(ORACLE, PositionSnapshot(size_abs=to_wad(250), price=to_wad(2000)))
        assert not [r for r in caplog.records if r.name == "perp_pricing.integration.quotes"]


class TestKeeperQuotes:
    def test_flag_reward(self, pricer):
        r = pricer.flag_reward(ORACLE, PositionSnapshot(size_abs=to_wad(10), price=to_wad(2000)))
        # $30 * 1.3 = 39, plus 10 * 2000 * 0.0001 = 2
        assert r.result == to_wad(41)

    def test_liquidation_fee(self, pricer):
        # capacity 100 -> 3 iterations of $44.2
        fee = pricer.liquidation_fee(ORACLE, PositionSnapshot(size_abs=to_wad(250), price=to_wad(2000)))
        assert fee == to_wad("132.6")

    def test_liquidation_fee_empty_position(self, pricer):
        assert pricer.liquidation_fee(ORACLE, PositionSnapshot(size_abs=0, price=to_wad(2000))) == 0


class TestCollateral:
    def test_discounted_price(self, pricer):
        assert pricer.discounted_collateral_price(to_wad(1000), to_wad(100), to_wad(1000)) == to_wad(950)

    def test_min_discount(self, pricer):
        assert pricer.discounted_collateral_price(to_wad(1000), 0, to_wad(1000)) == to_wad(990)


def test_unknown_market():
    with pytest.raises(KeyError):
        MarketPricer.from_config(load_default_config(), "DOGE")
