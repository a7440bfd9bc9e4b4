"""Tests for MEXC channel and market identifiers."""

import pytest

from marketfeed.adapters.mexc.channel import MexcChannel
from marketfeed.adapters.mexc.market import market_for, mexc_market
from marketfeed.adapters.mexc.subscription import ExchangeSub
from marketfeed.enums import ExchangeId, MexcAggInterval, SubKind
from marketfeed.model.instrument import MarketDataInstrument, Subscription


class TestMexcMarket:
    """Test market symbol derivation."""

    def test_concatenates_and_uppercases(self) -> None:
        """Test base and quote are joined without separator and upper-cased."""
        assert mexc_market("eth", "usdt") == "ETHUSDT"
        assert mexc_market("BTC", "usdc") == "BTCUSDC"

    def test_is_deterministic(self) -> None:
        """Test the same pair always yields the same symbol."""
        assert mexc_market("sol", "usdt") == mexc_market("sol", "usdt")

    def test_market_for_instrument(self) -> None:
        """Test derivation from an instrument model."""
        instrument = MarketDataInstrument(base="btc", quote="usdt")
        assert market_for(instrument) == "BTCUSDT"


class TestMexcChannel:
    """Test channel selection per subscription kind."""

    def test_trades_use_aggregated_deals(self) -> None:
        """Test trades select the aggregated deals protobuf channel."""
        channel = MexcChannel.for_kind(SubKind.PUBLIC_TRADES)
        assert channel.value == "spot@public.aggre.deals.v3.api.pb"

    def test_l1_uses_aggregated_book_ticker(self) -> None:
        """Test top-of-book selects the aggregated book ticker channel."""
        channel = MexcChannel.for_kind(SubKind.ORDER_BOOKS_L1)
        assert channel.value == "spot@public.aggre.bookTicker.v3.api.pb"


class TestExchangeSub:
    """Test the (channel, market) pair."""

    def test_from_subscription(self) -> None:
        """Test channel and market are derived from a subscription."""
        subscription = Subscription(
            exchange=ExchangeId.MEXC,
            instrument=MarketDataInstrument(base="eth", quote="usdt"),
            kind=SubKind.PUBLIC_TRADES,
        )

        sub = ExchangeSub.from_subscription(subscription)

        assert sub.channel == "spot@public.aggre.deals.v3.api.pb"
        assert sub.market == "ETHUSDT"

    def test_topic_grammar(self) -> None:
        """Test the topic is channel@interval@market."""
        sub = ExchangeSub(channel=MexcChannel.AGGREGATED_TRADES, market="BTCUSDT")

        assert (
            sub.topic(MexcAggInterval.MS10)
            == "spot@public.aggre.deals.v3.api.pb@10ms@BTCUSDT"
        )

    def test_is_immutable_and_hashable(self) -> None:
        """Test pairs are frozen values usable as keys."""
        sub = ExchangeSub(channel="C", market="BTCUSDT")

        with pytest.raises(ValueError):
            sub.market = "ETHUSDT"  # type: ignore[misc]
        assert {sub: 1}[ExchangeSub(channel="C", market="BTCUSDT")] == 1
