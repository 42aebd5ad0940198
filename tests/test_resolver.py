"""Tests for cheapest-printing resolution."""

from __future__ import annotations

from decimal import Decimal

from mtg_pricer.data.models import DecklistEntry, Printing, ResolutionFailure, ResolvedCard
from mtg_pricer.exceptions import PricerError
from mtg_pricer.tools.pricing import NoopRateLimiter, PriceResolver


class CountingLimiter:
    """Limiter that counts how often it was consulted."""

    def __init__(self) -> None:
        self.acquired = 0

    async def acquire(self) -> None:
        self.acquired += 1


class FailingSource:
    """Price source that fails with a non-Scryfall error."""

    async def find_cheapest_printing(self, card_name: str) -> Printing | None:
        raise PricerError(f"price feed unavailable for {card_name}")


class TestPriceResolver:
    """Tests for PriceResolver.resolve."""

    async def test_resolves_cheapest_printing(self, basic_lands) -> None:
        resolver = PriceResolver(basic_lands, NoopRateLimiter())
        entry = DecklistEntry(quantity=3, card_name="Mountain")

        result = await resolver.resolve(entry)

        assert isinstance(result, ResolvedCard)
        assert result.entry == entry
        assert result.unit_price_usd == Decimal("0.10")
        assert result.printing_id == "id-mountain"
        assert result.set_code == "tst"
        assert result.line_total_usd == Decimal("0.30")

    async def test_missing_price_is_a_failure(self, basic_lands) -> None:
        resolver = PriceResolver(basic_lands, NoopRateLimiter())
        entry = DecklistEntry(quantity=1, card_name="NonExistentCard")

        result = await resolver.resolve(entry)

        assert isinstance(result, ResolutionFailure)
        assert result.kind == "no_price_found"
        assert result.reason == "No price found for NonExistentCard"
        assert result.entry == entry

    async def test_source_error_is_a_failure(self, make_source) -> None:
        source = make_source(errors={"Sol Ring": "Scryfall is down for maintenance"})
        resolver = PriceResolver(source, NoopRateLimiter())

        result = await resolver.resolve(DecklistEntry(quantity=1, card_name="Sol Ring"))

        assert isinstance(result, ResolutionFailure)
        assert result.kind == "external_source_error"
        assert result.reason == "Scryfall is down for maintenance"

    async def test_no_retry_after_error(self, make_source) -> None:
        source = make_source(errors={"Sol Ring": "boom"})
        resolver = PriceResolver(source, NoopRateLimiter())
        await resolver.resolve(DecklistEntry(quantity=1, card_name="Sol Ring"))
        assert source.calls == ["Sol Ring"]

    async def test_consults_limiter_before_every_lookup(self, basic_lands) -> None:
        limiter = CountingLimiter()
        resolver = PriceResolver(basic_lands, limiter)

        await resolver.resolve(DecklistEntry(quantity=1, card_name="Island"))
        await resolver.resolve(DecklistEntry(quantity=1, card_name="Nope"))

        assert limiter.acquired == 2
        assert basic_lands.calls == ["Island", "Nope"]

    async def test_any_pricer_error_is_a_failure(self) -> None:
        resolver = PriceResolver(FailingSource(), NoopRateLimiter())

        result = await resolver.resolve(DecklistEntry(quantity=2, card_name="Sol Ring"))

        assert isinstance(result, ResolutionFailure)
        assert result.kind == "external_source_error"
        assert result.reason == "price feed unavailable for Sol Ring"
