"""Cheapest-printing resolution for decklist entries."""

from __future__ import annotations

import logging
from typing import Protocol

from mtg_pricer.data.models import DecklistEntry, Printing, ResolutionFailure, ResolvedCard
from mtg_pricer.exceptions import NoPriceFoundError, PricerError
from mtg_pricer.tools.pricing.rate_limit import RateLimiter

logger = logging.getLogger(__name__)


class PriceSource(Protocol):
    """External source of card prices (implemented by `ScryfallClient`)."""

    async def find_cheapest_printing(self, card_name: str) -> Printing | None: ...


class PriceResolver:
    """Prices one entry at a time against a `PriceSource`, under a shared rate limit.

    Failures are returned as `ResolutionFailure` values, never raised, and
    nothing is retried.
    """

    def __init__(self, source: PriceSource, limiter: RateLimiter) -> None:
        self._source = source
        self._limiter = limiter

    async def resolve(self, entry: DecklistEntry) -> ResolvedCard | ResolutionFailure:
        """Find the cheapest eligible printing for `entry`."""
        await self._limiter.acquire()

        try:
            printing = await self._source.find_cheapest_printing(entry.card_name)
        except PricerError as e:
            logger.warning("Error finding card %s: %s", entry.card_name, e.message)
            return ResolutionFailure(entry=entry, kind="external_source_error", reason=e.message)

        if printing is None:
            missing = NoPriceFoundError(entry.card_name)
            logger.warning("No price found for %s", entry.card_name)
            return ResolutionFailure(entry=entry, kind="no_price_found", reason=missing.message)

        logger.debug(
            "%s: $%s (%s #%s)",
            entry.card_name,
            printing.price_usd,
            printing.set_code,
            printing.collector_number,
        )
        return ResolvedCard(
            entry=entry,
            unit_price_usd=printing.price_usd,
            printing_id=printing.id,
            set_code=printing.set_code,
            set_name=printing.set_name,
        )
