"""Decklist pricing pipeline: parse, order, resolve, total."""

from __future__ import annotations

import logging
from collections.abc import Callable

from mtg_pricer.data.models import DecklistEntry, PricingReport, ResolutionFailure, ResolvedCard
from mtg_pricer.tools.pricing.aggregate import aggregate_prices
from mtg_pricer.tools.pricing.normalize import normalize_entries
from mtg_pricer.tools.pricing.parser import EntryParser, parse_decklist
from mtg_pricer.tools.pricing.rate_limit import IntervalRateLimiter, RateLimiter
from mtg_pricer.tools.pricing.resolver import PriceResolver, PriceSource

logger = logging.getLogger(__name__)

# Called with (1-based index, total entries, entry) before each entry is resolved
ProgressCallback = Callable[[int, int, DecklistEntry], None]


def prepare_decklist(raw_text: str, parser: EntryParser | None = None) -> list[DecklistEntry]:
    """Parse and order a decklist without pricing it.

    Raises:
        DecklistValidationError: On the first malformed line
    """
    return normalize_entries(parse_decklist(raw_text, parser))


async def price_decklist(
    source: PriceSource,
    raw_text: str,
    request_interval_ms: int,
    *,
    limiter: RateLimiter | None = None,
    progress_callback: ProgressCallback | None = None,
) -> PricingReport:
    """Price every entry of a decklist at its cheapest eligible printing.

    The whole list is validated before the first request. Entries are then
    resolved one at a time in normalized order, at most one request per
    `request_interval_ms`. A card that cannot be priced ends up in
    `PricingReport.failures` and does not stop the run.

    Args:
        source: Where prices come from (normally a `ScryfallClient`)
        raw_text: Decklist text, one `<quantity> <card name>` per line
        request_interval_ms: Minimum gap between the start of two lookups
        limiter: Overrides the limiter built from `request_interval_ms`
        progress_callback: Notified before each entry is resolved

    Returns:
        PricingReport with resolved cards, failures and the total

    Raises:
        DecklistValidationError: On the first malformed line; no lookups are made
        ValueError: If `request_interval_ms` is not positive
    """
    if request_interval_ms <= 0:
        raise ValueError(f"request_interval_ms must be positive, got {request_interval_ms}")

    entries = prepare_decklist(raw_text)
    logger.info("Pricing %d entries", len(entries))

    resolver = PriceResolver(source, limiter or IntervalRateLimiter(request_interval_ms))
    resolved: list[ResolvedCard] = []
    failures: list[ResolutionFailure] = []

    for index, entry in enumerate(entries, start=1):
        logger.info("Resolving %s", entry.card_name)
        if progress_callback is not None:
            progress_callback(index, len(entries), entry)

        outcome = await resolver.resolve(entry)
        if isinstance(outcome, ResolutionFailure):
            failures.append(outcome)
        else:
            resolved.append(outcome)

    total = aggregate_prices(resolved)
    if failures:
        logger.warning(
            "%d of %d entries could not be priced; total $%s is a lower bound",
            len(failures),
            len(entries),
            total,
        )

    return PricingReport(resolved=tuple(resolved), failures=tuple(failures), total_usd=total)
