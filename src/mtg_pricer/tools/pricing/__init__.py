"""Decklist pricing tools."""

from mtg_pricer.tools.pricing.aggregate import aggregate_prices
from mtg_pricer.tools.pricing.normalize import entry_sort_key, normalize_entries
from mtg_pricer.tools.pricing.parser import (
    EntryParser,
    parse_decklist,
    read_decklist,
    split_decklist,
)
from mtg_pricer.tools.pricing.pipeline import ProgressCallback, prepare_decklist, price_decklist
from mtg_pricer.tools.pricing.rate_limit import IntervalRateLimiter, NoopRateLimiter, RateLimiter
from mtg_pricer.tools.pricing.resolver import PriceResolver, PriceSource

__all__ = [
    "EntryParser",
    "IntervalRateLimiter",
    "NoopRateLimiter",
    "PriceResolver",
    "PriceSource",
    "ProgressCallback",
    "RateLimiter",
    "aggregate_prices",
    "entry_sort_key",
    "normalize_entries",
    "parse_decklist",
    "prepare_decklist",
    "price_decklist",
    "read_decklist",
    "split_decklist",
]
