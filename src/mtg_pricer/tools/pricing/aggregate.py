"""Decklist price totals."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from mtg_pricer.data.models import ResolvedCard


def aggregate_prices(resolved: Iterable[ResolvedCard]) -> Decimal:
    """Sum quantity times unit price over resolved cards.

    Unresolved entries are not part of the input, so with failures present the
    result is a lower bound.
    """
    return sum((card.line_total_usd for card in resolved), Decimal("0"))
