"""Deterministic ordering of decklist entries."""

from __future__ import annotations

from collections.abc import Iterable

from mtg_pricer.data.models import DecklistEntry


def entry_sort_key(entry: DecklistEntry) -> tuple[str, int, str]:
    """Sort by lower-cased name, then quantity, then exact name for a total order."""
    return (entry.card_name.lower(), entry.quantity, entry.card_name)


def normalize_entries(entries: Iterable[DecklistEntry]) -> list[DecklistEntry]:
    """Return entries in processing order.

    Duplicates are kept as separate entries; nothing is merged.
    """
    return sorted(entries, key=entry_sort_key)
