"""Data layer: pricing models and the Scryfall client."""

from mtg_pricer.data.models import (
    DecklistEntry,
    FailureKind,
    PricingReport,
    Printing,
    ResolutionFailure,
    ResolvedCard,
)
from mtg_pricer.data.scryfall import ScryfallClient

__all__ = [
    "DecklistEntry",
    "FailureKind",
    "PricingReport",
    "Printing",
    "ResolutionFailure",
    "ResolvedCard",
    "ScryfallClient",
]
