"""Models for decklist entries and pricing results."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

# Kinds of per-entry resolution failure
FailureKind = Literal["no_price_found", "external_source_error"]

# Largest quantity a decklist line may carry (unsigned 32-bit)
MAX_QUANTITY = 2**32 - 1


class DecklistEntry(BaseModel):
    """One parsed `<quantity> <card name>` line."""

    model_config = ConfigDict(frozen=True)

    quantity: int = Field(..., ge=0, le=MAX_QUANTITY, description="Number of copies")
    card_name: str = Field(..., min_length=1, description="Card name as written, trimmed")


class Printing(BaseModel):
    """A single paper printing of a card with its USD market price."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price_usd: Decimal = Field(..., gt=0)
    set_code: str | None = None
    set_name: str | None = None
    collector_number: str | None = None
    scryfall_uri: str | None = None

    @classmethod
    def from_scryfall(cls, data: dict[str, Any]) -> Printing | None:
        """Build from a Scryfall card object.

        Returns None for digital printings and printings without a positive USD price.
        """
        if data.get("digital"):
            return None
        raw_price = (data.get("prices") or {}).get("usd")
        if not raw_price:
            return None
        price = Decimal(raw_price)
        if price <= 0:
            return None
        return cls(
            id=data["id"],
            name=data["name"],
            price_usd=price,
            set_code=data.get("set"),
            set_name=data.get("set_name"),
            collector_number=data.get("collector_number"),
            scryfall_uri=data.get("scryfall_uri"),
        )


class ResolvedCard(BaseModel):
    """A decklist entry priced at its cheapest eligible printing."""

    model_config = ConfigDict(frozen=True)

    entry: DecklistEntry
    unit_price_usd: Decimal = Field(..., gt=0)
    printing_id: str
    set_code: str | None = None
    set_name: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def line_total_usd(self) -> Decimal:
        """Quantity times unit price."""
        return self.entry.quantity * self.unit_price_usd


class ResolutionFailure(BaseModel):
    """A decklist entry that could not be priced."""

    model_config = ConfigDict(frozen=True)

    entry: DecklistEntry
    kind: FailureKind
    reason: str


class PricingReport(BaseModel):
    """Result of pricing a whole decklist.

    `total_usd` only covers `resolved`; when `failures` is non-empty it is a
    lower bound on the list's value (see `is_partial`).
    """

    model_config = ConfigDict(frozen=True)

    resolved: tuple[ResolvedCard, ...] = ()
    failures: tuple[ResolutionFailure, ...] = ()
    total_usd: Decimal = Decimal("0")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_partial(self) -> bool:
        """True when some entries are missing from the total."""
        return bool(self.failures)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def card_count(self) -> int:
        """Number of priced copies."""
        return sum(card.entry.quantity for card in self.resolved)
