"""Pytest fixtures for deck pricer tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from mtg_pricer.data.models import Printing
from mtg_pricer.exceptions import ScryfallError


class FakePriceSource:
    """In-memory price source that records every lookup."""

    def __init__(
        self,
        prices: dict[str, str] | None = None,
        errors: dict[str, str] | None = None,
    ) -> None:
        self.prices = {name.lower(): Decimal(p) for name, p in (prices or {}).items()}
        self.errors = {name.lower(): msg for name, msg in (errors or {}).items()}
        self.calls: list[str] = []

    async def find_cheapest_printing(self, card_name: str) -> Printing | None:
        self.calls.append(card_name)
        key = card_name.lower()
        if key in self.errors:
            raise ScryfallError(self.errors[key], status_code=503)
        if key not in self.prices:
            return None
        return Printing(
            id=f"id-{key.replace(' ', '-')}",
            name=card_name,
            price_usd=self.prices[key],
            set_code="tst",
            set_name="Test Set",
            collector_number="1",
        )


@pytest.fixture
def basic_lands() -> FakePriceSource:
    """Price source knowing the three basic lands used throughout the tests."""
    return FakePriceSource({"Mountain": "0.10", "Island": "0.15", "Plains": "0.07"})


@pytest.fixture
def make_source() -> type[FakePriceSource]:
    """Factory for custom in-memory price sources."""
    return FakePriceSource
