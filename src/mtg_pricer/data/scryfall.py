"""Scryfall API client for cheapest-printing lookups."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import aclosing
from decimal import InvalidOperation
from typing import Any

import httpx
from pydantic import ValidationError

from mtg_pricer.config import Settings, get_settings
from mtg_pricer.data.models import Printing
from mtg_pricer.exceptions import ScryfallError

logger = logging.getLogger(__name__)


def build_price_query(card_name: str) -> str:
    """Build the Scryfall search for paper printings of one exact name with a USD price."""
    escaped = card_name.replace("\\", "\\\\").replace('"', '\\"')
    return f'!"{escaped}" -is:digital usd>0'


class ScryfallClient:
    """Async client for the Scryfall card search endpoint.

    Use as an async context manager, or pass an existing `httpx.AsyncClient`
    (which the caller then owns and closes).
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self._settings.scryfall_api_url,
            timeout=httpx.Timeout(self._settings.request_timeout_seconds),
            headers={
                "User-Agent": self._settings.user_agent,
                "Accept": "application/json",
            },
            follow_redirects=True,
        )

    async def __aenter__(self) -> ScryfallClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client if we created it."""
        if self._owns_client:
            await self._client.aclose()

    async def _get_page(self, url: str, params: dict[str, str] | None) -> dict[str, Any] | None:
        """Fetch one result page. Returns None when Scryfall reports no matches."""
        try:
            response = await self._client.get(url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ScryfallError(f"Scryfall request failed: {e}") from e

        if response.status_code == 404:
            return None
        if response.is_error:
            raise ScryfallError(_error_details(response), status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise ScryfallError("Scryfall returned a malformed response") from e
        if not isinstance(payload, dict) or not isinstance(payload.get("data", []), list):
            raise ScryfallError("Scryfall returned a malformed response")
        return payload

    async def search_printings(self, card_name: str) -> AsyncGenerator[Printing, None]:
        """Yield eligible printings of `card_name`, cheapest first.

        Pages are only fetched as the caller keeps iterating.
        """
        url: str | None = "/cards/search"
        params: dict[str, str] | None = {
            "q": build_price_query(card_name),
            "order": "usd",
            "dir": "asc",
            "unique": "prints",
            "include_extras": "false",
            "include_variations": "false",
        }
        while url:
            logger.debug("GET %s %s", url, params or "")
            payload = await self._get_page(url, params)
            if payload is None:
                return

            for item in payload.get("data", []):
                try:
                    printing = Printing.from_scryfall(item)
                except (KeyError, TypeError, AttributeError, InvalidOperation, ValidationError) as e:
                    raise ScryfallError(f"Unexpected card data from Scryfall: {e}") from e
                if printing is not None:
                    yield printing

            # next_page is absolute and already carries the query
            url = payload.get("next_page") if payload.get("has_more") else None
            params = None

    async def find_cheapest_printing(self, card_name: str) -> Printing | None:
        """Return the cheapest eligible printing of `card_name`, or None."""
        async with aclosing(self.search_printings(card_name)) as printings:
            async for printing in printings:
                return printing
        return None


def _error_details(response: httpx.Response) -> str:
    """Extract Scryfall's error details from a failed response."""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    details = payload.get("details") if isinstance(payload, dict) else None
    return str(details) if details else f"Scryfall returned HTTP {response.status_code}"
