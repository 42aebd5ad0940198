"""Decklist line parsing utilities."""

from __future__ import annotations

import re
import sys
from pathlib import Path

from mtg_pricer.data.models import MAX_QUANTITY, DecklistEntry
from mtg_pricer.exceptions import InvalidFormatError, InvalidQuantityError

# "<quantity> <card name>", e.g. "3 Mountain" or "1 Emry, Lurker of the Loch"
ENTRY_PATTERN = r"^(?P<quantity>[0-9]+)\s+(?P<name>.+?)\s*$"


class EntryParser:
    """Parses single decklist lines into entries."""

    def __init__(self) -> None:
        self._pattern = re.compile(ENTRY_PATTERN, re.IGNORECASE)

    def parse(self, line: str, line_number: int | None = None) -> DecklistEntry:
        """Parse one line into a `DecklistEntry`.

        Args:
            line: Raw line text; surrounding whitespace is ignored
            line_number: 1-based position in the decklist, used in error messages

        Raises:
            InvalidFormatError: The line is not a leading integer followed by a name
            InvalidQuantityError: The quantity does not fit an unsigned 32-bit integer
        """
        match = self._pattern.match(line.strip())
        if match is None:
            raise InvalidFormatError(line, line_number)

        quantity = int(match.group("quantity"))
        if quantity > MAX_QUANTITY:
            raise InvalidQuantityError(line, line_number)

        return DecklistEntry(quantity=quantity, card_name=match.group("name").strip())


def split_decklist(text: str) -> list[tuple[int, str]]:
    """Split decklist text into (line_number, trimmed_line) pairs, skipping blank lines."""
    return [
        (number, line.strip())
        for number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]


def parse_decklist(text: str, parser: EntryParser | None = None) -> list[DecklistEntry]:
    """Parse every non-blank line of a decklist.

    Stops at the first invalid line; nothing is returned for a partially valid list.
    """
    parser = parser or EntryParser()
    return [parser.parse(line, number) for number, line in split_decklist(text)]


def read_decklist(file_path: Path | str) -> str:
    """Read decklist text from a file, or from stdin when `file_path` is "-"."""
    if str(file_path) == "-":
        return sys.stdin.read().strip()

    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Decklist file not found: {path}")

    return path.read_text(encoding="utf-8").strip()
