"""Shared helpers for CLI commands."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any


def configure_logging(level: str) -> None:
    """Send log records to stderr at the given level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(levelname)s:%(name)s:%(message)s",
        force=True,
    )


def run_async(coro: Any) -> Any:
    """Run async coroutine in sync context."""
    return asyncio.run(coro)


def output_json(data: Any) -> None:
    """Output data as JSON (plain text, no Rich formatting)."""
    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")
    # Use regular print, not rprint, to avoid ANSI codes in JSON output
    print(json.dumps(data, indent=2, default=str))
