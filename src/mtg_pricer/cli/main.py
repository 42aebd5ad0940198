"""mtg-price - price a decklist from the cheapest paper printings on Scryfall."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from mtg_pricer.cli.context import configure_logging, output_json, run_async
from mtg_pricer.cli.display import print_entries, print_report
from mtg_pricer.config import get_settings
from mtg_pricer.data.models import DecklistEntry, PricingReport
from mtg_pricer.data.scryfall import ScryfallClient
from mtg_pricer.exceptions import DecklistValidationError
from mtg_pricer.tools.pricing import prepare_decklist, price_decklist, read_decklist

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

cli = typer.Typer(
    name="mtg-price",
    help="MTG deck pricer - total a decklist at its cheapest paper printings.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

DecklistArg = Annotated[
    Path,
    typer.Argument(help="Decklist file, one '<quantity> <card name>' per line ('-' for stdin)"),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Output JSON")]


@cli.callback()
def main(
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Logging level (default from LOG_LEVEL)"),
    ] = None,
) -> None:
    """MTG deck pricer - total a decklist at its cheapest paper printings."""
    configure_logging(log_level or get_settings().log_level)


def _load(decklist: Path) -> str:
    try:
        return read_decklist(decklist)
    except (FileNotFoundError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(code=1) from e


def _fail_validation(error: DecklistValidationError) -> typer.Exit:
    logger.error("Invalid decklist: %s", error.message)
    err_console.print(f"[red]Invalid decklist:[/] {escape(error.message)}")
    return typer.Exit(code=1)


@cli.command()
def validate(decklist: DecklistArg, as_json: JsonOption = False) -> None:
    """Check a decklist without looking up any prices."""
    raw_text = _load(decklist)

    try:
        entries = prepare_decklist(raw_text)
    except DecklistValidationError as e:
        raise _fail_validation(e) from e

    if as_json:
        output_json([entry.model_dump() for entry in entries])
    else:
        print_entries(console, entries)


@cli.command()
def price(
    decklist: DecklistArg,
    interval_ms: Annotated[
        int | None,
        typer.Option(
            "--interval-ms",
            min=1,
            help="Minimum milliseconds between Scryfall requests (default from REQUEST_INTERVAL_MS)",
        ),
    ] = None,
    as_json: JsonOption = False,
) -> None:
    """Price a decklist at the cheapest non-digital printing of each card."""
    settings = get_settings()
    raw_text = _load(decklist)
    interval = interval_ms or settings.request_interval_ms

    async def _run() -> PricingReport:
        async with ScryfallClient(settings) as client:
            if as_json:
                return await price_decklist(client, raw_text, interval)

            with err_console.status("Pricing decklist...") as status:

                def on_progress(index: int, total: int, entry: DecklistEntry) -> None:
                    status.update(f"[{index}/{total}] {escape(entry.card_name)}")

                return await price_decklist(
                    client, raw_text, interval, progress_callback=on_progress
                )

    try:
        report = run_async(_run())
    except DecklistValidationError as e:
        raise _fail_validation(e) from e

    if as_json:
        output_json(report)
    else:
        print_report(console, report)


if __name__ == "__main__":
    cli()
