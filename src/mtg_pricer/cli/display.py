"""Rich rendering of decklists and pricing reports."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mtg_pricer.data.models import DecklistEntry, PricingReport


def format_usd(value: Decimal) -> str:
    """Format a dollar amount with two decimals."""
    return f"${value:,.2f}"


def print_entries(console: Console, entries: Sequence[DecklistEntry]) -> None:
    """Print a validated decklist in processing order."""
    table = Table(title="Decklist")
    table.add_column("Qty", justify="right", style="cyan")
    table.add_column("Card")

    for entry in entries:
        table.add_row(str(entry.quantity), escape(entry.card_name))

    console.print(table)
    total = sum(entry.quantity for entry in entries)
    console.print(f"[green]Valid:[/] {len(entries)} entries, {total} cards")


def print_report(console: Console, report: PricingReport) -> None:
    """Print priced cards, unresolved entries and the total."""
    if report.resolved:
        table = Table(title="Cheapest Printings")
        table.add_column("Qty", justify="right", style="cyan")
        table.add_column("Card")
        table.add_column("Set", style="dim")
        table.add_column("Unit", justify="right")
        table.add_column("Total", justify="right", style="green")

        for card in report.resolved:
            table.add_row(
                str(card.entry.quantity),
                escape(card.entry.card_name),
                (card.set_code or "").upper(),
                format_usd(card.unit_price_usd),
                format_usd(card.line_total_usd),
            )
        console.print(table)

    if report.failures:
        console.print("\n[yellow]Unresolved:[/]")
        for failure in report.failures:
            console.print(
                f"  • {failure.entry.quantity} {escape(failure.entry.card_name)}: "
                f"[dim]{escape(failure.reason)}[/dim]"
            )

    if report.is_partial:
        console.print(
            f"\n[bold]Total:[/] at least [green]{format_usd(report.total_usd)}[/] "
            f"({len(report.failures)} entries unpriced)"
        )
    else:
        console.print(f"\n[bold]Total:[/] [green]{format_usd(report.total_usd)}[/]")
