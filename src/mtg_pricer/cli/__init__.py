"""Command-line interface for the deck pricer."""
