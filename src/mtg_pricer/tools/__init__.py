"""Decklist tools."""
