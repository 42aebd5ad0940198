"""MTG deck pricer - price a decklist from the cheapest paper printings on Scryfall."""

__version__ = "0.1.0"
