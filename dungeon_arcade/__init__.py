"""A terminal dungeon walk, a shop, a boss fight and a set of mini-games."""

__version__ = "0.1.0"