"""Dice Chess: chess where a die roll sets each turn's movement budget."""

__version__ = "0.1.0"
