"""Cards, board, player state and the JSON message protocol of a Dominion card game."""

__version__ = "0.1.0"