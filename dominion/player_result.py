"""Final score of one player."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["PlayerResult"]


@dataclass(frozen=True)
class PlayerResult:
    """The name of a player and the score they finished with."""

    player_name: str
    score: int