"""Rules that decide how many victory points a card is worth at game end."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterable

__all__ = ["VictoryCardBehaviour", "ConstantVictoryPoints", "VictoryPointsPerNCards"]


class VictoryCardBehaviour(ABC):
    """Computes a card's victory points from the owner's complete deck."""

    @abstractmethod
    def victory_points(self, deck: Iterable[str]) -> int:
        """Return the points this card is worth given the whole deck."""


@dataclass(frozen=True)
class ConstantVictoryPoints(VictoryCardBehaviour):
    """A card worth a fixed number of points."""

    points: int

    def victory_points(self, deck: Iterable[str]) -> int:
        return self.points


@dataclass(frozen=True)
class VictoryPointsPerNCards(VictoryCardBehaviour):
    """A card worth ``points`` for every full set of ``per_n`` matching cards."""

    points: int
    per_n: int
    card_filter: Callable[[str], bool]

    def victory_points(self, deck: Iterable[str]) -> int:
        count = sum(1 for card_id in deck if self.card_filter(card_id))
        return self.points * (count // self.per_n)