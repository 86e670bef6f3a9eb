"""The supply piles, trash and played cards shared by all players."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from dominion.exceptions import PlayerCountMismatch, WrongCardCount

__all__ = [
    "KINGDOM_CARD_COUNT",
    "MIN_PLAYER_COUNT",
    "MAX_PLAYER_COUNT",
    "TREASURE_SILVER_COUNT",
    "TREASURE_GOLD_COUNT",
    "MAX_NUM_EMPTY_PILES",
    "Pile",
    "Board",
    "validate_player_count",
]

KINGDOM_CARD_COUNT = 10
MIN_PLAYER_COUNT = 2
MAX_PLAYER_COUNT = 4
TREASURE_SILVER_COUNT = 40
TREASURE_GOLD_COUNT = 30
MAX_NUM_EMPTY_PILES = 3


def validate_player_count(player_count: int) -> bool:
    """Return whether a game may be played with this many players."""
    return MIN_PLAYER_COUNT <= player_count <= MAX_PLAYER_COUNT


def _copper_count(player_count: int) -> int:
    return 60 - 7 * player_count


def _victory_card_count(player_count: int) -> int:
    return 8 if player_count == 2 else 12


def _curse_card_count(player_count: int) -> int:
    return 10 * (player_count - 1)


def _get_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"member {key!r} is missing or not a string")
    return value


def _get_uint(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"member {key!r} is missing or not an unsigned integer")
    return value


def _get_str_list(data: Mapping[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"member {key!r} is missing or not an array of strings")
    return list(value)


@dataclass
class Pile:
    """A supply pile: which card it holds and how many are left."""

    card_id: str
    count: int

    @classmethod
    def make_kingdom_card(cls, card_id: str) -> Pile:
        return cls(card_id, KINGDOM_CARD_COUNT)

    def is_empty(self) -> bool:
        return self.count == 0

    def to_json(self) -> dict[str, Any]:
        return {"card_id": self.card_id, "count": self.count}

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Pile:
        """Build a pile from its JSON object; raises ValueError if malformed."""
        if not isinstance(data, Mapping):
            raise ValueError("pile must be a JSON object")
        return cls(_get_str(data, "card_id"), _get_uint(data, "count"))


def _container(piles: Iterable[Pile]) -> dict[str, Pile]:
    """Key piles by card id in id order; the first of duplicate ids is kept."""
    result: dict[str, Pile] = {}
    for pile in sorted(piles, key=lambda pile: pile.card_id):
        result.setdefault(pile.card_id, pile)
    return result


def _container_from_json(data: Mapping[str, Any], key: str) -> dict[str, Pile]:
    value = data.get(key)
    if not isinstance(value, list):
        raise ValueError(f"{key} not found in JSON")
    return _container(Pile.from_json(item) for item in value)


class Board:
    """Victory, treasure, kingdom and curse piles plus trash and played cards."""

    def __init__(self, kingdom_cards: Iterable[str], player_count: int) -> None:
        if not validate_player_count(player_count):
            raise PlayerCountMismatch(
                f"player_count must be in [{MIN_PLAYER_COUNT}, {MAX_PLAYER_COUNT}], "
                f"but is {player_count}"
            )
        kingdom_cards = list(kingdom_cards)
        if len(kingdom_cards) != KINGDOM_CARD_COUNT:
            raise WrongCardCount(
                f"Board must be initialised with {KINGDOM_CARD_COUNT} kingdom cards, "
                f"but was initialised with {len(kingdom_cards)} cards"
            )

        victory_count = _victory_card_count(player_count)
        self.victory_cards = _container(
            Pile(card_id, victory_count) for card_id in ("Estate", "Duchy", "Province")
        )
        self.treasure_cards = _container(
            [
                Pile("Copper", _copper_count(player_count)),
                Pile("Silver", TREASURE_SILVER_COUNT),
                Pile("Gold", TREASURE_GOLD_COUNT),
            ]
        )
        self.kingdom_cards = _container(Pile.make_kingdom_card(card_id) for card_id in kingdom_cards)
        if len(self.kingdom_cards) != KINGDOM_CARD_COUNT:
            raise WrongCardCount("Board received duplicate kingdom card")
        self.curse_card_pile = Pile("Curse", _curse_card_count(player_count))
        self.trash: list[str] = []
        self.played_cards: list[str] = []

    @classmethod
    def _from_parts(
        cls,
        victory_cards: dict[str, Pile],
        treasure_cards: dict[str, Pile],
        kingdom_cards: dict[str, Pile],
        curse_card_pile: Pile,
        trash: list[str],
        played_cards: list[str],
    ) -> Board:
        board = cls.__new__(cls)
        board.victory_cards = victory_cards
        board.treasure_cards = treasure_cards
        board.kingdom_cards = kingdom_cards
        board.curse_card_pile = curse_card_pile
        board.trash = trash
        board.played_cards = played_cards
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.victory_cards == other.victory_cards
            and self.treasure_cards == other.treasure_cards
            and self.kingdom_cards == other.kingdom_cards
            and self.curse_card_pile == other.curse_card_pile
            and self.trash == other.trash
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Board(victory_cards={list(self.victory_cards.values())!r}, "
            f"treasure_cards={list(self.treasure_cards.values())!r}, "
            f"kingdom_cards={list(self.kingdom_cards.values())!r}, "
            f"curse_card_pile={self.curse_card_pile!r}, trash={self.trash!r}, "
            f"played_cards={self.played_cards!r})"
        )

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Board:
        """Build a board from its JSON object; raises ValueError if malformed."""
        if not isinstance(data, Mapping):
            raise ValueError("board must be a JSON object")
        curse = data.get("curse_pile")
        if not isinstance(curse, Mapping):
            raise ValueError("Curse pile not found in JSON")
        curse_pile = Pile.from_json(curse)
        victory_cards = _container_from_json(data, "victory_cards")
        treasure_cards = _container_from_json(data, "treasure_cards")
        kingdom_cards = _container_from_json(data, "kingdom_cards")
        trash = _get_str_list(data, "trash")
        played_cards = _get_str_list(data, "played_cards")
        return cls._from_parts(
            victory_cards, treasure_cards, kingdom_cards, curse_pile, trash, played_cards
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "curse_pile": self.curse_card_pile.to_json(),
            "victory_cards": [pile.to_json() for pile in self.victory_cards.values()],
            "treasure_cards": [pile.to_json() for pile in self.treasure_cards.values()],
            "kingdom_cards": [pile.to_json() for pile in self.kingdom_cards.values()],
            "trash": list(self.trash),
            "played_cards": list(self.played_cards),
        }

    def empty_piles_count(self) -> int:
        """Return how many piles, the curse pile included, have run out."""
        piles = [
            *self.treasure_cards.values(),
            *self.victory_cards.values(),
            *self.kingdom_cards.values(),
            self.curse_card_pile,
        ]
        return sum(1 for pile in piles if pile.is_empty())

    def is_game_over(self) -> bool:
        """The game ends when the Province pile or enough other piles are empty."""
        province = self.victory_cards.get("Province")
        if province is not None and province.is_empty():
            return True
        return self.empty_piles_count() >= MAX_NUM_EMPTY_PILES