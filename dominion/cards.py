"""Card types, card descriptions and the registry of all known cards."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from dominion.logger import LogLevel, get_logger

__all__ = [
    "CardType",
    "CardBase",
    "register",
    "has",
    "get_all",
    "get_card",
    "get_cost",
    "get_type",
    "is_action",
    "is_attack",
    "is_reaction",
    "is_treasure",
    "is_victory",
    "is_curse",
    "kingdom_sorted_by_cost",
]


class CardType(enum.IntFlag):
    """Bit flags for card types; combined types are formed with ``|``."""

    KINGDOM = 1
    TREASURE = 2
    VICTORY = 4
    CURSE = 8 | VICTORY
    ACTION = 16 | KINGDOM
    ATTACK = 32 | ACTION
    REACTION = 64 | ACTION


@dataclass(frozen=True)
class CardBase:
    """The static description of a card: its id, type flags and cost."""

    id: str
    type: CardType
    cost: int

    def _has(self, flag: CardType) -> bool:
        return (self.type & flag) == flag

    def is_action(self) -> bool:
        return self._has(CardType.ACTION)

    def is_attack(self) -> bool:
        return self._has(CardType.ATTACK)

    def is_treasure(self) -> bool:
        return self._has(CardType.TREASURE)

    def is_reaction(self) -> bool:
        return self._has(CardType.REACTION)

    def is_victory(self) -> bool:
        return self._has(CardType.VICTORY)

    def is_curse(self) -> bool:
        return self._has(CardType.CURSE)

    def is_kingdom(self) -> bool:
        return self._has(CardType.KINGDOM)


_cards: dict[str, CardBase] = {}


def register(card_id: str, card_type: CardType | int, cost: int) -> CardBase:
    """Add a card to the registry; an id that is already known is left as it is."""
    return _cards.setdefault(card_id, CardBase(card_id, CardType(card_type), cost))


def has(card_id: str) -> bool:
    return card_id in _cards


def get_all() -> Mapping[str, CardBase]:
    """Return a read-only view of every registered card by id."""
    return MappingProxyType(_cards)


def get_card(card_id: str) -> CardBase:
    """Return the registered card; raises KeyError for an unknown id."""
    return _cards[card_id]


def _lookup(card_id: str, what: str) -> CardBase:
    card = _cards.get(card_id)
    if card is None:
        get_logger().log(
            LogLevel.ERROR, f"Tried to access {what} for: {card_id}, but this card does not exist"
        )
        raise ValueError(f"card_id: {card_id} does not exist")
    return card


def get_cost(card_id: str) -> int:
    return _lookup(card_id, "card cost").cost


def get_type(card_id: str) -> CardType:
    return _lookup(card_id, "card type").type


def is_action(card_id: str) -> bool:
    return _lookup(card_id, "action flag").is_action()


def is_attack(card_id: str) -> bool:
    return _lookup(card_id, "attack flag").is_attack()


def is_reaction(card_id: str) -> bool:
    return _lookup(card_id, "reaction flag").is_reaction()


def is_treasure(card_id: str) -> bool:
    return _lookup(card_id, "treasure flag").is_treasure()


def is_victory(card_id: str) -> bool:
    return _lookup(card_id, "victory flag").is_victory()


def is_curse(card_id: str) -> bool:
    return _lookup(card_id, "curse flag").is_curse()


def kingdom_sorted_by_cost() -> list[str]:
    """Return the ids of all kingdom cards, ordered by cost and then by id."""
    kingdom = (card for card in _cards.values() if card.is_kingdom())
    return [card.id for card in sorted(kingdom, key=lambda card: (card.cost, card.id))]


_BUILTIN_CARDS = (
    # treasure
    ("Copper", CardType.TREASURE, 0),
    ("Silver", CardType.TREASURE, 3),
    ("Gold", CardType.TREASURE, 6),
    # victory
    ("Estate", CardType.VICTORY, 2),
    ("Duchy", CardType.VICTORY, 5),
    ("Province", CardType.VICTORY, 8),
    # curse
    ("Curse", CardType.CURSE, 0),
    # for testing only
    ("God_Mode", CardType.ACTION, 0),
    # non-interactive
    ("Village", CardType.ACTION, 3),
    ("Smithy", CardType.ACTION, 4),
    ("Festival", CardType.ACTION, 5),
    ("Market", CardType.ACTION, 5),
    ("Laboratory", CardType.ACTION, 5),
    ("Council_Room", CardType.ACTION, 5),
    ("Witch", CardType.ACTION | CardType.ATTACK, 5),
    ("Workers_Village", CardType.ACTION, 4),
    ("Great_Hall", CardType.ACTION | CardType.VICTORY, 3),
    ("Treasure_Map", CardType.ACTION, 4),
    ("Sea_Hag", CardType.ACTION | CardType.ATTACK, 4),
    # kingdom victory cards
    ("Gardens", CardType.KINGDOM | CardType.VICTORY, 4),
    ("Duke", CardType.KINGDOM | CardType.VICTORY, 5),
    ("Silk_Road", CardType.KINGDOM | CardType.VICTORY, 4),
    # kingdom treasure cards
    ("Treasure_Trove", CardType.KINGDOM | CardType.TREASURE, 5),
    # reaction cards
    ("Moat", CardType.ACTION | CardType.REACTION, 2),
    # interactive
    ("Remodel", CardType.ACTION, 4),
    ("Poacher", CardType.ACTION, 4),
    ("Moneylender", CardType.ACTION, 4),
    ("Mine", CardType.ACTION, 5),
    ("Artisan", CardType.ACTION, 6),
    ("Cellar", CardType.ACTION, 2),
    ("Chapel", CardType.ACTION, 2),
    ("Workshop", CardType.ACTION, 3),
    ("Militia", CardType.ACTION | CardType.ATTACK, 4),
)

for _card_id, _card_type, _cost in _BUILTIN_CARDS:
    register(_card_id, _card_type, _cost)