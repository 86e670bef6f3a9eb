"""Decisions a player sends to the server and orders the server sends back."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping

from dominion.cards import CardType
from dominion.player_base import CardAccess

__all__ = [
    "AllowedChoice",
    "ActionDecision",
    "PlayActionCardDecision",
    "BuyCardDecision",
    "EndActionPhaseDecision",
    "EndTurnDecision",
    "DeckChoiceDecision",
    "GainFromBoardDecision",
    "ActionOrder",
    "ActionPhaseOrder",
    "BuyPhaseOrder",
    "EndTurnOrder",
    "GainFromBoardOrder",
    "ChooseFromOrder",
    "ChooseFromHandOrder",
    "ChooseFromStagedOrder",
]


class AllowedChoice(enum.IntFlag):
    """Where cards chosen by a player may go; values can be combined."""

    DISCARD = 1
    TRASH = 2
    HAND_CARDS = 4
    DRAW_PILE = 8


_ANY_CARD_TYPE = CardType.KINGDOM | CardType.TREASURE | CardType.VICTORY | CardType.CURSE


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


def _get_card_type(data: Mapping[str, Any], key: str) -> CardType:
    return CardType(_get_uint(data, key))


def _get_allowed_choice(data: Mapping[str, Any], key: str) -> AllowedChoice:
    return AllowedChoice(_get_uint(data, key))


# ----------------------------------------------------------------- decisions


class ActionDecision:
    """Base of every decision a player can make on their turn."""


@dataclass
class PlayActionCardDecision(ActionDecision):
    """Play an action card taken from the given location."""

    card_id: str
    source: CardAccess


@dataclass
class BuyCardDecision(ActionDecision):
    card: str


@dataclass
class EndActionPhaseDecision(ActionDecision):
    pass


@dataclass
class EndTurnDecision(ActionDecision):
    pass


@dataclass
class DeckChoiceDecision(ActionDecision):
    """Cards chosen from a deck, each paired with where it should go."""

    cards: list[str]
    choices: list[AllowedChoice]


@dataclass
class GainFromBoardDecision(ActionDecision):
    chosen_card: str


# -------------------------------------------------------------------- orders


class ActionOrder:
    """Base of every order the server gives a player."""

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object of this order; orders without a wire form give {}."""
        return {}

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> ActionOrder:
        """Build an order from its JSON object; raises ValueError if malformed."""
        if not isinstance(data, Mapping):
            raise ValueError("order must be a JSON object")
        order_type = _get_str(data, "type")
        if order_type == "action_phase":
            return ActionPhaseOrder()
        if order_type == "buy_phase":
            return BuyPhaseOrder()
        if order_type == "gain_card":
            return GainFromBoardOrder(
                _get_uint(data, "max_cost"), _get_card_type(data, "allowed_type")
            )
        if order_type in ("choose_from_hand", "choose_from_staged"):
            min_cards = _get_uint(data, "min_cards")
            max_cards = _get_uint(data, "max_cards")
            allowed_choices = _get_allowed_choice(data, "allowed_choices")
            allowed_type = _get_card_type(data, "allowed_type")
            if order_type == "choose_from_hand":
                return ChooseFromHandOrder(min_cards, max_cards, allowed_choices, allowed_type)
            return ChooseFromStagedOrder(
                min_cards, max_cards, allowed_choices, allowed_type, _get_str_list(data, "cards")
            )
        raise ValueError(f"unknown order type {order_type!r}")


@dataclass
class ActionPhaseOrder(ActionOrder):
    def to_json(self) -> dict[str, Any]:
        return {"type": "action_phase"}


@dataclass
class BuyPhaseOrder(ActionOrder):
    def to_json(self) -> dict[str, Any]:
        return {"type": "buy_phase"}


@dataclass
class EndTurnOrder(ActionOrder):
    """Tells a player their turn is over; it has no wire form of its own."""


@dataclass
class GainFromBoardOrder(ActionOrder):
    """Gain a card of the given type costing at most ``max_cost`` from the board."""

    max_cost: int
    allowed_type: CardType

    def to_json(self) -> dict[str, Any]:
        return {
            "type": "gain_card",
            "max_cost": self.max_cost,
            "allowed_type": int(self.allowed_type),
        }


@dataclass(eq=False)
class ChooseFromOrder(ActionOrder):
    """Choose between ``min_cards`` and ``max_cards`` cards.

    Two such orders are equal when they are of the same kind and agree on the
    card counts and the allowed choices; the allowed card type is not compared.
    """

    wire_type: ClassVar[str] = ""

    min_cards: int
    max_cards: int
    allowed_choices: AllowedChoice
    allowed_type: CardType = _ANY_CARD_TYPE

    def _key(self) -> tuple[Any, ...]:
        return (self.min_cards, self.max_cards, self.allowed_choices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChooseFromOrder):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    def to_json(self) -> dict[str, Any]:
        if not self.wire_type:
            return {}
        return {
            "type": self.wire_type,
            "min_cards": self.min_cards,
            "max_cards": self.max_cards,
            "allowed_choices": int(self.allowed_choices),
            "allowed_type": int(self.allowed_type),
        }


@dataclass(eq=False)
class ChooseFromHandOrder(ChooseFromOrder):
    """Choose cards from the player's hand."""

    wire_type: ClassVar[str] = "choose_from_hand"


@dataclass(eq=False)
class ChooseFromStagedOrder(ChooseFromOrder):
    """Choose from a given set of staged cards."""

    wire_type: ClassVar[str] = "choose_from_staged"

    cards: list[str] = field(default_factory=list)

    def _key(self) -> tuple[Any, ...]:
        return (*super()._key(), list(self.cards))

    def to_json(self) -> dict[str, Any]:
        data = super().to_json()
        data["cards"] = list(self.cards)
        return data