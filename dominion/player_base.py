"""State of a player that every participant may see."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping

from dominion.exceptions import UnreachableCode
from dominion.logger import LogLevel, get_logger

__all__ = ["CardAccess", "PlayerBase", "card_access_to_string"]


class CardAccess(enum.IntEnum):
    """A place a card can be taken from or put to."""

    DISCARD_PILE = 0
    HAND = 1
    DRAW_PILE_TOP = 2
    DRAW_PILE_BOTTOM = 3
    TRASH = 4
    STAGED_CARDS = 5


def card_access_to_string(access: CardAccess) -> str:
    """Return the quoted name of a card location."""
    try:
        return f"'{CardAccess(access).name}'"
    except ValueError:
        get_logger().log(LogLevel.ERROR, f"CardAccess with value: {access} does not exist!")
        raise UnreachableCode() from None


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
class PlayerBase:
    """Counters, current card and discard pile of one player."""

    player_id: str
    actions: int = 1
    buys: int = 1
    treasure: int = 0
    current_card: str = ""
    discard_pile: list[str] = field(default_factory=list)
    draw_pile_size: int = 0

    def dec_actions(self) -> None:
        """Use up one action; stays at zero."""
        if self.actions > 0:
            self.actions -= 1

    def dec_buys(self) -> None:
        """Use up one buy; stays at zero."""
        if self.buys > 0:
            self.buys -= 1

    def dec_treasure(self, amount: int) -> None:
        """Spend treasure; if there is not enough, nothing is spent."""
        if self.treasure >= amount:
            self.treasure -= amount

    def to_json(self) -> dict[str, Any]:
        return {
            "player_id": self.player_id,
            "actions": self.actions,
            "buys": self.buys,
            "treasure": self.treasure,
            "current_card": self.current_card,
            "discard_pile": list(self.discard_pile),
            "draw_pile_size": self.draw_pile_size,
        }

    @classmethod
    def _fields_from_json(cls, data: Mapping[str, Any]) -> dict[str, Any]:
        if not isinstance(data, Mapping):
            raise ValueError("player must be a JSON object")
        return {
            "player_id": _get_str(data, "player_id"),
            "actions": _get_uint(data, "actions"),
            "buys": _get_uint(data, "buys"),
            "treasure": _get_uint(data, "treasure"),
            "current_card": _get_str(data, "current_card"),
            "discard_pile": _get_str_list(data, "discard_pile"),
            "draw_pile_size": _get_uint(data, "draw_pile_size"),
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> PlayerBase:
        """Build a player from its JSON object; raises ValueError if malformed."""
        return cls(**cls._fields_from_json(data))