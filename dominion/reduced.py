"""The view of a game that one player is allowed to see."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from dominion.board import Board
from dominion.game_phase import GamePhase, game_phase_from_string, game_phase_to_string
from dominion.player_base import PlayerBase

__all__ = ["ReducedPlayer", "ReducedEnemy", "ReducedGameState"]


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
class ReducedPlayer(PlayerBase):
    """The receiving player, including the cards in their hand."""

    hand_cards: list[str] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        data = super().to_json()
        data["hand_cards"] = list(self.hand_cards)
        return data

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> ReducedPlayer:
        fields = cls._fields_from_json(data)
        fields["hand_cards"] = _get_str_list(data, "hand_cards")
        return cls(**fields)


@dataclass
class ReducedEnemy(PlayerBase):
    """Another player, of whose hand only the size is known."""

    hand_size: int = 0

    def to_json(self) -> dict[str, Any]:
        data = super().to_json()
        data["hand_size"] = self.hand_size
        return data

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> ReducedEnemy:
        fields = cls._fields_from_json(data)
        fields["hand_size"] = _get_uint(data, "hand_size")
        return cls(**fields)


@dataclass(eq=False)
class ReducedGameState:
    """Board, own player, enemies, whose turn it is and the current phase."""

    board: Board
    reduced_player: ReducedPlayer
    reduced_enemies: list[ReducedEnemy]
    active_player: str
    game_phase: GamePhase

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReducedGameState):
            return NotImplemented
        return (
            self.board == other.board
            and self.reduced_player == other.reduced_player
            and self.reduced_enemies == other.reduced_enemies
            and self.active_player == other.active_player
        )

    __hash__ = None  # type: ignore[assignment]

    def is_player_active(self) -> bool:
        """Return whether it is the receiving player's turn."""
        return self.active_player == self.reduced_player.player_id

    def to_json(self) -> dict[str, Any]:
        return {
            "board": self.board.to_json(),
            "reduced_player": self.reduced_player.to_json(),
            "reduced_enemies": [enemy.to_json() for enemy in self.reduced_enemies],
            "game_phase": game_phase_to_string(self.game_phase),
            "active_player": self.active_player,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> ReducedGameState:
        """Build a game state from its JSON object; raises ValueError if malformed."""
        if not isinstance(data, Mapping):
            raise ValueError("GameState JSON is not an object")
        if "board" not in data:
            raise ValueError("GameState JSON does not have 'board' member")
        board = Board.from_json(data["board"])
        if "reduced_player" not in data:
            raise ValueError("GameState JSON does not have 'reduced_player' member")
        reduced_player = ReducedPlayer.from_json(data["reduced_player"])
        if "reduced_enemies" not in data:
            raise ValueError("GameState JSON does not have 'reduced_enemies' member")
        enemies_json = data["reduced_enemies"]
        if not isinstance(enemies_json, list):
            raise ValueError("'reduced_enemies' is not an array")
        reduced_enemies = [ReducedEnemy.from_json(enemy) for enemy in enemies_json]
        game_phase = game_phase_from_string(_get_str(data, "game_phase"))
        active_player = _get_str(data, "active_player")
        return cls(board, reduced_player, reduced_enemies, active_player, game_phase)