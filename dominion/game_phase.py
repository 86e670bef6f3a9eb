"""Phases of a player's turn and their textual forms."""

from __future__ import annotations

import enum

__all__ = [
    "GamePhase",
    "game_phase_to_string",
    "game_phase_display_name",
    "game_phase_from_string",
]


class GamePhase(enum.Enum):
    """The phase a turn is in; the value is its wire name."""

    ACTION_PHASE = "action_phase"
    BUY_PHASE = "buy_phase"
    PLAYING_ACTION_CARD = "playing_action_card"


_DISPLAY_NAMES = {
    GamePhase.ACTION_PHASE: "Action phase",
    GamePhase.BUY_PHASE: "Buy phase",
    GamePhase.PLAYING_ACTION_CARD: "Playing an action card",
}


def game_phase_to_string(phase: GamePhase) -> str:
    """Return the wire name of a phase."""
    if not isinstance(phase, GamePhase):
        raise ValueError("Invalid game phase")
    return phase.value


def game_phase_display_name(phase: GamePhase) -> str:
    """Return the human-readable name of a phase."""
    try:
        return _DISPLAY_NAMES[phase]
    except (KeyError, TypeError):
        raise ValueError("Invalid game phase") from None


def game_phase_from_string(text: str) -> GamePhase:
    """Return the phase with the given wire name; raises ValueError otherwise."""
    try:
        return GamePhase(text)
    except ValueError:
        raise ValueError("Invalid game phase") from None