"""Messages exchanged between clients and the server, and their JSON form."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, ClassVar

from dominion.actions import (
    ActionDecision,
    ActionOrder,
    BuyCardDecision,
    DeckChoiceDecision,
    EndActionPhaseDecision,
    EndTurnDecision,
    GainFromBoardDecision,
    PlayActionCardDecision,
)
from dominion.board import KINGDOM_CARD_COUNT
from dominion.exceptions import UnreachableCode, WrongCardCount
from dominion.player_result import PlayerResult
from dominion.reduced import ReducedGameState
from dominion.uuid_generator import generate_uuid_v4

__all__ = [
    "Message",
    "ClientToServerMessage",
    "GameStateRequestMessage",
    "CreateLobbyRequestMessage",
    "JoinLobbyRequestMessage",
    "StartGameRequestMessage",
    "ActionDecisionMessage",
    "ServerToClientMessage",
    "GameStateMessage",
    "CreateLobbyResponseMessage",
    "JoinLobbyBroadcastMessage",
    "StartGameBroadcastMessage",
    "EndGameBroadcastMessage",
    "ResultResponseMessage",
    "ActionOrderMessage",
]


def _add_optional(data: dict[str, Any], key: str, value: str | None) -> None:
    if value is not None:
        data[key] = value


@dataclass(kw_only=True)
class Message:
    """Any message; two messages are equal only if their ids agree."""

    message_type: ClassVar[str] = ""

    game_id: str
    message_id: str = field(default_factory=generate_uuid_v4)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object of this message."""
        if not self.message_type:
            raise TypeError(f"{type(self).__name__} has no wire type")
        return {"type": self.message_type, "game_id": self.game_id, "message_id": self.message_id}

    def to_json(self) -> str:
        """Return the message as compact JSON text."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)


# ======= CLIENT -> SERVER ======= #


@dataclass(kw_only=True)
class ClientToServerMessage(Message):
    player_id: str

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["player_id"] = self.player_id
        return data


@dataclass(kw_only=True)
class GameStateRequestMessage(ClientToServerMessage):
    message_type: ClassVar[str] = "game_state_request"


@dataclass(kw_only=True)
class CreateLobbyRequestMessage(ClientToServerMessage):
    message_type: ClassVar[str] = "initiate_game_request"


@dataclass(kw_only=True)
class JoinLobbyRequestMessage(ClientToServerMessage):
    message_type: ClassVar[str] = "join_game_request"


@dataclass(kw_only=True)
class StartGameRequestMessage(ClientToServerMessage):
    """Start the game with the chosen kingdom cards; exactly ten are required."""

    message_type: ClassVar[str] = "start_game_request"

    selected_cards: list[str]

    def __post_init__(self) -> None:
        if len(self.selected_cards) != KINGDOM_CARD_COUNT:
            raise WrongCardCount(f"selected_cards must contain exactly {KINGDOM_CARD_COUNT} cards")

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["selected_cards"] = list(self.selected_cards)
        return data


@dataclass(kw_only=True)
class ActionDecisionMessage(ClientToServerMessage):
    message_type: ClassVar[str] = "action_decision"

    decision: ActionDecision
    in_response_to: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        _add_optional(data, "in_response_to", self.in_response_to)
        decision = self.decision
        if isinstance(decision, PlayActionCardDecision):
            data["action"] = "play_action_card"
            data["card_id"] = decision.card_id
            data["from"] = int(decision.source)
        elif isinstance(decision, BuyCardDecision):
            data["action"] = "buy_card"
            data["card"] = decision.card
        elif isinstance(decision, EndActionPhaseDecision):
            data["action"] = "end_action_phase"
        elif isinstance(decision, EndTurnDecision):
            data["action"] = "end_turn"
        elif isinstance(decision, DeckChoiceDecision):
            data["action"] = "deck_choice"
            data["cards"] = list(decision.cards)
            data["choices"] = [int(choice) for choice in decision.choices]
        elif isinstance(decision, GainFromBoardDecision):
            data["action"] = "board_choice"
            data["chosen_card"] = decision.chosen_card
        else:
            raise UnreachableCode("Unknown decision type")
        return data


# ======= SERVER -> CLIENT ======= #


@dataclass(kw_only=True)
class ServerToClientMessage(Message):
    pass


@dataclass(kw_only=True)
class GameStateMessage(ServerToClientMessage):
    """The game state as seen by the receiver; it is not part of equality."""

    message_type: ClassVar[str] = "game_state"

    game_state: ReducedGameState = field(compare=False)
    in_response_to: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["game_state"] = self.game_state.to_json()
        _add_optional(data, "in_response_to", self.in_response_to)
        return data


@dataclass(kw_only=True)
class CreateLobbyResponseMessage(ServerToClientMessage):
    message_type: ClassVar[str] = "initiate_game_response"

    available_cards: list[str] = field(default_factory=list)
    in_response_to: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        _add_optional(data, "in_response_to", self.in_response_to)
        data["available_cards"] = list(self.available_cards)
        return data


@dataclass(kw_only=True)
class JoinLobbyBroadcastMessage(ServerToClientMessage):
    message_type: ClassVar[str] = "join_game_broadcast"

    players: list[str]

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["players"] = list(self.players)
        return data


@dataclass(kw_only=True)
class StartGameBroadcastMessage(ServerToClientMessage):
    message_type: ClassVar[str] = "start_game_broadcast"


@dataclass(kw_only=True)
class EndGameBroadcastMessage(ServerToClientMessage):
    message_type: ClassVar[str] = "end_game_broadcast"

    results: list[PlayerResult]

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["results"] = [
            {"player_id": result.player_name, "score": result.score} for result in self.results
        ]
        return data


@dataclass(kw_only=True)
class ResultResponseMessage(ServerToClientMessage):
    message_type: ClassVar[str] = "result_response"

    success: bool
    in_response_to: str | None = None
    additional_information: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        _add_optional(data, "in_response_to", self.in_response_to)
        data["success"] = self.success
        _add_optional(data, "additional_information", self.additional_information)
        return data


@dataclass(kw_only=True)
class ActionOrderMessage(ServerToClientMessage):
    message_type: ClassVar[str] = "action_order"

    order: ActionOrder
    game_state: ReducedGameState
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["order"] = self.order.to_json()
        data["game_state"] = self.game_state.to_json()
        _add_optional(data, "description", self.description)
        return data