"""Turning JSON text received over the wire back into message objects."""

from __future__ import annotations

import json
from typing import Any, Callable, Mapping

from dominion.actions import (
    ActionDecision,
    ActionOrder,
    AllowedChoice,
    BuyCardDecision,
    DeckChoiceDecision,
    EndActionPhaseDecision,
    EndTurnDecision,
    GainFromBoardDecision,
    PlayActionCardDecision,
)
from dominion.board import KINGDOM_CARD_COUNT
from dominion.messages import (
    ActionDecisionMessage,
    ActionOrderMessage,
    ClientToServerMessage,
    CreateLobbyRequestMessage,
    CreateLobbyResponseMessage,
    EndGameBroadcastMessage,
    GameStateMessage,
    GameStateRequestMessage,
    JoinLobbyBroadcastMessage,
    JoinLobbyRequestMessage,
    ResultResponseMessage,
    ServerToClientMessage,
    StartGameBroadcastMessage,
    StartGameRequestMessage,
)
from dominion.player_base import CardAccess
from dominion.player_result import PlayerResult
from dominion.reduced import ReducedGameState

__all__ = ["parse_server_message", "parse_client_message"]


def _get_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"member {key!r} is missing or not a string")
    return value


def _get_optional_str(data: Mapping[str, Any], key: str) -> str | None:
    if key not in data:
        return None
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"member {key!r} is not a string")
    return value


def _get_uint(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"member {key!r} is missing or not an unsigned integer")
    return value


def _get_int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"member {key!r} is missing or not an integer")
    return value


def _get_bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if not isinstance(value, bool):
        raise ValueError(f"member {key!r} is missing or not a boolean")
    return value


def _get_str_list(data: Mapping[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"member {key!r} is missing or not an array of strings")
    return list(value)


def _get_uint_list(data: Mapping[str, Any], key: str) -> list[int]:
    value = data.get(key)
    if not isinstance(value, list) or not all(
        isinstance(item, int) and not isinstance(item, bool) and item >= 0 for item in value
    ):
        raise ValueError(f"member {key!r} is missing or not an array of unsigned integers")
    return list(value)


def _load_object(text: str) -> dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise ValueError("message must be a JSON object")
    return data


def _game_state(data: Mapping[str, Any]) -> ReducedGameState:
    if "game_state" not in data:
        raise ValueError("message has no game_state member")
    return ReducedGameState.from_json(data["game_state"])


# ======= SERVER TO CLIENT MESSAGES ======= #


def _parse_game_state(data: Mapping[str, Any], game_id: str, message_id: str) -> ServerToClientMessage:
    game_state = _game_state(data)
    return GameStateMessage(
        game_id=game_id,
        message_id=message_id,
        game_state=game_state,
        in_response_to=_get_optional_str(data, "in_response_to"),
    )


def _parse_create_lobby_response(
    data: Mapping[str, Any], game_id: str, message_id: str
) -> ServerToClientMessage:
    available = _get_str_list(data, "available_cards") if "available_cards" in data else []
    return CreateLobbyResponseMessage(
        game_id=game_id,
        message_id=message_id,
        available_cards=available,
        in_response_to=_get_optional_str(data, "in_response_to"),
    )


def _parse_join_broadcast(data: Mapping[str, Any], game_id: str, message_id: str) -> ServerToClientMessage:
    return JoinLobbyBroadcastMessage(
        game_id=game_id, message_id=message_id, players=_get_str_list(data, "players")
    )


def _parse_start_broadcast(data: Mapping[str, Any], game_id: str, message_id: str) -> ServerToClientMessage:
    return StartGameBroadcastMessage(game_id=game_id, message_id=message_id)


def _parse_end_broadcast(data: Mapping[str, Any], game_id: str, message_id: str) -> ServerToClientMessage:
    results_json = data.get("results")
    if not isinstance(results_json, list):
        raise ValueError("member 'results' is missing or not an array")
    results = []
    for result in results_json:
        if not isinstance(result, Mapping):
            raise ValueError("result must be a JSON object")
        results.append(PlayerResult(_get_str(result, "player_id"), _get_int(result, "score")))
    return EndGameBroadcastMessage(game_id=game_id, message_id=message_id, results=results)


def _parse_result_response(data: Mapping[str, Any], game_id: str, message_id: str) -> ServerToClientMessage:
    in_response_to = _get_optional_str(data, "in_response_to")
    success = _get_bool(data, "success")
    return ResultResponseMessage(
        game_id=game_id,
        message_id=message_id,
        success=success,
        in_response_to=in_response_to,
        additional_information=_get_optional_str(data, "additional_information"),
    )


def _parse_action_order(data: Mapping[str, Any], game_id: str, message_id: str) -> ServerToClientMessage:
    order_json = data.get("order")
    if not isinstance(order_json, Mapping):
        raise ValueError("member 'order' is missing or not an object")
    order = ActionOrder.from_json(order_json)
    game_state = _game_state(data)
    return ActionOrderMessage(
        game_id=game_id,
        message_id=message_id,
        order=order,
        game_state=game_state,
        description=_get_optional_str(data, "description"),
    )


_SERVER_PARSERS: dict[str, Callable[[Mapping[str, Any], str, str], ServerToClientMessage]] = {
    "game_state": _parse_game_state,
    "initiate_game_response": _parse_create_lobby_response,
    "join_game_broadcast": _parse_join_broadcast,
    "start_game_broadcast": _parse_start_broadcast,
    "end_game_broadcast": _parse_end_broadcast,
    "result_response": _parse_result_response,
    "action_order": _parse_action_order,
}


def parse_server_message(text: str) -> ServerToClientMessage:
    """Parse a message sent by the server; raises ValueError if it is malformed."""
    data = _load_object(text)
    game_id = _get_str(data, "game_id")
    message_id = _get_str(data, "message_id")
    message_type = _get_str(data, "type")
    parser = _SERVER_PARSERS.get(message_type)
    if parser is None:
        raise ValueError(f"unknown server message type {message_type!r}")
    return parser(data, game_id, message_id)


# ======= CLIENT TO SERVER MESSAGES ======= #


def _parse_decision(data: Mapping[str, Any]) -> ActionDecision:
    action = _get_str(data, "action")
    if action == "play_action_card":
        card_id = _get_str(data, "card_id")
        return PlayActionCardDecision(card_id, CardAccess(_get_uint(data, "from")))
    if action == "buy_card":
        return BuyCardDecision(_get_str(data, "card"))
    if action == "end_action_phase":
        return EndActionPhaseDecision()
    if action == "end_turn":
        return EndTurnDecision()
    if action == "deck_choice":
        cards = _get_str_list(data, "cards")
        choices = [AllowedChoice(value) for value in _get_uint_list(data, "choices")]
        return DeckChoiceDecision(cards, choices)
    if action == "board_choice":
        return GainFromBoardDecision(_get_str(data, "chosen_card"))
    raise ValueError(f"unknown action {action!r}")


def parse_client_message(text: str) -> ClientToServerMessage:
    """Parse a message sent by a client; raises ValueError if it is malformed."""
    data = _load_object(text)
    game_id = _get_str(data, "game_id")
    message_id = _get_str(data, "message_id")
    player_id = _get_str(data, "player_id")
    message_type = _get_str(data, "type")
    ids = {"game_id": game_id, "player_id": player_id, "message_id": message_id}

    if message_type == "game_state_request":
        return GameStateRequestMessage(**ids)
    if message_type == "initiate_game_request":
        return CreateLobbyRequestMessage(**ids)
    if message_type == "join_game_request":
        return JoinLobbyRequestMessage(**ids)
    if message_type == "start_game_request":
        selected = _get_str_list(data, "selected_cards")
        if len(selected) != KINGDOM_CARD_COUNT:
            raise ValueError(
                f"selected_cards must contain exactly {KINGDOM_CARD_COUNT} cards, got {len(selected)}"
            )
        return StartGameRequestMessage(**ids, selected_cards=selected)
    if message_type == "action_decision":
        in_response_to = _get_optional_str(data, "in_response_to")
        decision = _parse_decision(data)
        return ActionDecisionMessage(**ids, decision=decision, in_response_to=in_response_to)
    raise ValueError(f"unknown client message type {message_type!r}")