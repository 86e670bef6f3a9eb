import pytest

from dominion.game_phase import (
    GamePhase,
    game_phase_display_name,
    game_phase_from_string,
    game_phase_to_string,
)


@pytest.mark.parametrize(
    "phase,text",
    [
        (GamePhase.ACTION_PHASE, "action_phase"),
        (GamePhase.BUY_PHASE, "buy_phase"),
        (GamePhase.PLAYING_ACTION_CARD, "playing_action_card"),
    ],
)
def test_to_string(phase, text):
    assert game_phase_to_string(phase) == text


@pytest.mark.parametrize("phase", list(GamePhase))
def test_round_trip(phase):
    assert game_phase_from_string(game_phase_to_string(phase)) is phase


def test_display_names():
    assert game_phase_display_name(GamePhase.ACTION_PHASE) == "Action phase"
    assert game_phase_display_name(GamePhase.BUY_PHASE) == "Buy phase"
    assert game_phase_display_name(GamePhase.PLAYING_ACTION_CARD) == "Playing an action card"


@pytest.mark.parametrize("text", ["", "Action phase", "ACTION_PHASE", "cleanup"])
def test_from_string_rejects_unknown(text):
    with pytest.raises(ValueError):
        game_phase_from_string(text)


def test_to_string_rejects_non_phase():
    with pytest.raises(ValueError):
        game_phase_to_string("action_phase")  # type: ignore[arg-type]


def test_display_name_rejects_non_phase():
    with pytest.raises(ValueError):
        game_phase_display_name("buy_phase")  # type: ignore[arg-type]