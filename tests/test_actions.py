import pytest

from dominion.actions import (
    ActionOrder,
    ActionPhaseOrder,
    AllowedChoice,
    BuyCardDecision,
    BuyPhaseOrder,
    ChooseFromHandOrder,
    ChooseFromStagedOrder,
    DeckChoiceDecision,
    EndActionPhaseDecision,
    EndTurnDecision,
    EndTurnOrder,
    GainFromBoardDecision,
    GainFromBoardOrder,
    PlayActionCardDecision,
)
from dominion.cards import CardType
from dominion.player_base import CardAccess


def test_play_action_decision_equality():
    assert PlayActionCardDecision("Village", CardAccess.HAND) == PlayActionCardDecision(
        "Village", CardAccess.HAND
    )
    assert PlayActionCardDecision("Village", CardAccess.HAND) != PlayActionCardDecision(
        "Village", CardAccess.STAGED_CARDS
    )


def test_buy_decision_equality():
    assert BuyCardDecision("Gold") == BuyCardDecision("Gold")
    assert not BuyCardDecision("Gold") == BuyCardDecision("Silver")


def test_different_decision_kinds_are_unequal():
    assert EndTurnDecision() == EndTurnDecision()
    assert not EndTurnDecision() == EndActionPhaseDecision()


def test_deck_choice_decision_equality():
    first = DeckChoiceDecision(["Copper", "Estate"], [AllowedChoice.TRASH, AllowedChoice.DISCARD])
    same = DeckChoiceDecision(["Copper", "Estate"], [AllowedChoice.TRASH, AllowedChoice.DISCARD])
    other = DeckChoiceDecision(["Copper"], [AllowedChoice.TRASH])
    assert first == same
    assert not first == other


def test_gain_from_board_decision_equality():
    assert GainFromBoardDecision("Silver") == GainFromBoardDecision("Silver")
    assert not GainFromBoardDecision("Silver") == GainFromBoardDecision("Gold")


def test_phase_orders_wire_form():
    assert ActionPhaseOrder().to_json() == {"type": "action_phase"}
    assert BuyPhaseOrder().to_json() == {"type": "buy_phase"}


def test_gain_order_wire_form():
    order = GainFromBoardOrder(5, CardType.TREASURE)
    assert order.to_json() == {
        "type": "gain_card",
        "max_cost": 5,
        "allowed_type": int(CardType.TREASURE),
    }


def test_end_turn_order_has_no_wire_form():
    assert EndTurnOrder().to_json() == {}
    assert EndTurnOrder() == EndTurnOrder()


@pytest.mark.parametrize(
    "order",
    [
        ActionPhaseOrder(),
        BuyPhaseOrder(),
        GainFromBoardOrder(4, CardType.KINGDOM),
        ChooseFromHandOrder(0, 4, AllowedChoice.TRASH, CardType.TREASURE),
        ChooseFromStagedOrder(1, 2, AllowedChoice.HAND_CARDS, CardType.KINGDOM, ["Smithy", "Gold"]),
    ],
)
def test_order_round_trip(order):
    restored = ActionOrder.from_json(order.to_json())
    assert restored == order
    assert type(restored) is type(order)


def test_hand_order_json_type():
    data = ChooseFromHandOrder(1, 3, AllowedChoice.DISCARD).to_json()
    assert data["type"] == "choose_from_hand"
    assert data["min_cards"] == 1
    assert data["max_cards"] == 3
    assert data["allowed_choices"] == int(AllowedChoice.DISCARD)


def test_staged_order_json_carries_cards():
    data = ChooseFromStagedOrder(0, 1, AllowedChoice.TRASH, cards=["Copper"]).to_json()
    assert data["type"] == "choose_from_staged"
    assert data["cards"] == ["Copper"]


def test_hand_order_equality_ignores_card_type():
    first = ChooseFromHandOrder(1, 2, AllowedChoice.TRASH, CardType.TREASURE)
    second = ChooseFromHandOrder(1, 2, AllowedChoice.TRASH, CardType.VICTORY)
    assert first == second
    assert not first == ChooseFromHandOrder(1, 3, AllowedChoice.TRASH, CardType.TREASURE)


def test_staged_order_equality_compares_cards():
    first = ChooseFromStagedOrder(1, 2, AllowedChoice.TRASH, cards=["Gold"])
    assert first == ChooseFromStagedOrder(1, 2, AllowedChoice.TRASH, cards=["Gold"])
    assert not first == ChooseFromStagedOrder(1, 2, AllowedChoice.TRASH, cards=["Silver"])


def test_hand_and_staged_orders_are_unequal():
    hand = ChooseFromHandOrder(1, 2, AllowedChoice.TRASH)
    staged = ChooseFromStagedOrder(1, 2, AllowedChoice.TRASH)
    assert not hand == staged


def test_order_kinds_are_unequal():
    assert not ActionPhaseOrder() == BuyPhaseOrder()


def test_from_json_unknown_type_raises():
    with pytest.raises(ValueError):
        ActionOrder.from_json({"type": "dance"})


def test_from_json_missing_type_raises():
    with pytest.raises(ValueError):
        ActionOrder.from_json({})


def test_from_json_missing_member_raises():
    with pytest.raises(ValueError):
        ActionOrder.from_json({"type": "gain_card", "max_cost": 3})


def test_from_json_negative_count_raises():
    with pytest.raises(ValueError):
        ActionOrder.from_json({"type": "gain_card", "max_cost": -1, "allowed_type": 2})