# dominion

This package holds the game model and message protocol for a networked,
multiplayer Dominion deck-building card game. It covers the cards, the supply
board, player state, turn phases, victory-point rules, and the JSON messages
that clients and the server exchange. It needs nothing outside the standard
library.

## Modules

- `dominion.cards` is the card registry. It defines the `CardType` bit flags
  (`KINGDOM`, `TREASURE`, `VICTORY`, `CURSE`, `ACTION`, `ATTACK`, `REACTION`)
  and the frozen `CardBase` (`id`, `type`, `cost`), whose `is_action()`,
  `is_treasure()` and similar methods test the flags. The built-in cards are
  registered when the module is imported, and `register()` adds more. Lookups:
  `has`, `get_all` (a read-only mapping), `get_card` (raises `KeyError`),
  `get_cost`, `get_type` and `is_action` / `is_attack` / `is_reaction` /
  `is_treasure` / `is_victory` / `is_curse`. These raise `ValueError` for an
  unknown id. `kingdom_sorted_by_cost()` returns the kingdom card ids ordered
  by cost, then by id.
- `dominion.game_phase` defines `GamePhase` and three helpers:
  `game_phase_to_string`, `game_phase_from_string` and
  `game_phase_display_name`.
- `dominion.board` provides `Pile` and `Board`.
  - `Board(kingdom_cards, player_count)` builds the starting supply. It needs
    2 to 4 players, otherwise it raises `PlayerCountMismatch`. It needs
    exactly ten distinct kingdom cards, otherwise it raises `WrongCardCount`.
  - `empty_piles_count()` counts the empty piles.
  - `is_game_over()` is true once the Province pile is empty, or once three
    or more piles are empty.
  - `to_json()` and `from_json()` convert the board to and from plain dicts.
  - `validate_player_count()` checks a player count on its own.
- `dominion.player_base` defines `PlayerBase` and the `CardAccess` locations.
  `PlayerBase` has the counters `actions`, `buys`, `treasure` and
  `draw_pile_size`, plus `current_card` and `discard_pile`. It also has the
  methods `dec_actions`, `dec_buys` and `dec_treasure`, none of which lets a
  counter go below zero.
- `dominion.reduced` holds the game as one player sees it: `ReducedPlayer`
  (with `hand_cards`), `ReducedEnemy` (with `hand_size` only) and
  `ReducedGameState`, each with `to_json` / `from_json`.
- `dominion.victory` holds the scoring rules `ConstantVictoryPoints` and
  `VictoryPointsPerNCards` (`points` for every full set of `per_n` cards that
  pass `card_filter`).
- `dominion.actions` has two groups of classes:
  - Player decisions: `PlayActionCardDecision`, `BuyCardDecision`,
    `EndActionPhaseDecision`, `EndTurnDecision`, `DeckChoiceDecision` and
    `GainFromBoardDecision`.
  - Server orders: `ActionPhaseOrder`, `BuyPhaseOrder`, `EndTurnOrder`,
    `GainFromBoardOrder`, `ChooseFromHandOrder` and `ChooseFromStagedOrder`.
    `ActionOrder.to_json()` and `ActionOrder.from_json()` convert an order to
    and from a dict.
- `dominion.messages` defines every protocol message, split into
  `ClientToServerMessage` and `ServerToClientMessage` subclasses. Each message
  has `to_dict()` and `to_json()`, and `to_json()` returns compact JSON text.
  If no `message_id` is given, one is generated.
- `dominion.parsing` reads JSON text back into message objects with
  `parse_server_message` and `parse_client_message`. Both raise `ValueError`
  on malformed input or an unknown message type.
- `dominion.logger` is a process-wide logger. `get_logger()`, `set_level()`,
  `get_level()` and `write_to()` work on it. The default minimum level is
  `LogLevel.WARN`, and output goes to stderr (with coloured levels) unless
  `write_to(path)` sends it to a file.
- `dominion.exceptions` defines the error hierarchy, rooted at
  `DominionError`.
- `dominion.uuid_generator` provides `generate_uuid_v4()`, which returns 16
  random hex digits grouped 4-2-2-2-6.

Some comparisons ignore fields:

- Two `GameStateMessage`s compare equal without regard to their `game_state`.
- Two choose-from orders compare equal without regard to their `allowed_type`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from dominion import cards
from dominion.board import Board
from dominion.messages import StartGameRequestMessage
from dominion.parsing import parse_client_message

kingdom = ["Village", "Smithy", "Market", "Festival", "Laboratory",
           "Silk_Road", "Council_Room", "Witch", "Gardens", "Duke"]

print(cards.get_cost("Province"))    # 8

board = Board(kingdom, 2)
print(board.is_game_over())          # False
assert Board.from_json(board.to_json()) == board

request = StartGameRequestMessage(
    game_id="lobby", player_id="alice", selected_cards=kingdom, message_id="1"
)
assert parse_client_message(request.to_json()) == request
```

## What it does not do

This is a library of data types and message formats. It does not include:

- a server, a client, or any network code;
- lobby handling;
- a rules engine that plays out card effects;
- a user interface.

Programs that want to play the game must supply these themselves and use this
package to describe state and to encode and decode messages.