"""End-to-end two player game on an unshuffled deck."""

from __future__ import annotations

from happy_families.cards import Card, Deck, Family, Role
from happy_families.engine import GameEngine
from happy_families.rules import RequestOutcome
from happy_families.state import GameConfig


def test_two_player_game_on_stubbed_deck(first_card_port) -> None:
    checkpoints: list[int] = []

    class CheckedPort(first_card_port):
        def display_hand(self, player_name, cards) -> None:
            super().display_hand(player_name, cards)
            held = sum(player.hand_size for player in engine.players)
            checkpoints.append(len(engine.deck) + held)

    port = CheckedPort()
    engine = GameEngine(GameConfig(num_players=2), port, deck=Deck())

    assert engine.deal() == 8
    first, second = engine.players
    assert list(first.hand) == [
        Card(Family.TAPE, Role.DAUGHTER),
        Card(Family.TAPE, Role.MOTHER),
        Card(Family.SOOT, Role.DAUGHTER),
        Card(Family.SOOT, Role.MOTHER),
    ]
    assert list(second.hand) == [
        Card(Family.TAPE, Role.SON),
        Card(Family.TAPE, Role.FATHER),
        Card(Family.SOOT, Role.SON),
        Card(Family.SOOT, Role.FATHER),
    ]

    report = engine.play_turn()

    assert report.outcome is RequestOutcome.DREW
    assert report.target_index == 1
    assert report.card == Card(Family.POTS, Role.DAUGHTER)
    assert port.messages == [
        "Player 1's turn.",
        "Player 2 says: 'Pick a card!'",
        "Drawn card: Pots, the Painter (daughter)",
    ]
    assert first.hand_size == 5
    assert second.hand_size == 4

    winner = engine.run()

    assert engine.deck.is_empty()
    assert engine.turn_number == 36
    assert [player.hand_size for player in engine.players] == [22, 22]
    assert winner is first
    assert [msg for msg in port.messages if msg.startswith("Game over!")] == ["Game over! Player 1 wins!"]
    assert "Lucky dip!" not in port.messages
    assert checkpoints and all(total == 44 for total in checkpoints)
    assert engine.total_cards() == 44


def test_asking_for_an_opponents_card_is_refused(scripted_port) -> None:
    port = scripted_port([("Tape, the Tailor", "son")])
    engine = GameEngine(GameConfig(num_players=2), port, deck=Deck())
    engine.deal()

    report = engine.play_turn()

    assert report.outcome is RequestOutcome.NOT_HELD
    assert Card(Family.TAPE, Role.SON) in engine.players[1].hand
    assert engine.players[0].hand_size == 4
    assert len(engine.deck) == 36
