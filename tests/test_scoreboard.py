from __future__ import annotations

import pytest

from happy_families import scoreboard
from happy_families.cards import Card, Deck, Family, Role
from happy_families.engine import GameEngine
from happy_families.state import GameConfig


def _summary(game_number: int, winner: int, sizes: tuple[int, ...], families: tuple[int, ...]) -> scoreboard.GameSummary:
    return scoreboard.GameSummary(
        game_number=game_number,
        winner_index=winner,
        hand_sizes=sizes,
        families_completed=families,
        won_by_empty_hand=False,
        turns=10,
    )


def test_match_history_accumulates_totals() -> None:
    history = scoreboard.MatchHistory(num_players=2)
    history.record(_summary(1, 0, (6, 4), (1, 0)))
    history.record(_summary(2, 1, (3, 7), (0, 2)))
    history.record(_summary(3, 1, (2, 5), (0, 0)))

    totals = history.totals()
    assert len(history.games) == 3
    assert [total.wins for total in totals] == [1, 2]
    assert [total.families_completed for total in totals] == [1, 2]
    assert [total.cards_left for total in totals] == [11, 16]
    assert history.leaders() == [1]


def test_leaders_empty_without_games() -> None:
    assert scoreboard.MatchHistory(num_players=3).leaders() == []


def test_match_history_validates_player_count() -> None:
    history = scoreboard.MatchHistory(num_players=2)

    with pytest.raises(ValueError):
        history.record(_summary(1, 0, (1,), (0,)))
    with pytest.raises(ValueError):
        history.record(_summary(1, 2, (1, 1), (0, 0)))
    with pytest.raises(ValueError):
        scoreboard.MatchHistory(num_players=0)


def test_summarize_finished_game(scripted_port) -> None:
    port = scripted_port([("Bun, the Baker", "father")])
    deck = Deck([Card(Family.DIP, Role.SON), Card(Family.BUN, Role.DAUGHTER)])
    engine = GameEngine(GameConfig(num_players=2), port, deck=deck)
    for role in (Role.FATHER, Role.MOTHER, Role.SON):
        engine.players[0].add_card(Card(Family.BUN, role))
    engine.players[1].add_card(Card(Family.TAPE, Role.SON))

    with pytest.raises(ValueError):
        scoreboard.summarize_game(engine, 1)

    engine.run()
    summary = scoreboard.summarize_game(engine, 1)

    assert summary.winner_index == 0
    assert summary.hand_sizes == (0, 1)
    assert summary.families_completed == (1, 0)
    assert summary.won_by_empty_hand
    assert summary.turns == 1
