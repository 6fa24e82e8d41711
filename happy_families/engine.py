"""Turn engine driving a game of Happy Families."""

from __future__ import annotations

import logging
import random

from .cards import Deck
from .ports import InteractionPort
from .rules import RequestOutcome, TurnReport, determine_winner_index, target_index_for
from .state import GameConfig, GamePhase, Player

__all__ = ["GameEngine"]

logger = logging.getLogger(__name__)


class GameEngine:
    """Owns the deck and the players and runs the turn loop.

    Every decision is read from ``port`` and every event is narrated back
    through it; the engine itself never touches the console.
    """

    def __init__(
        self,
        config: GameConfig,
        port: InteractionPort,
        *,
        deck: Deck | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config
        self.port = port
        if deck is None:
            deck = Deck(rng=rng)
            deck.shuffle()
        self.deck = deck
        self.players = [Player(f"Player {i}") for i in range(1, config.num_players + 1)]
        self.current_player_index = 0
        self.phase = GamePhase.DEALING
        self.turn_number = 0
        self.emptied_hand_index: int | None = None
        self.winner_index: int | None = None

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    @property
    def is_over(self) -> bool:
        """``True`` once the deck is exhausted or a player emptied their hand."""

        return self.deck.is_empty() or self.emptied_hand_index is not None

    def total_cards(self) -> int:
        """Count every card in the deck, in hands, and in collected families."""

        held = sum(player.hand_size + player.collected_cards for player in self.players)
        return len(self.deck) + held

    def deal(self, cards_per_player: int | None = None) -> int:
        """Deal round-robin, one card at a time, and return the number dealt.

        Stops early if the deck runs out.
        """

        if cards_per_player is None:
            cards_per_player = self.config.cards_per_player
        dealt = 0
        for _ in range(cards_per_player):
            for player in self.players:
                card = self.deck.draw()
                if card is None:
                    break
                player.add_card(card)
                dealt += 1
        self.phase = GamePhase.TURN_LOOP
        logger.info(
            "Dealt %d card(s) to %d player(s); %d left in the deck",
            dealt,
            len(self.players),
            len(self.deck),
        )
        return dealt

    def play_turn(self) -> TurnReport:
        """Run a single request/resolution/family-check turn."""

        self.turn_number += 1
        player_index = self.current_player_index
        player = self.players[player_index]
        self.port.display_message(f"{player.name}'s turn.")
        self.port.display_hand(player.name, list(player.hand))

        family = self.port.prompt_family()
        role = self.port.prompt_role()
        logger.debug("Turn %d: %s asks for %r / %r", self.turn_number, player.name, family, role)

        requested = player.hand.find_card(family, role)
        if requested is None:
            self.port.display_message("You don't have the requested card.")
            report = TurnReport(
                turn_number=self.turn_number,
                player_index=player_index,
                family=family,
                role=role,
                outcome=RequestOutcome.NOT_HELD,
            )
            self._advance()
            return report

        target_index = target_index_for(player_index, len(self.players))
        target = self.players[target_index]
        card = None
        if target.hand.remove_card(requested):
            player.add_card(requested)
            card = requested
            outcome = RequestOutcome.TRANSFERRED
            self.port.display_message(f"{target.name} hands over {requested}.")
            logger.debug("%s took %s from %s", player.name, requested, target.name)
        else:
            self.port.display_message(f"{target.name} says: 'Pick a card!'")
            card = self.deck.draw()
            if card is None:
                outcome = RequestOutcome.NOTHING_DRAWN
                self.port.display_message("Drawn card: none, the deck is empty.")
            else:
                self.port.display_message(f"Drawn card: {card}")
                player.add_card(card)
                if card.family == family:
                    outcome = RequestOutcome.LUCKY_DIP
                    self.port.display_message("Lucky dip!")
                else:
                    outcome = RequestOutcome.DREW
            logger.debug("%s drew %s (%d left)", player.name, card, len(self.deck))

        completed = False
        won = False
        if player.hand.has_full_family(family):
            self.port.display_message(f"{player.name} says: 'Happy family!'")
            removed = player.hand.remove_family(family)
            player.families.append(removed[0].family)
            completed = True
            logger.info("%s completed the %s family", player.name, removed[0].family.value)
            if player.hand.is_empty():
                self.emptied_hand_index = player_index
                won = True
                logger.info("%s emptied their hand", player.name)

        report = TurnReport(
            turn_number=self.turn_number,
            player_index=player_index,
            family=family,
            role=role,
            outcome=outcome,
            target_index=target_index,
            card=card,
            completed_family=completed,
            won=won,
        )
        self._advance()
        return report

    def _advance(self) -> None:
        self.current_player_index = (self.current_player_index + 1) % len(self.players)

    def determine_winner(self) -> Player:
        self.winner_index = determine_winner_index(self.players, self.emptied_hand_index)
        return self.players[self.winner_index]

    def run(self) -> Player:
        """Play turns until the game ends and announce the winner."""

        self.phase = GamePhase.TURN_LOOP
        while not self.is_over:
            self.play_turn()
        self.phase = GamePhase.GAME_OVER
        winner = self.determine_winner()
        self.port.display_message(f"Game over! {winner.name} wins!")
        logger.info(
            "Game finished after %d turn(s); winner %s with %d card(s) in hand",
            self.turn_number,
            winner.name,
            winner.hand_size,
        )
        return winner

    def play(self) -> Player:
        """Deal if that has not happened yet, then run the game to completion."""

        if self.phase is GamePhase.DEALING:
            self.deal()
        return self.run()
