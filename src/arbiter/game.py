"""Core game logic for the two-player Hanabi arbiter."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Sequence

from .errors import InvalidActionError
from .hand import Hand
from .knowledge import CardKnowledge
from .models import (
    COLORS,
    MAX_RANK,
    Action,
    ArbiterConfig,
    Card,
    Color,
    DropCardAction,
    EndReason,
    GameResult,
    GameStatus,
    PlayCardAction,
    StartNewGameAction,
    TellColorAction,
    TellRankAction,
)
from .table import Deck, TableState

logger = logging.getLogger(__name__)


def is_risky_play(
    knowledge: CardKnowledge,
    played_cards: int,
    table: Mapping[Color, int],
) -> bool:
    """
    Decide whether playing this card was a gamble from the player's view.

    Rules are checked in order, first match wins:
    1. A known 1 is safe if its color is known or nothing has been played yet.
    2. Known rank and known color is safe.
    3. Known rank is risky if any color not excluded for the card has a stack
       that is not exactly one below that rank.
    4. Anything else is risky.
    """
    rank = knowledge.card.rank
    if knowledge.rank_known and rank == 1:
        if knowledge.color_known or played_cards == 0:
            return False
    if knowledge.rank_known and knowledge.color_known:
        return False
    if knowledge.rank_known:
        return any(
            color not in knowledge.excluded_colors and table[color] != rank - 1
            for color in COLORS
        )
    return True


class GameArbiter:
    """
    Referee for a sequence of two-player games.

    Actions are applied one at a time by `apply` (or lazily by `run_games`).
    Rule violations end the current game instead of raising; once a game is
    over every action except StartNewGameAction is ignored.
    """

    def __init__(self, config: ArbiterConfig | None = None):
        self.config = config or ArbiterConfig()
        self.status = GameStatus.NOT_STARTED
        self.end_reason: EndReason | None = None
        self.hands: list[Hand] = [Hand() for _ in range(self.config.players_count)]
        self.deck = Deck()
        self.table = TableState()
        self.current_player = 0
        self.turns = 0
        self.played_cards = 0
        self.risked_turns = 0

    @property
    def is_over(self) -> bool:
        return self.status is GameStatus.OVER

    @property
    def next_player(self) -> int:
        return (self.current_player + 1) % self.config.players_count

    def result(self) -> GameResult:
        if self.end_reason is None:
            raise InvalidActionError("No game has ended yet")
        return GameResult(
            turns=self.turns,
            played_cards=self.played_cards,
            risked_turns=self.risked_turns,
            end_reason=self.end_reason,
        )

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------

    def run_games(self, actions: Iterable[Action | None]) -> Iterator[GameResult]:
        """Apply actions in order, yielding a result each time a game ends.

        `None` stands for an input that carried no action; it only passes
        the turn to the other player.
        """
        for action in actions:
            result = self.apply(action)
            if result is not None:
                yield result

    def apply(self, action: Action | None) -> GameResult | None:
        """
        Apply a single action on behalf of the current player.

        Returns:
            The final counters if this action ended the game, else None.

        Raises:
            InvalidActionError: if the action references a card slot that
                does not exist. Nothing is mutated in that case.
        """
        result = None
        if action is not None and (
            self.status is GameStatus.IN_PROGRESS or isinstance(action, StartNewGameAction)
        ):
            self.validate(action)
            # StartNewGame resets the counter itself
            if not isinstance(action, StartNewGameAction):
                self.turns += 1
            self._dispatch(action)
            if self.is_over:
                result = self.result()
        self.current_player = self.next_player
        return result

    def validate(self, action: Action) -> None:
        """Check every index an action refers to against the current hands.

        StartNewGameAction checks its own card count before touching any state.
        """
        if isinstance(action, StartNewGameAction):
            return
        if isinstance(action, (TellColorAction, TellRankAction)):
            target = self.hands[self.next_player]
            for index in action.card_indices:
                target.check_index(index)
        elif isinstance(action, (PlayCardAction, DropCardAction)):
            self.hands[self.current_player].check_index(action.card_index)
        else:
            raise InvalidActionError(f"Unknown action type: {type(action)}")

    def _dispatch(self, action: Action) -> None:
        if isinstance(action, StartNewGameAction):
            self.start_new_game(action.cards)
        elif isinstance(action, TellColorAction):
            self.tell_color(action.color, action.card_indices)
        elif isinstance(action, TellRankAction):
            self.tell_rank(action.rank, action.card_indices)
        elif isinstance(action, PlayCardAction):
            self.play_card(action.card_index)
        elif isinstance(action, DropCardAction):
            self.drop_card(action.card_index)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def start_new_game(self, cards: Sequence[Card]) -> None:
        """Reset all counters and deal hand_size cards to each player in turn."""
        players = self.config.players_count
        size = self.config.hand_size
        if len(cards) < self.config.dealt_cards:
            raise InvalidActionError(
                f"Need at least {self.config.dealt_cards} cards to deal, got {len(cards)}"
            )

        self.status = GameStatus.IN_PROGRESS
        self.end_reason = None
        self.hands = [Hand(cards[i * size:(i + 1) * size]) for i in range(players)]
        self.deck = Deck(cards[players * size:])
        self.table = TableState()
        # The turn passes right after this action, so player 0 acts next
        self.current_player = players - 1
        self.turns = 0
        self.played_cards = 0
        self.risked_turns = 0
        logger.info("Started new game with %d cards in the deck", len(self.deck))

    def tell_color(self, color: Color, card_indices: Iterable[int]) -> None:
        if self.status is not GameStatus.IN_PROGRESS:
            return
        if not self.hands[self.next_player].apply_hint("color", color, card_indices):
            logger.debug("Color hint %s contradicts player %d's hand", color.value, self.next_player)
            self._finish(EndReason.CONTRADICTION)

    def tell_rank(self, rank: int, card_indices: Iterable[int]) -> None:
        if self.status is not GameStatus.IN_PROGRESS:
            return
        if not self.hands[self.next_player].apply_hint("rank", rank, card_indices):
            logger.debug("Rank hint %d contradicts player %d's hand", rank, self.next_player)
            self._finish(EndReason.CONTRADICTION)

    def play_card(self, card_index: int) -> None:
        if self.status is not GameStatus.IN_PROGRESS:
            return
        knowledge = self.hands[self.current_player].get(card_index)
        card = knowledge.card
        if not self.table.is_playable(card):
            logger.debug(
                "Player %d played %s onto %s stack of height %d",
                self.current_player, card, card.color.value, self.table[card.color],
            )
            self._finish(EndReason.ILLEGAL_PLAY)
            return

        if self.check_for_risked(knowledge):
            self.risked_turns += 1
        self.table.place(card)
        self.played_cards += 1
        deck_exhausted = self._replace_slot(card_index)
        if card.rank == MAX_RANK and self.table.complete:
            self._finish(EndReason.ALL_STACKS_COMPLETE)
        elif deck_exhausted:
            self._finish(EndReason.DECK_EXHAUSTED)

    def drop_card(self, card_index: int) -> None:
        """Discard a slot of the current player and draw its replacement."""
        if self.status is not GameStatus.IN_PROGRESS:
            return
        if self._replace_slot(card_index):
            self._finish(EndReason.DECK_EXHAUSTED)

    def _replace_slot(self, card_index: int) -> bool:
        """Discard-and-draw shared by plays and drops. Returns True if the deck is now empty."""
        self.hands[self.current_player].drop_and_draw(card_index, self.deck.draw())
        return self.deck.is_empty

    def check_for_risked(self, knowledge: CardKnowledge) -> bool:
        return is_risky_play(knowledge, self.played_cards, self.table.heights())

    def _finish(self, reason: EndReason) -> None:
        if self.is_over:
            return
        self.status = GameStatus.OVER
        self.end_reason = reason
        logger.info(
            "Game over (%s): turns=%d played=%d risked=%d",
            reason.value, self.turns, self.played_cards, self.risked_turns,
        )
