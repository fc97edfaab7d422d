"""The per-turn phase machine: readying up, playing, reviewing."""

from __future__ import annotations

import logging
import random

from src.device import Button, Frame, InputSnapshot

from .cards import CardPool
from .deck import WordDeck
from .models import (
    Card,
    CurrentTurn,
    Outcome,
    Playing,
    PlayMode,
    ReadyingUp,
    TurnEnded,
    TurnResult,
    TurnState,
)
from .render import render_playing, render_readying, render_review
from .turns import advance_turn, check_turn, first_turn

logger = logging.getLogger(__name__)

TURN_SECONDS = 60.0


# ============================================================================
# Transitions
# ============================================================================

def start_turn(deck: WordDeck, now: float) -> Playing:
    """Start the clock and put the first card in play."""
    return Playing(start_time=now, card=deck.draw_card())


def remaining_seconds(state: Playing, now: float, turn_seconds: float = TURN_SECONDS) -> float:
    """Seconds left on the clock, recomputed from the start time every tick."""
    return turn_seconds - (now - state.start_time)


def resolve_card(state: Playing, deck: WordDeck, outcome: Outcome) -> Playing:
    """Take the card in play into the history and set a freshly drawn one."""
    taken = state.card
    results = [*state.results, TurnResult(card=taken, outcome=outcome)]
    return Playing(start_time=state.start_time, card=deck.draw_card(), results=results)


def end_turn(state: Playing) -> TurnEnded:
    """Stop the clock. The card still in play is recorded as a timeout."""
    results = [*state.results, TurnResult(card=state.card, outcome=Outcome.TIMEOUT)]
    return TurnEnded(results=results, cursor=len(results) - 1)


def move_cursor(state: TurnEnded, step: int) -> TurnEnded:
    """Move through the review, clamped to the ends of the history."""
    cursor = min(max(state.cursor + step, 0), len(state.results) - 1)
    return state.model_copy(update={"cursor": cursor})


def confirm_turn(state: TurnEnded, deck: WordDeck, turn: CurrentTurn) -> ReadyingUp:
    """
    Score the turn into the deck.

    Won cards go to every party taking part in the turn (the team, or both
    the asker and the askee). Everything else goes to the discard pile.
    """
    for result in state.results:
        if result.outcome == Outcome.WON:
            deck.credit(result.card, turn.parties)
        else:
            deck.discard(result.card)
    return ReadyingUp()


# ============================================================================
# Session
# ============================================================================

class GameSession:
    """
    One game from the menu's start until someone finishes it.

    Action methods are ignored when they make no sense for the current phase.
    """

    def __init__(
        self,
        party_count: int,
        mode: PlayMode,
        pool: CardPool,
        *,
        rng: random.Random | None = None,
        turn_seconds: float = TURN_SECONDS,
    ):
        self.party_count = party_count
        self.mode = mode
        self.turn_seconds = turn_seconds
        self.deck = WordDeck(pool, party_count, rng=rng)
        self.turn_state: TurnState = ReadyingUp()
        self.current_turn: CurrentTurn = first_turn(mode)
        self.turns_played = 0
        check_turn(self.current_turn, party_count)

    @property
    def phase(self) -> str:
        return self.turn_state.phase

    def in_play(self) -> list[Card]:
        """Cards held by the active turn rather than by the deck."""
        state = self.turn_state
        if isinstance(state, Playing):
            return [r.card for r in state.results] + [state.card]
        if isinstance(state, TurnEnded):
            return [r.card for r in state.results]
        return []

    def scores(self) -> list[int]:
        return self.deck.scores()

    def remaining(self, now: float) -> float | None:
        if not isinstance(self.turn_state, Playing):
            return None
        return remaining_seconds(self.turn_state, now, self.turn_seconds)

    # Actions

    def start(self, now: float) -> None:
        if isinstance(self.turn_state, ReadyingUp):
            self.turn_state = start_turn(self.deck, now)
            logger.info("%s started a turn", self.current_turn.label())

    def mark_correct(self) -> None:
        if isinstance(self.turn_state, Playing):
            self.turn_state = resolve_card(self.turn_state, self.deck, Outcome.WON)

    def mark_pass(self) -> None:
        if isinstance(self.turn_state, Playing):
            self.turn_state = resolve_card(self.turn_state, self.deck, Outcome.DISCARDED)

    def end_turn(self) -> None:
        if isinstance(self.turn_state, Playing):
            self.turn_state = end_turn(self.turn_state)
            logger.info(
                "%s turn over: %d won, %d not won",
                self.current_turn.label(),
                self.turn_state.won_count,
                self.turn_state.not_won_count,
            )

    def review_next(self) -> None:
        if isinstance(self.turn_state, TurnEnded):
            self.turn_state = move_cursor(self.turn_state, 1)

    def review_previous(self) -> None:
        if isinstance(self.turn_state, TurnEnded):
            self.turn_state = move_cursor(self.turn_state, -1)

    def confirm(self) -> None:
        if isinstance(self.turn_state, TurnEnded):
            self.turn_state = confirm_turn(self.turn_state, self.deck, self.current_turn)
            self.current_turn = advance_turn(self.current_turn, self.party_count)
            self.turns_played += 1
            logger.info("Turn confirmed, next up: %s", self.current_turn.label())

    def tick(self, now: float) -> None:
        """End the turn if the clock has run out."""
        remaining = self.remaining(now)
        if remaining is not None and remaining <= 0:
            self.end_turn()

    # Per-tick driver

    def update(self, input: InputSnapshot, frame: Frame, now: float) -> bool:
        """
        Render the current phase and apply this tick's input.

        Returns True when the players asked to finish the game.
        """
        state = self.turn_state

        if isinstance(state, ReadyingUp):
            render_readying(
                frame,
                deck_size=self.deck.deck_size(),
                turn=self.current_turn,
                mode=self.mode,
                scores=self.scores(),
            )
            if input.just_pressed(Button.ACTION_A):
                self.start(now)
            if input.just_pressed(Button.ACTION_B):
                return True

        elif isinstance(state, Playing):
            remaining = remaining_seconds(state, now, self.turn_seconds)
            render_playing(frame, state, remaining)
            if remaining <= 0 or input.just_pressed(Button.MENU_R):
                self.end_turn()
            elif input.just_pressed(Button.ACTION_A):
                self.mark_correct()
            elif input.just_pressed(Button.ACTION_B):
                self.mark_pass()

        elif isinstance(state, TurnEnded):
            render_review(frame, state, self.current_turn)
            if input.just_pressed(Button.POV_RIGHT):
                self.review_next()
            if input.just_pressed(Button.POV_LEFT):
                self.review_previous()
            if input.just_pressed(Button.ACTION_A):
                self.confirm()

        return False
