"""Draw calls for each screen of the Taboo app."""

from __future__ import annotations

from src.device import RED, WHITE, Frame

from .models import Card, CurrentTurn, Outcome, PlayMode, Playing, TurnEnded

OUTCOME_LABELS: dict[Outcome, str] = {
    Outcome.WON: "Got",
    Outcome.DISCARDED: "Discarded",
    Outcome.TIMEOUT: "Timed out",
}


def party_label(mode: PlayMode, index: int) -> str:
    return f"Team {index}" if mode == PlayMode.TEAM else f"Player {index}"


def render_card(frame: Frame, card: Card, x: int, y: int) -> None:
    """The target word, with its taboo words listed underneath in red."""
    frame.text(x, y, 48.0, WHITE, card.word)
    for i, taboo in enumerate(card.taboo_words):
        frame.text(x, y + 35 + i * 40, 36.0, RED, taboo)


def render_menu(frame: Frame, party_count: int, mode: PlayMode) -> None:
    frame.text(50, 50, 18.0, RED, f"Number of players/teams: {party_count}")
    mode_name = "Teams" if mode == PlayMode.TEAM else "Players"
    frame.text(50, 70, 18.0, RED, f"Mode: {mode_name} (left menu button to change)")
    frame.text(50, 90, 18.0, RED, "Press START")


def render_readying(
    frame: Frame,
    *,
    deck_size: int,
    turn: CurrentTurn,
    mode: PlayMode,
    scores: list[int],
) -> None:
    frame.text(50, 50, 18.0, WHITE, f"{deck_size} cards in deck")
    frame.text(50, 70, 18.0, WHITE, f"{turn.label()}: Press A to start")
    frame.text(50, 90, 18.0, WHITE, "B to finish game")
    for party, score in enumerate(scores):
        color = WHITE if party in turn.parties else RED
        frame.text(350, 50 + party * 20, 24.0, color, f"{party_label(mode, party)}: {score}")


def render_playing(frame: Frame, state: Playing, remaining: float) -> None:
    frame.text(50, 50, 48.0, WHITE, f"{remaining:.1f}s ({state.won_count})")
    render_card(frame, state.card, 100, 140)
    frame.text(50, 430, 18.0, WHITE, "B discard, A got card")


def render_review(frame: Frame, state: TurnEnded, turn: CurrentTurn) -> None:
    frame.text(50, 50, 48.0, WHITE, f"{turn.label()} got {state.won_count} cards")
    frame.text(50, 100, 48.0, WHITE, f"(discarded {state.not_won_count})")
    shown = state.showing
    frame.text(100, 150, 48.0, WHITE, OUTCOME_LABELS[shown.outcome])
    render_card(frame, shown.card, 100, 190)
    frame.text(50, 430, 18.0, WHITE, "POV change cards, A to continue")
