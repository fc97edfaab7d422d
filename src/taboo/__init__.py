"""Taboo: a timed party word-guessing game for the handheld."""

from .models import (
    Card, Outcome, PlayMode, TeamTurn, PlayerTurn, CurrentTurn,
    TurnResult, ReadyingUp, Playing, TurnEnded, TurnState, TabooConfig,
)
from .cards import CardPool, load_card_pool, parse_line, is_single_word
from .deck import WordDeck
from .turns import first_turn, advance_turn, check_turn, player_gap, cycle_length, rotation
from .session import (
    GameSession, TURN_SECONDS,
    start_turn, resolve_card, end_turn, move_cursor, confirm_turn, remaining_seconds,
)
from .shell import MenuConfig, SessionShell

__all__ = [
    "Card", "Outcome", "PlayMode", "TeamTurn", "PlayerTurn", "CurrentTurn",
    "TurnResult", "ReadyingUp", "Playing", "TurnEnded", "TurnState", "TabooConfig",
    "CardPool", "load_card_pool", "parse_line", "is_single_word",
    "WordDeck",
    "first_turn", "advance_turn", "check_turn", "player_gap", "cycle_length", "rotation",
    "GameSession", "TURN_SECONDS",
    "start_turn", "resolve_card", "end_turn", "move_cursor", "confirm_turn", "remaining_seconds",
    "MenuConfig", "SessionShell",
]
