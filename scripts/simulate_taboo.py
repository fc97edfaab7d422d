#!/usr/bin/env python3
"""Auto-play a Taboo session headlessly by pressing buttons on a simulated handheld."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).parent.parent / ".env")

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.device import Button, Frame, InputSnapshot
from src.taboo import (
    GameSession, Outcome, PlayMode, SessionShell, TabooConfig, TurnEnded, load_card_pool,
)


# ANSI colors
class Colors:
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    GRAY = "\033[90m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


def press(shell: SessionShell, snapshot: InputSnapshot, dt: float, *buttons: Button) -> Frame:
    """Advance one tick with ``buttons`` held, then release them for a tick."""
    frame = Frame(shell.config.width, shell.config.height)
    snapshot.set_held(buttons)
    shell.update(snapshot, frame, dt)
    snapshot.update()
    snapshot.set_held(())
    shell.update(snapshot, Frame(shell.config.width, shell.config.height), 0.0)
    snapshot.update()
    return frame


def print_turn(session: GameSession, state: TurnEnded) -> None:
    outcomes = {
        Outcome.WON: f"{Colors.GREEN}won{Colors.RESET}",
        Outcome.DISCARDED: f"{Colors.YELLOW}passed{Colors.RESET}",
        Outcome.TIMEOUT: f"{Colors.GRAY}timed out{Colors.RESET}",
    }
    print(f"{Colors.BOLD}{session.current_turn.label()}{Colors.RESET}: {state.won_count} won")
    for result in state.results:
        print(f"  {result.card.word:<14} {outcomes[result.outcome]}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Auto-play a Taboo session")
    parser.add_argument("--players", type=int, default=2, help="Number of players/teams")
    parser.add_argument("--mode", choices=["team", "player"], default="team")
    parser.add_argument("--turns", type=int, default=None, help="Turns to play (default: one full rotation)")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--words", type=Path, default=None, help="Dataset CSV path")
    parser.add_argument("--hit-rate", type=float, default=0.6, help="Chance a card is guessed")
    parser.add_argument("--dt", type=float, default=2.5, help="Seconds between presses")
    parser.add_argument("-q", "--quiet", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    if args.quiet:
        logging.basicConfig(level=logging.WARNING)
    elif args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.players < 2:
        parser.error("--players must be at least 2")

    config = TabooConfig.from_env(seed=args.seed, words_path=args.words)
    rng = random.Random(config.seed)
    shell = SessionShell(load_card_pool(config.words_path), config=config, rng=rng)
    snapshot = InputSnapshot()

    for _ in range(args.players - shell.menu.party_count):
        press(shell, snapshot, 0.0, Button.POV_UP)
    if args.mode == "player":
        press(shell, snapshot, 0.0, Button.MENU_L)
    press(shell, snapshot, 0.0, Button.MENU_R)

    session = shell.session
    assert session is not None
    mode = PlayMode.TEAM if args.mode == "team" else PlayMode.PLAYER
    turns = args.turns
    if turns is None:
        turns = args.players if mode == PlayMode.TEAM else args.players * (args.players - 1)

    for _ in range(turns):
        press(shell, snapshot, 0.0, Button.ACTION_A)
        while session.phase == "playing":
            button = Button.ACTION_A if rng.random() < args.hit_rate else Button.ACTION_B
            press(shell, snapshot, args.dt, button)
        if isinstance(session.turn_state, TurnEnded):
            print_turn(session, session.turn_state)
        press(shell, snapshot, 0.0, Button.ACTION_A)

    print(f"\n{Colors.BOLD}{'=' * 40}{Colors.RESET}")
    for party, score in enumerate(session.scores()):
        print(f"{'Team' if mode == PlayMode.TEAM else 'Player'} {party}: {score}")
    print(f"{session.deck.deck_size()} cards left in deck")

    press(shell, snapshot, 0.0, Button.ACTION_B)
    return 0


if __name__ == "__main__":
    sys.exit(main())
