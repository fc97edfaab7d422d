"""Top-level switch between the pre-game menu and an active session."""

from __future__ import annotations

import logging
import random

from pydantic import BaseModel, Field

from src.device import BLACK, Button, Frame, InputSnapshot

from .cards import CardPool
from .models import PlayMode, TabooConfig
from .render import render_menu
from .session import GameSession

logger = logging.getLogger(__name__)


class MenuConfig(BaseModel):
    """Settings chosen on the menu before a game starts."""

    model_config = {"frozen": True}

    party_count: int = Field(default=2, ge=2)
    mode: PlayMode = PlayMode.TEAM
    min_parties: int = Field(default=2, ge=2, exclude=True)

    def with_more_parties(self) -> "MenuConfig":
        return self.model_copy(update={"party_count": self.party_count + 1})

    def with_fewer_parties(self) -> "MenuConfig":
        return self.model_copy(update={"party_count": max(self.party_count - 1, self.min_parties)})

    def with_mode_toggled(self) -> "MenuConfig":
        return self.model_copy(update={"mode": self.mode.toggled()})


class SessionShell:
    """
    Owns the menu settings and the game session built from them.

    The caller drives it with ``update`` once per tick, passing the seconds
    elapsed since the previous tick. The shell keeps its own clock from those
    deltas so the turn countdown survives dropped ticks.
    """

    def __init__(
        self,
        pool: CardPool,
        *,
        config: TabooConfig | None = None,
        rng: random.Random | None = None,
    ):
        if config is None:
            config = TabooConfig()
        self.config = config
        self.pool = pool
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.clock = 0.0
        self.state: MenuConfig | GameSession = MenuConfig(
            party_count=config.default_parties,
            mode=config.default_mode,
            min_parties=config.min_parties,
        )
        self._menu = self.state

    @property
    def session(self) -> GameSession | None:
        return self.state if isinstance(self.state, GameSession) else None

    @property
    def menu(self) -> MenuConfig:
        """The current menu settings (kept while a session runs)."""
        return self._menu

    def _set_menu(self, menu: MenuConfig) -> None:
        self._menu = menu
        self.state = menu

    # Menu actions

    def increment_parties(self) -> None:
        if isinstance(self.state, MenuConfig):
            self._set_menu(self.state.with_more_parties())

    def decrement_parties(self) -> None:
        if isinstance(self.state, MenuConfig):
            self._set_menu(self.state.with_fewer_parties())

    def toggle_mode(self) -> None:
        if isinstance(self.state, MenuConfig):
            self._set_menu(self.state.with_mode_toggled())

    def start_session(self) -> GameSession | None:
        """Build a fresh session (and deck) from the menu settings."""
        if not isinstance(self.state, MenuConfig):
            return None
        menu = self.state
        self.state = GameSession(
            menu.party_count,
            menu.mode,
            self.pool,
            rng=self.rng,
            turn_seconds=self.config.turn_seconds,
        )
        logger.info("Started %s game with %d parties", menu.mode.value.lower(), menu.party_count)
        return self.state

    def end_session(self) -> None:
        """Throw the session away and go back to the menu."""
        if isinstance(self.state, GameSession):
            logger.info(
                "Game finished after %d turns, scores %s",
                self.state.turns_played,
                self.state.scores(),
            )
            self.state = self._menu

    # Per-tick driver

    def update(self, input: InputSnapshot, frame: Frame, dt: float) -> None:
        self.clock += dt
        frame.fill_rect(0, 0, frame.width, frame.height, BLACK)

        if isinstance(self.state, MenuConfig):
            render_menu(frame, self.state.party_count, self.state.mode)
            if input.just_pressed(Button.POV_UP):
                self.increment_parties()
            if input.just_pressed(Button.POV_DOWN):
                self.decrement_parties()
            if input.just_pressed(Button.MENU_L):
                self.toggle_mode()
            if input.just_pressed(Button.MENU_R):
                self.start_session()
            return

        if self.state.update(input, frame, self.clock):
            self.end_session()
