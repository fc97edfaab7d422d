"""Data models for the Taboo game engine."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class Outcome(str, Enum):
    """How a single card was resolved during a turn."""
    WON = "WON"
    DISCARDED = "DISCARDED"
    TIMEOUT = "TIMEOUT"


class PlayMode(str, Enum):
    """Who takes turns: fixed teams, or rotating asker/askee pairs of players."""
    TEAM = "TEAM"
    PLAYER = "PLAYER"

    def toggled(self) -> "PlayMode":
        return PlayMode.PLAYER if self == PlayMode.TEAM else PlayMode.TEAM


class Card(BaseModel):
    """A target word plus the words the clue-giver may not say."""

    model_config = {"frozen": True}

    word: str
    taboo_words: tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.word

    def __hash__(self) -> int:
        return hash(self.word)


# Current turn

class TeamTurn(BaseModel):
    """A single team is guessing."""
    kind: Literal["team"] = "team"
    index: int = Field(ge=0)

    @property
    def parties(self) -> tuple[int, ...]:
        return (self.index,)

    def label(self) -> str:
        return f"Team {self.index}"


class PlayerTurn(BaseModel):
    """One player describes cards (asker) while another guesses (askee)."""
    kind: Literal["player"] = "player"
    asker: int = Field(ge=0)
    askee: int = Field(ge=0)

    @model_validator(mode="after")
    def check_distinct(self) -> "PlayerTurn":
        if self.asker == self.askee:
            raise ValueError(f"Asker and askee must differ (both {self.asker})")
        return self

    @property
    def parties(self) -> tuple[int, ...]:
        return (self.asker, self.askee)

    def label(self) -> str:
        return f"Player {self.asker} -> Player {self.askee}"


CurrentTurn = TeamTurn | PlayerTurn


# Turn state

class TurnResult(BaseModel):
    """One entry in a turn's history."""
    card: Card
    outcome: Outcome


class ReadyingUp(BaseModel):
    """Waiting for the active party to start their turn."""
    phase: Literal["readying_up"] = "readying_up"


class Playing(BaseModel):
    """The countdown is running and a card is in play."""
    phase: Literal["playing"] = "playing"
    start_time: float
    card: Card
    results: list[TurnResult] = Field(default_factory=list)

    @property
    def won_count(self) -> int:
        return sum(1 for r in self.results if r.outcome == Outcome.WON)


class TurnEnded(BaseModel):
    """The turn is over and its history can be browsed before it is scored."""
    phase: Literal["turn_ended"] = "turn_ended"
    results: list[TurnResult] = Field(min_length=1)
    cursor: int = 0

    @property
    def won_count(self) -> int:
        return sum(1 for r in self.results if r.outcome == Outcome.WON)

    @property
    def not_won_count(self) -> int:
        return len(self.results) - self.won_count

    @property
    def showing(self) -> TurnResult:
        return self.results[self.cursor]


TurnState = ReadyingUp | Playing | TurnEnded


# Configuration

class TabooConfig(BaseModel):
    """Tunables for a Taboo installation."""
    turn_seconds: float = Field(default=60.0, gt=0)
    min_parties: int = Field(default=2, ge=2)
    default_parties: int = 2
    default_mode: PlayMode = PlayMode.TEAM
    seed: int | None = None
    words_path: Path | None = None
    width: int = 640
    height: int = 480

    @model_validator(mode="after")
    def check_default_parties(self) -> "TabooConfig":
        if self.default_parties < self.min_parties:
            raise ValueError(
                f"default_parties ({self.default_parties}) is below min_parties ({self.min_parties})"
            )
        return self

    @classmethod
    def from_env(cls, **overrides) -> "TabooConfig":
        """Build a config from TABOO_* environment variables.

        Call ``load_dotenv`` first if values should come from a ``.env`` file.
        Explicit keyword overrides win over the environment.
        """
        values: dict = {}
        if os.getenv("TABOO_TURN_SECONDS"):
            values["turn_seconds"] = float(os.environ["TABOO_TURN_SECONDS"])
        if os.getenv("TABOO_SEED"):
            values["seed"] = int(os.environ["TABOO_SEED"])
        if os.getenv("TABOO_WORDS_PATH"):
            values["words_path"] = Path(os.environ["TABOO_WORDS_PATH"])
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
