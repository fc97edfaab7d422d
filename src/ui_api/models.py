"""Request/response models for the simulator API."""
from __future__ import annotations

from pydantic import BaseModel, Field

from src.device import Button, DrawCall
from src.taboo import PlayMode


class TickRequest(BaseModel):
    """
    One tick of simulated hardware.

    ``held`` lists every button down during this tick. A button held across
    several ticks counts as "just pressed" only on the first of them.
    """
    held: list[Button] = Field(default_factory=list)
    dt: float = Field(default=1 / 60, ge=0)


class ResetRequest(BaseModel):
    seed: int | None = None


class ShellStatus(BaseModel):
    phase: str  # "menu" or the session's turn phase
    clock: float
    party_count: int
    mode: PlayMode
    current_turn: str | None = None
    deck_size: int | None = None
    scores: list[int] | None = None
    remaining: float | None = None


class TickResponse(BaseModel):
    status: ShellStatus
    calls: list[DrawCall]
