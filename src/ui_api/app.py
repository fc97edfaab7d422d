"""FastAPI app simulating the handheld for the Taboo engine."""
from __future__ import annotations

import logging
import random
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from src.device import Frame, InputSnapshot
from src.taboo import SessionShell, TabooConfig, load_card_pool

from .models import ResetRequest, ShellStatus, TickRequest, TickResponse

load_dotenv(Path(__file__).resolve().parents[2] / ".env")

logger = logging.getLogger("ui_api")

app = FastAPI(title="Taboo Simulator API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_config = TabooConfig.from_env()
_pool = load_card_pool(_config.words_path)
_shell = SessionShell(_pool, config=_config)
_input = InputSnapshot()


def _status(shell: SessionShell) -> ShellStatus:
    session = shell.session
    if session is None:
        return ShellStatus(
            phase="menu",
            clock=shell.clock,
            party_count=shell.menu.party_count,
            mode=shell.menu.mode,
        )
    return ShellStatus(
        phase=session.phase,
        clock=shell.clock,
        party_count=session.party_count,
        mode=session.mode,
        current_turn=session.current_turn.label(),
        deck_size=session.deck.deck_size(),
        scores=session.scores(),
        remaining=session.remaining(shell.clock),
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/status", response_model=ShellStatus)
async def status() -> ShellStatus:
    return _status(_shell)


@app.post("/tick", response_model=TickResponse)
async def tick(req: TickRequest) -> TickResponse:
    _input.set_held(req.held)
    frame = Frame(_config.width, _config.height)
    _shell.update(_input, frame, req.dt)
    _input.update()
    return TickResponse(status=_status(_shell), calls=frame.calls)


@app.post("/reset", response_model=ShellStatus)
async def reset(req: ResetRequest) -> ShellStatus:
    """Drop any running game and return to a fresh menu."""
    global _shell, _input
    seed = req.seed if req.seed is not None else _config.seed
    _shell = SessionShell(_pool, config=_config, rng=random.Random(seed))
    _input = InputSnapshot()
    logger.info("Simulator reset (seed=%s)", seed)
    return _status(_shell)
