"""Turn rotation for team play and round-robin player pairing."""

from __future__ import annotations

from typing import Iterator

from .models import CurrentTurn, PlayerTurn, PlayMode, TeamTurn


def first_turn(mode: PlayMode) -> CurrentTurn:
    """The turn a fresh session starts on."""
    if mode == PlayMode.TEAM:
        return TeamTurn(index=0)
    return PlayerTurn(asker=0, askee=1)


def check_turn(turn: CurrentTurn, party_count: int) -> None:
    """Raise ValueError if the turn references a party outside [0, party_count)."""
    if party_count < 2:
        raise ValueError(f"Need at least 2 parties, got {party_count}")
    for party in turn.parties:
        if party >= party_count:
            raise ValueError(f"Party {party} out of range for {party_count} parties")


def player_gap(turn: PlayerTurn, party_count: int) -> int:
    """How far round the table the askee sits from the asker, in [1, N-1]."""
    return (turn.askee + party_count - turn.asker) % party_count


def advance_turn(turn: CurrentTurn, party_count: int) -> CurrentTurn:
    """
    Return whose turn is next.

    Teams simply rotate. Player pairs keep their gap while the asker walks
    round the table; when the asker wraps back to 0 the gap grows by one
    (and wraps from N-1 back to 1), so every ordered pair comes up exactly
    once in N*(N-1) turns.
    """
    check_turn(turn, party_count)

    if isinstance(turn, TeamTurn):
        return TeamTurn(index=(turn.index + 1) % party_count)

    asker = (turn.asker + 1) % party_count
    if asker != 0:
        askee = (turn.askee + 1) % party_count
    else:
        gap = player_gap(turn, party_count)
        askee = gap + 1 if gap + 1 != party_count else 1
    return PlayerTurn(asker=asker, askee=askee)


def cycle_length(mode: PlayMode, party_count: int) -> int:
    """Number of turns before the rotation repeats."""
    if mode == PlayMode.TEAM:
        return party_count
    return party_count * (party_count - 1)


def rotation(turn: CurrentTurn, party_count: int) -> Iterator[CurrentTurn]:
    """Yield one full cycle of turns, starting with ``turn`` itself."""
    mode = PlayMode.TEAM if isinstance(turn, TeamTurn) else PlayMode.PLAYER
    for _ in range(cycle_length(mode, party_count)):
        yield turn
        turn = advance_turn(turn, party_count)
