"""The live deck: draw pile, discard pile and per-party won piles."""

from __future__ import annotations

import logging
import random
from typing import Iterable

from .cards import CardPool
from .models import Card

logger = logging.getLogger(__name__)


class WordDeck:
    """
    Cards cycling through a game session.

    Outside of a draw, every pool card sits in exactly one of: the draw pile,
    the discard pile, the won piles, or the active turn. Player-mode wins file
    the same card under both participants, so won piles are counted by
    distinct card.
    """

    def __init__(
        self,
        pool: CardPool | Iterable[Card],
        party_count: int,
        *,
        rng: random.Random | None = None,
    ):
        if party_count < 2:
            raise ValueError(f"Need at least 2 parties, got {party_count}")

        self._rng = rng if rng is not None else random.Random()
        self._all_cards: tuple[Card, ...] = tuple(pool)
        if not self._all_cards:
            raise ValueError("Card pool is empty")

        self.party_count = party_count
        self.draw_pile: list[Card] = list(self._all_cards)
        self._rng.shuffle(self.draw_pile)
        self.discard_pile: list[Card] = []
        self.won_piles: dict[int, list[Card]] = {i: [] for i in range(party_count)}

    @property
    def pool_size(self) -> int:
        return len(self._all_cards)

    def deck_size(self) -> int:
        """Cards not currently won or in play."""
        return len(self.draw_pile) + len(self.discard_pile)

    def draw_card(self) -> Card:
        """Pop a card, reshuffling the discards (or, failing that, the whole pool) in."""
        if not self.draw_pile:
            logger.debug("Draw pile empty, reshuffling %d discards", len(self.discard_pile))
            self._rng.shuffle(self.discard_pile)
            self.draw_pile, self.discard_pile = self.discard_pile, []

        if not self.draw_pile:
            logger.warning("Every card is won or in play, refilling from the full pool")
            self.draw_pile = list(self._all_cards)
            self._rng.shuffle(self.draw_pile)

        assert self.draw_pile, "Deck exhausted with an empty pool"
        return self.draw_pile.pop()

    def discard(self, card: Card) -> None:
        self.discard_pile.append(card)

    def credit(self, card: Card, parties: Iterable[int]) -> None:
        """File a won card under each party in ``parties``."""
        for party in parties:
            self.won_piles[party].append(card)

    def score(self, party: int) -> int:
        return len(self.won_piles[party])

    def scores(self) -> list[int]:
        return [self.score(i) for i in range(self.party_count)]

    def won_cards(self) -> set[Card]:
        """Distinct cards across all won piles."""
        return {card for pile in self.won_piles.values() for card in pile}
