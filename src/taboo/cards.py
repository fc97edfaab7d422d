"""Loading the static word/taboo dataset into a card pool."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from .models import Card

logger = logging.getLogger(__name__)

DEFAULT_WORDS_PATH = Path(__file__).parent.parent.parent / "data" / "words.csv"


def parse_line(line: str, line_number: int) -> Card | None:
    """
    Parse one dataset line into a Card.

    Returns None for blank lines. Raises ValueError if the line has content
    but no target word in its first field.
    """
    line = line.strip()
    if not line:
        return None

    fields = [field.strip() for field in line.split(",")]
    word, taboo = fields[0], fields[1:]
    if not word:
        raise ValueError(f"Line {line_number} has no word field: {line!r}")

    return Card(word=word, taboo_words=tuple(taboo))


def is_single_word(word: str) -> bool:
    """Multi-word and hyphenated entries can't be spoken as a single target."""
    return " " not in word and "-" not in word


class CardPool:
    """The immutable, deduplicated set of every card in the dataset."""

    __slots__ = ("_cards",)

    def __init__(self, cards: tuple[Card, ...]):
        self._cards = cards

    @classmethod
    def load(cls, raw_text: str) -> "CardPool":
        """
        Build a pool from raw dataset text.

        The first occurrence of a word wins; later duplicates and multi-word
        entries are dropped with a warning. A line with no word is fatal.
        """
        parsed = [
            card
            for number, line in enumerate(raw_text.split("\n"), start=1)
            if (card := parse_line(line, number)) is not None
        ]
        logger.info("Found %d words", len(parsed))

        cards: dict[str, Card] = {}
        for card in parsed:
            if not is_single_word(card.word):
                logger.warning("Skipping multi-word entry %s", card.word)
            elif card.word in cards:
                logger.warning("Found duplicate %s", card.word)
            else:
                cards[card.word] = card

        logger.info("%d words after removing duplicates", len(cards))
        return cls(tuple(cards.values()))

    @classmethod
    def from_path(cls, path: Path) -> "CardPool":
        """Load a pool from a UTF-8 dataset file."""
        return cls.load(Path(path).read_text(encoding="utf-8"))

    @property
    def cards(self) -> tuple[Card, ...]:
        return self._cards

    def words(self) -> set[str]:
        return {card.word for card in self._cards}

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"CardPool({len(self._cards)} cards)"


def load_card_pool(path: Path | None = None) -> CardPool:
    """Load the bundled dataset, or the dataset at ``path``."""
    if path is None:
        path = DEFAULT_WORDS_PATH
    return CardPool.from_path(path)
