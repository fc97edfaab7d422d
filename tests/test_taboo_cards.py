"""Tests for loading the Taboo card pool."""

import logging

import pytest
from pathlib import Path
from pydantic import ValidationError

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.taboo import Card, CardPool, load_card_pool, parse_line, is_single_word


# ============================================================================
# Line Parsing Tests
# ============================================================================

class TestParseLine:
    """Tests for parsing individual dataset lines."""

    def test_word_and_taboo_words(self):
        """First field is the word, the rest are taboo words."""
        card = parse_line("Apple,Fruit,Red,Tree", 1)
        assert card.word == "Apple"
        assert card.taboo_words == ("Fruit", "Red", "Tree")

    def test_fields_are_trimmed(self):
        """Whitespace around the line and each field is dropped."""
        card = parse_line("   Apple ,  Fruit,Red  ,  Tree \r", 1)
        assert card.word == "Apple"
        assert card.taboo_words == ("Fruit", "Red", "Tree")

    def test_word_without_taboo_words(self):
        """A lone word is a card with no taboo words."""
        card = parse_line("Apple", 1)
        assert card.word == "Apple"
        assert card.taboo_words == ()

    def test_blank_line_is_skipped(self):
        """Blank and whitespace-only lines produce no card."""
        assert parse_line("", 1) is None
        assert parse_line("   \t ", 2) is None

    def test_missing_word_is_fatal(self):
        """A non-blank line with an empty first field is an error."""
        with pytest.raises(ValueError, match="Line 7"):
            parse_line(" , Fruit, Red", 7)

    def test_single_word_check(self):
        """Spaces and hyphens mark multi-word entries."""
        assert is_single_word("Apple")
        assert not is_single_word("Ice cream")
        assert not is_single_word("T-shirt")


# ============================================================================
# Pool Loading Tests
# ============================================================================

class TestCardPoolLoad:
    """Tests for building a pool from dataset text."""

    def test_loads_all_distinct_cards(self):
        """Every valid line becomes a card."""
        pool = CardPool.load("Apple,Fruit\nBanana,Yellow\nCherry,Red\n")
        assert len(pool) == 3
        assert pool.words() == {"Apple", "Banana", "Cherry"}

    def test_records_split_on_newline_only(self):
        """Other Unicode line breaks inside a record don't split it."""
        pool = CardPool.load("Apple\x85Pie,Fruit\nBanana,Yellow\u2028Fruit\r\nCherry,Red")

        assert pool.words() == {"Apple\x85Pie", "Banana", "Cherry"}
        banana = next(card for card in pool if card.word == "Banana")
        assert banana.taboo_words == ("Yellow\u2028Fruit",)

    def test_blank_lines_ignored(self):
        """Blank lines anywhere are skipped."""
        pool = CardPool.load("\n\nApple,Fruit\n   \nBanana,Yellow\n\n")
        assert len(pool) == 2

    def test_duplicate_keeps_first(self):
        """Later lines with a word already seen are dropped; first wins."""
        pool = CardPool.load("Moon,Night,Sky\nSun,Day\nMoon,Luna,Cheese\n")

        moons = [card for card in pool if card.word == "Moon"]
        assert len(moons) == 1
        assert moons[0].taboo_words == ("Night", "Sky")

    def test_duplicate_is_case_sensitive(self):
        """Identity is the exact word, so case variants are distinct cards."""
        pool = CardPool.load("Moon,Night\nmoon,Night\n")
        assert len(pool) == 2

    def test_multi_word_entries_excluded(self):
        """Words with spaces or hyphens never reach the pool."""
        pool = CardPool.load("Ice cream,Cold\nT-shirt,Wear\nApple,Fruit\n")
        assert pool.words() == {"Apple"}

    def test_multi_word_does_not_shadow_later_entry(self):
        """A dropped multi-word line doesn't count as a first occurrence."""
        pool = CardPool.load("Ice cream,Cold\nIce cream,Cone\nApple,Fruit\n")
        assert pool.words() == {"Apple"}

    def test_drops_are_logged_not_raised(self, caplog):
        """Duplicates and multi-word entries produce warnings."""
        with caplog.at_level(logging.WARNING, logger="src.taboo.cards"):
            CardPool.load("Moon,Night\nMoon,Luna\nIce cream,Cold\n")

        messages = [record.getMessage() for record in caplog.records]
        assert any("duplicate Moon" in m for m in messages)
        assert any("Ice cream" in m for m in messages)

    def test_missing_word_fails_whole_load(self):
        """One bad line aborts the load."""
        with pytest.raises(ValueError, match="no word field"):
            CardPool.load("Apple,Fruit\n,Orphan,Taboo\nBanana,Yellow\n")

    def test_pool_is_immutable(self):
        """The pool exposes a tuple and its cards are frozen."""
        pool = CardPool.load("Apple,Fruit\n")
        assert isinstance(pool.cards, tuple)

        with pytest.raises(ValidationError):
            pool.cards[0].word = "Pear"

    def test_contains_and_hash(self):
        """Cards can be looked up in the pool and used in sets."""
        pool = CardPool.load("Apple,Fruit\nBanana,Yellow\n")
        apple = Card(word="Apple", taboo_words=("Fruit",))

        assert apple in pool
        assert len({apple, *pool}) == 2


# ============================================================================
# Bundled Dataset Tests
# ============================================================================

class TestBundledDataset:
    """Tests for the dataset shipped in data/words.csv."""

    def test_loads(self):
        """The bundled dataset loads with its duplicates and phrases dropped."""
        pool = load_card_pool()
        assert len(pool) == 70
        assert "Ice cream" not in pool.words()
        assert "T-shirt" not in pool.words()

    def test_first_moon_wins(self):
        """The dataset's duplicate Moon keeps its first taboo list."""
        pool = load_card_pool()
        moon = next(card for card in pool if card.word == "Moon")
        assert moon.taboo_words[0] == "Night"
        assert "Luna" not in moon.taboo_words

    def test_every_card_has_taboo_words(self):
        """Every bundled card lists five taboo words."""
        for card in load_card_pool():
            assert len(card.taboo_words) == 5, card.word

    def test_from_path(self, tmp_path):
        """A custom dataset path can be loaded."""
        path = tmp_path / "words.csv"
        path.write_text("Apple,Fruit\nBanana,Yellow\n", encoding="utf-8")

        pool = load_card_pool(path)
        assert pool.words() == {"Apple", "Banana"}
