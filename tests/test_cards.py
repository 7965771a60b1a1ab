"""Tests for the card model and deck."""

import random

import pytest
from pokermojo.core.cards import (
    Card,
    Rank,
    Suit,
    full_deck,
    parse_card,
    parse_cards,
    shuffled_deck,
)


class TestCard:
    def test_equal_by_value(self):
        assert Card(Rank.ACE, Suit.SPADES) == Card(Rank.ACE, Suit.SPADES)
        assert Card(Rank.ACE, Suit.SPADES) != Card(Rank.ACE, Suit.HEARTS)

    def test_hashable(self):
        assert len({Card(Rank.TEN, Suit.CLUBS), Card(Rank.TEN, Suit.CLUBS)}) == 1

    def test_immutable(self):
        card = Card(Rank.TWO, Suit.DIAMONDS)
        with pytest.raises(AttributeError):
            card.rank = Rank.THREE

    def test_str_and_display(self):
        card = Card(Rank.TEN, Suit.HEARTS)
        assert str(card) == "10h"
        assert card.display == "10♥"

    def test_rank_order(self):
        assert Rank.ACE > Rank.KING > Rank.TWO
        assert int(Rank.ACE) == 14
        assert int(Rank.TWO) == 2


class TestParsing:
    @pytest.mark.parametrize("text", ["Th", "10h", "10H", "T♥"])
    def test_ten_spellings(self, text):
        assert parse_card(text) == Card(Rank.TEN, Suit.HEARTS)

    def test_face_cards(self):
        assert parse_card("Qs") == Card(Rank.QUEEN, Suit.SPADES)
        assert parse_card("ad") == Card(Rank.ACE, Suit.DIAMONDS)

    def test_parse_cards_commas_and_spaces(self):
        hand = parse_cards("As, Kd  10c,2h")
        assert [str(c) for c in hand] == ["As", "Kd", "10c", "2h"]

    @pytest.mark.parametrize("text", ["", "A", "1s", "Ax", "11h"])
    def test_rejects_garbage(self, text):
        with pytest.raises(ValueError):
            parse_card(text)


class TestDeck:
    def test_fifty_two_unique_cards(self):
        deck = full_deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_thirteen_per_suit(self):
        deck = full_deck()
        for suit in Suit:
            assert sum(1 for c in deck if c.suit is suit) == 13

    def test_fresh_each_call(self):
        d1 = full_deck()
        d1.pop()
        assert len(full_deck()) == 52

    def test_shuffle_is_permutation(self):
        deck = shuffled_deck(random.Random(7))
        assert sorted(deck, key=str) == sorted(full_deck(), key=str)

    def test_shuffle_deterministic_with_seed(self):
        assert shuffled_deck(random.Random(7)) == shuffled_deck(random.Random(7))

    def test_shuffle_varies_with_seed(self):
        assert shuffled_deck(random.Random(7)) != shuffled_deck(random.Random(8))
