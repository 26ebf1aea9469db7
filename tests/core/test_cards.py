"""Tests for Card, deck construction and card draw."""

import pytest
from random import Random

from hypothesis import given, strategies as st

from core.cards import Card, Rank, Suit, DECK_SIZE, create_deck, draw_card
from core.errors import DeckExhaustedError, GameError


class TestCard:
    """Tests for the Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_card_immutability(self):
        """Test that cards are immutable."""
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_rank_points(self):
        """Test non-ace point values."""
        assert Rank.TWO.points == 2
        assert Rank.TEN.points == 10
        assert Rank.JACK.points == 10
        assert Rank.QUEEN.points == 10
        assert Rank.KING.points == 10

    def test_ace_has_no_fixed_points(self):
        """Ace values are resolved by the hand, not the rank."""
        with pytest.raises(ValueError):
            Rank.ACE.points

    def test_asset_name_is_lower_case(self):
        """Test the {value}_of_{suit}.png asset convention."""
        assert Card(Rank.KING, Suit.SPADES).asset_name == "k_of_spades.png"
        assert Card(Rank.ACE, Suit.HEARTS).asset_name == "a_of_hearts.png"
        assert Card(Rank.TEN, Suit.DIAMONDS).asset_name == "10_of_diamonds.png"
        assert Card(Rank.TWO, Suit.CLUBS).asset_name == "2_of_clubs.png"

    def test_card_from_string(self):
        """Test creating cards from strings."""
        assert Card.from_string("AS") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_string("2H") == Card(Rank.TWO, Suit.HEARTS)
        assert Card.from_string("10D") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_string("TD") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_string("kc") == Card(Rank.KING, Suit.CLUBS)

    def test_card_from_string_with_symbols(self):
        """Test creating cards from strings with suit symbols."""
        assert Card.from_string("A♠") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_string("K♥") == Card(Rank.KING, Suit.HEARTS)

    def test_card_from_string_invalid(self):
        """Test rejecting bad card strings."""
        with pytest.raises(ValueError):
            Card.from_string("X")
        with pytest.raises(ValueError):
            Card.from_string("1S")
        with pytest.raises(ValueError):
            Card.from_string("AX")

    def test_card_hash(self):
        """Test that cards can be used in sets/dicts."""
        cards = {Card(Rank.ACE, Suit.SPADES), Card(Rank.ACE, Suit.SPADES)}
        assert len(cards) == 1


class TestCreateDeck:
    """Tests for deck construction."""

    def test_deck_has_52_unique_cards(self, deck):
        """Test that the deck contains all 52 unique cards."""
        assert len(deck) == DECK_SIZE == 52
        assert len(set(deck)) == 52

    def test_deck_order_is_suit_major(self, deck):
        """Test the fixed construction order."""
        assert deck[0] == Card(Rank.TWO, Suit.HEARTS)
        assert deck[12] == Card(Rank.ACE, Suit.HEARTS)
        assert deck[13] == Card(Rank.TWO, Suit.DIAMONDS)
        assert deck[-1] == Card(Rank.ACE, Suit.SPADES)

    def test_deck_is_deterministic(self):
        """Test that construction does not shuffle."""
        assert create_deck() == create_deck()


class TestDrawCard:
    """Tests for drawing a card."""

    def test_draw_removes_one_card(self, deck, rng):
        """Test that the drawn card leaves the deck."""
        card, remaining = draw_card(deck, rng)
        assert card in deck
        assert card not in remaining
        assert len(remaining) == 51

    def test_draw_preserves_order(self, deck, rng):
        """Test that the remaining cards keep their order."""
        card, remaining = draw_card(deck, rng)
        assert remaining == tuple(c for c in deck if c != card)

    def test_draw_does_not_mutate_input(self, deck, rng):
        """Test that the original deck is left untouched."""
        draw_card(deck, rng)
        assert len(deck) == 52

    def test_draw_last_card(self):
        """Test drawing from a one-card deck."""
        only = Card(Rank.SEVEN, Suit.CLUBS)
        card, remaining = draw_card((only,))
        assert card == only
        assert remaining == ()

    def test_draw_all(self, deck, rng):
        """Test drawing every card."""
        drawn = []
        while deck:
            card, deck = draw_card(deck, rng)
            drawn.append(card)
        assert len(drawn) == 52
        assert len(set(drawn)) == 52

    def test_draw_empty_raises(self):
        """Test that drawing from an empty deck raises DeckExhaustedError."""
        with pytest.raises(DeckExhaustedError):
            draw_card(())

    def test_deck_exhausted_is_game_error(self):
        """Test the error hierarchy."""
        assert issubclass(DeckExhaustedError, GameError)
        assert issubclass(DeckExhaustedError, IndexError)

    def test_seeded_draw_is_reproducible(self, deck):
        """Test that a seeded random source gives the same card."""
        assert draw_card(deck, Random(7)) == draw_card(deck, Random(7))

    @given(
        size=st.integers(min_value=1, max_value=52),
        seed=st.integers(min_value=0, max_value=2**32 - 1),
    )
    def test_draw_from_any_deck(self, size, seed):
        """Test the draw contract over many deck sizes."""
        deck = create_deck()[:size]
        card, remaining = draw_card(deck, Random(seed))
        assert card in deck
        assert len(remaining) == size - 1
        assert set(remaining) | {card} == set(deck)
