"""Pytest fixtures for WavyJack tests."""

import pytest
from random import Random

from core.cards import Card, Rank, Suit, create_deck
from core.game import GameState


def _make_state(player, dealer, game_over=False):
    """Build a consistent state: the deck holds every card not in a hand."""
    player = tuple(player)
    dealer = tuple(dealer)
    used = set(player) | set(dealer)
    deck = tuple(c for c in create_deck() if c not in used)
    return GameState(player_hand=player, dealer_hand=dealer, deck=deck, game_over=game_over)


@pytest.fixture
def make_state():
    """Factory for consistent states from explicit hands."""
    return _make_state


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck():
    """A fresh, unshuffled deck."""
    return create_deck()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return (Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.HEARTS))


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return (Card(Rank.TEN, Suit.SPADES), Card(Rank.SIX, Suit.HEARTS))


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return (
        Card(Rank.KING, Suit.SPADES),
        Card(Rank.QUEEN, Suit.HEARTS),
        Card(Rank.TWO, Suit.CLUBS),
    )


@pytest.fixture
def in_progress_state():
    """Player on 16 against a dealer six."""
    return _make_state(
        player=[Card(Rank.TEN, Suit.SPADES), Card(Rank.SIX, Suit.HEARTS)],
        dealer=[Card(Rank.SIX, Suit.CLUBS)],
    )


@pytest.fixture
def finished_state():
    """Player 20 beats dealer 18."""
    return _make_state(
        player=[Card(Rank.KING, Suit.SPADES), Card(Rank.QUEEN, Suit.HEARTS)],
        dealer=[Card(Rank.TEN, Suit.CLUBS), Card(Rank.EIGHT, Suit.DIAMONDS)],
        game_over=True,
    )
