"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Rank, Suit, create_deck, draw_card
from core.errors import DeckExhaustedError, GameError
from core.hand import Outcome, calculate_hand_value

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "create_deck",
    "draw_card",
    "DeckExhaustedError",
    "GameError",
    "Outcome",
    "calculate_hand_value",
]
