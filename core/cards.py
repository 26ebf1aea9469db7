"""Card and deck primitives - immutable card representations."""

import logging
from dataclasses import dataclass
from enum import Enum
from random import Random

from core.errors import DeckExhaustedError

logger = logging.getLogger(__name__)


class Suit(Enum):
    """Card suits, in deck order."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    def __str__(self) -> str:
        symbols = {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, valued by their face label."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    def __str__(self) -> str:
        return self.value

    @property
    def points(self) -> int:
        """Return the non-ace point value (face cards = 10).

        Aces have no fixed value; hand scoring resolves them.
        """
        if self == Rank.ACE:
            raise ValueError("Ace value depends on the hand")
        if self in (Rank.JACK, Rank.QUEEN, Rank.KING):
            return 10
        return int(self.value)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def asset_name(self) -> str:
        """Image file name for this card, e.g. ``k_of_spades.png``."""
        return f"{self.rank.value.lower()}_of_{self.suit.value.lower()}.png"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh', '10D'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {rank.value: rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


Deck = tuple[Card, ...]

DECK_SIZE = len(Suit) * len(Rank)


def create_deck() -> Deck:
    """Build the 52-card deck, suit-major and rank-minor. Not shuffled."""
    return tuple(Card(rank, suit) for suit in Suit for rank in Rank)


def draw_card(deck: Deck, rng: Random | None = None) -> tuple[Card, Deck]:
    """
    Draw one card at a uniformly random position.

    Args:
        deck: Cards to draw from
        rng: Random source (a fresh unseeded one when omitted)

    Returns:
        The drawn card and the deck without it, remaining order preserved

    Raises:
        DeckExhaustedError: If the deck is empty
    """
    if not deck:
        logger.error("Attempted to draw from an empty deck")
        raise DeckExhaustedError("Cannot draw from empty deck")

    rng = rng or Random()
    index = rng.randrange(len(deck))
    return deck[index], deck[:index] + deck[index + 1:]
