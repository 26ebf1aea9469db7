"""Hand evaluation for blackjack."""

from enum import Enum
from typing import Iterable

from core.cards import Card

BLACKJACK = 21


def calculate_hand_value(hand: Iterable[Card]) -> int:
    """
    Calculate the value of a hand.

    Non-aces are summed first. Aces are then resolved one at a time: each
    counts 11 if that keeps the running total at or under 21, otherwise 1.
    """
    total = 0
    aces = 0

    for card in hand:
        if card.is_ace:
            aces += 1
        else:
            total += card.rank.points

    for _ in range(aces):
        if total + 11 <= BLACKJACK:
            total += 11
        else:
            total += 1

    return total


def is_busted(hand: Iterable[Card]) -> bool:
    """Check if the hand has busted (value > 21)."""
    return calculate_hand_value(hand) > BLACKJACK


class Outcome(Enum):
    """Result of a finished hand, from the player's point of view."""

    PLAYER_BUST = "Bust! You lose!"
    DEALER_BUST = "Dealer busts! You win!"
    PLAYER_WINS = "You win!"
    DEALER_WINS = "You lose!"
    TIE = "It's a tie!"

    def __str__(self) -> str:
        return self.value


def compare_scores(player_score: int, dealer_score: int) -> Outcome:
    """
    Compare final player and dealer scores.

    The player bust check comes first, so a bust loses even when the
    dealer busts too.
    """
    if player_score > BLACKJACK:
        return Outcome.PLAYER_BUST

    if dealer_score > BLACKJACK:
        return Outcome.DEALER_BUST

    if player_score > dealer_score:
        return Outcome.PLAYER_WINS
    if player_score < dealer_score:
        return Outcome.DEALER_WINS
    return Outcome.TIE
