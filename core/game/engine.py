"""Blackjack turn engine - pure transitions over GameState."""

import logging
from dataclasses import replace
from enum import Enum
from random import Random
from typing import Callable

from core.cards import create_deck, draw_card
from core.hand import calculate_hand_value, compare_scores, is_busted, Outcome
from core.game.state import GamePhase, GameState

logger = logging.getLogger(__name__)

DEALER_STANDS_ON = 17


class Action(Enum):
    """Player actions, one per frame button."""

    START = "start"
    HIT = "hit"
    STAND = "stand"
    NONE = "none"

    @property
    def label(self) -> str:
        """Button caption."""
        return {
            Action.START: "New Game",
            Action.HIT: "Hit",
            Action.STAND: "Stand",
            Action.NONE: "",
        }[self]

    @classmethod
    def parse(cls, value: str | None) -> "Action":
        """Map a button value to an action; anything unrecognised is NONE."""
        if not value:
            return cls.NONE
        try:
            action = cls(value.strip().lower())
        except ValueError:
            return cls.NONE
        return action


def start_game(rng: Random | None = None) -> GameState:
    """Deal a new hand: two cards to the player, then one to the dealer."""
    deck = create_deck()
    card1, deck = draw_card(deck, rng)
    card2, deck = draw_card(deck, rng)
    dealer_card, deck = draw_card(deck, rng)

    state = GameState(
        player_hand=(card1, card2),
        dealer_hand=(dealer_card,),
        deck=deck,
        game_over=False,
    )
    logger.debug(
        "New hand: player=%s dealer=%s",
        [str(c) for c in state.player_hand],
        str(dealer_card),
    )
    return state


def hit(state: GameState, rng: Random | None = None) -> GameState:
    """Player takes one card; the hand ends if the player busts."""
    card, deck = draw_card(state.deck, rng)
    player_hand = state.player_hand + (card,)
    logger.debug("Player hits %s (%d)", card, calculate_hand_value(player_hand))
    return replace(
        state,
        player_hand=player_hand,
        deck=deck,
        game_over=is_busted(player_hand),
    )


def dealer_should_hit(dealer_hand) -> bool:
    """Dealer draws while below 17."""
    return calculate_hand_value(dealer_hand) < DEALER_STANDS_ON


def stand(state: GameState, rng: Random | None = None) -> GameState:
    """Player stands; the dealer draws to 17 or more and the hand ends."""
    dealer_hand = state.dealer_hand
    deck = state.deck

    while dealer_should_hit(dealer_hand):
        card, deck = draw_card(deck, rng)
        dealer_hand = dealer_hand + (card,)

    logger.debug(
        "Player stands; dealer finishes on %d with %d cards",
        calculate_hand_value(dealer_hand),
        len(dealer_hand),
    )
    return replace(state, dealer_hand=dealer_hand, deck=deck, game_over=True)


_HANDLERS: dict[Action, Callable[[GameState, Random | None], GameState]] = {
    Action.HIT: hit,
    Action.STAND: stand,
}


def apply_action(
    state: GameState | None,
    action: Action,
    rng: Random | None = None,
) -> GameState:
    """
    Derive the next state from the previous one and an action.

    Args:
        state: Previous snapshot, or None for a fresh default
        action: Action to apply
        rng: Random source for draws

    Returns:
        The next snapshot. HIT and STAND on a finished hand, and NONE,
        return the previous snapshot unchanged.

    Raises:
        DeckExhaustedError: If a draw is needed and the deck is empty
    """
    if state is None:
        state = GameState()

    if action == Action.START:
        return start_game(rng)

    handler = _HANDLERS.get(action)
    if handler is None:
        return state

    if state.phase == GamePhase.OVER:
        logger.debug("Ignoring %s on a finished hand", action.value)
        return state

    return handler(state, rng)


def resolve_outcome(state: GameState) -> Outcome | None:
    """Outcome of a finished hand, or None while it is still being played."""
    if not state.game_over:
        return None
    return compare_scores(
        calculate_hand_value(state.player_hand),
        calculate_hand_value(state.dealer_hand),
    )


def available_actions(state: GameState) -> list[Action]:
    """Actions offered as buttons for this state, in button order."""
    if state.game_over:
        return [Action.START]
    return [Action.START, Action.HIT, Action.STAND]
