"""Game state value and phase enumeration."""

from dataclasses import dataclass, field
from enum import Enum, auto

from core.cards import DECK_SIZE, Card, Deck, create_deck


class GamePhase(Enum):
    """
    Game phases.

    Flow: NOT_STARTED → IN_PROGRESS → OVER
    """

    # No cards dealt yet
    NOT_STARTED = auto()

    # Player is hitting or standing
    IN_PROGRESS = auto()

    # Hand finished, outcome available
    OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Phases reachable with a single action
VALID_TRANSITIONS: dict[GamePhase, list[GamePhase]] = {
    GamePhase.NOT_STARTED: [GamePhase.NOT_STARTED, GamePhase.IN_PROGRESS, GamePhase.OVER],
    GamePhase.IN_PROGRESS: [GamePhase.IN_PROGRESS, GamePhase.OVER],
    GamePhase.OVER: [GamePhase.OVER, GamePhase.IN_PROGRESS],  # IN_PROGRESS via a new deal
}


def is_valid_transition(from_phase: GamePhase, to_phase: GamePhase) -> bool:
    """
    Check if a phase transition is valid.

    Args:
        from_phase: Current phase
        to_phase: Desired phase

    Returns:
        True if the transition is allowed
    """
    return to_phase in VALID_TRANSITIONS.get(from_phase, [])


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of one hand.

    Player hand, dealer hand and deck together always hold each of the
    52 cards exactly once.
    """

    player_hand: tuple[Card, ...] = ()
    dealer_hand: tuple[Card, ...] = ()
    deck: Deck = field(default_factory=create_deck)
    game_over: bool = False

    @property
    def phase(self) -> GamePhase:
        """Get the current phase."""
        if self.game_over:
            return GamePhase.OVER
        if not self.player_hand and not self.dealer_hand:
            return GamePhase.NOT_STARTED
        return GamePhase.IN_PROGRESS

    @property
    def is_consistent(self) -> bool:
        """Check that the hands and deck partition a full deck."""
        cards = self.player_hand + self.dealer_hand + self.deck
        return len(cards) == DECK_SIZE and set(cards) == set(create_deck())


def default_state() -> GameState:
    """Build the state used when a request carries no usable prior state."""
    return GameState()
