"""Table view: what a renderer shows for a given state."""

from dataclasses import dataclass

from core.cards import Card
from core.hand import calculate_hand_value, Outcome
from core.game.engine import Action, available_actions, resolve_outcome
from core.game.state import GameState

CARD_BACK = "card_back.png"


def card_asset(card: Card) -> str:
    """Asset path for a face-up card."""
    return card.asset_name


def dealer_card_asset(card: Card, index: int, game_over: bool) -> str:
    """Asset path for a dealer card; only the first is shown mid-hand."""
    if index == 0 or game_over:
        return card_asset(card)
    return CARD_BACK


@dataclass(frozen=True)
class TableView:
    """Display data derived from a GameState."""

    player_score: int
    dealer_score: int | None
    player_cards: list[str]
    dealer_cards: list[str]
    outcome: Outcome | None
    actions: list[Action]

    @property
    def dealer_score_text(self) -> str:
        """Dealer score, or '?' while hidden."""
        return "?" if self.dealer_score is None else str(self.dealer_score)

    @property
    def message(self) -> str | None:
        """Outcome message, once the hand is over."""
        return str(self.outcome) if self.outcome is not None else None


def build_table_view(state: GameState) -> TableView:
    """Derive scores, card assets, outcome and buttons for a state."""
    dealer_score = calculate_hand_value(state.dealer_hand) if state.game_over else None

    return TableView(
        player_score=calculate_hand_value(state.player_hand),
        dealer_score=dealer_score,
        player_cards=[card_asset(c) for c in state.player_hand],
        dealer_cards=[
            dealer_card_asset(c, i, state.game_over)
            for i, c in enumerate(state.dealer_hand)
        ],
        outcome=resolve_outcome(state),
        actions=available_actions(state),
    )
