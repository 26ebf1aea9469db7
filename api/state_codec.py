"""Client-held game state: signed, URL-safe state blobs via itsdangerous."""

import logging
from typing import Any

from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired
from pydantic import ValidationError

from api.schemas import GameStateData
from config import config
from core.cards import Card, Rank, Suit
from core.game import GameState

logger = logging.getLogger(__name__)

STATE_SALT = "wavyjack.state"


def _serialize_card(card: Card) -> dict[str, str]:
    """Serialize a card to a dict."""
    return {"value": card.rank.value, "suit": card.suit.value}


def _deserialize_card(data: dict[str, str]) -> Card:
    """Deserialize a card from a dict."""
    return Card(Rank(data["value"]), Suit(data["suit"]))


def serialize_state(state: GameState) -> dict[str, Any]:
    """Serialize a game state to plain JSON-compatible data."""
    return {
        "playerHand": [_serialize_card(c) for c in state.player_hand],
        "dealerHand": [_serialize_card(c) for c in state.dealer_hand],
        "deck": [_serialize_card(c) for c in state.deck],
        "gameOver": state.game_over,
    }


def deserialize_state(data: Any) -> GameState | None:
    """
    Restore a game state from serialized data.

    Returns:
        The state, or None if the data is malformed or its cards do not
        make up exactly one full deck
    """
    try:
        parsed = GameStateData.model_validate(data)
    except ValidationError as exc:
        logger.warning("Discarding malformed state: %d validation errors", exc.error_count())
        return None

    state = GameState(
        player_hand=tuple(_deserialize_card(c.model_dump()) for c in parsed.player_hand),
        dealer_hand=tuple(_deserialize_card(c.model_dump()) for c in parsed.dealer_hand),
        deck=tuple(_deserialize_card(c.model_dump()) for c in parsed.deck),
        game_over=parsed.game_over,
    )
    if not state.is_consistent:
        logger.warning("Discarding state whose cards do not form a single deck")
        return None
    return state


class StateCodec:
    """Encode game states into opaque signed tokens and back."""

    def __init__(self, secret_key: str | None = None, max_age: int | None = None) -> None:
        """Initialize the codec with a secret key."""
        self._secret_key = secret_key or config.security.secret_key
        self._max_age = config.security.state_max_age if max_age is None else max_age
        self._serializer = URLSafeTimedSerializer(self._secret_key, salt=STATE_SALT)

    def encode(self, state: GameState) -> str:
        """Create a signed token from a game state."""
        return self._serializer.dumps(serialize_state(state))

    def decode(self, token: str | None, max_age: int | None = None) -> GameState | None:
        """
        Verify and extract a game state from a signed token.

        Args:
            token: The signed token to verify
            max_age: Maximum age in seconds (defaults to the configured age)

        Returns:
            The game state if the token is valid, None otherwise
        """
        if not token:
            return None

        if max_age is None:
            max_age = self._max_age
        try:
            data = self._serializer.loads(token, max_age=max_age)
        except SignatureExpired:
            logger.warning("Discarding expired state token")
            return None
        except BadSignature:
            logger.warning("Discarding state token with a bad signature")
            return None

        return deserialize_state(data)


# Global codec instance
_state_codec: StateCodec | None = None


def get_state_codec() -> StateCodec:
    """Get or create the state codec."""
    global _state_codec
    if _state_codec is None:
        _state_codec = StateCodec()
    return _state_codec
