"""Game engine exceptions."""


class GameError(Exception):
    """Base class for game engine errors."""


class DeckExhaustedError(GameError, IndexError):
    """Raised when a card is drawn from an empty deck."""
