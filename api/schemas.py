"""Pydantic schemas for frame requests, responses and the state blob."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Literal


# State blob schemas
class CardData(BaseModel):
    """Serialized card data."""

    value: Literal["2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A"]
    suit: Literal["hearts", "diamonds", "clubs", "spades"]


class GameStateData(BaseModel):
    """Serialized game state carried by the client."""

    model_config = ConfigDict(populate_by_name=True)

    player_hand: list[CardData] = Field(alias="playerHand")
    dealer_hand: list[CardData] = Field(alias="dealerHand")
    deck: list[CardData]
    game_over: bool = Field(alias="gameOver")


# Frame action schemas
class FrameUntrustedData(BaseModel):
    """Client-reported part of a frame action."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    button_index: int | None = Field(default=None, alias="buttonIndex")
    state: str | None = None

    @field_validator("state", mode="before")
    @classmethod
    def drop_non_string_state(cls, v):
        # Anything but a token is treated as no state at all
        if not isinstance(v, str):
            return None
        return v


class FrameActionRequest(BaseModel):
    """Frame action POST body."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    untrusted_data: FrameUntrustedData = Field(
        default_factory=FrameUntrustedData, alias="untrustedData"
    )


# Frame response schemas
class FrameButtonResponse(BaseModel):
    """One frame button."""

    index: int
    label: str
    value: Literal["start", "hit", "stand"]


class FrameResponse(BaseModel):
    """JSON description of a frame."""

    title: str
    image: str
    aspect_ratio: str
    post_url: str
    state: str
    buttons: list[FrameButtonResponse]
    player_score: int
    dealer_score: str
    game_over: bool
    outcome: str | None = None
