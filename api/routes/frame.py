"""Frame API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Header, Query
from fastapi.responses import HTMLResponse, Response

from api.frame import build_frame, render_frame_html
from api.render import render_png
from api.schemas import FrameActionRequest, FrameResponse
from api.state_codec import get_state_codec
from config import config
from core.game import Action, GameState, apply_action, available_actions, build_table_view

logger = logging.getLogger(__name__)

router = APIRouter()


def resolve_action(
    previous: GameState | None,
    button_index: int | None,
    value: str | None = None,
) -> Action:
    """
    Work out which action a request asks for.

    An explicit button value wins. Otherwise the 1-based button index is
    looked up in the buttons the previous state offered.
    """
    if value is not None:
        return Action.parse(value)

    if button_index is None:
        return Action.NONE

    offered = available_actions(previous or GameState())
    if not 1 <= button_index <= len(offered):
        logger.debug("Button index %d out of range", button_index)
        return Action.NONE
    return offered[button_index - 1]


def _wants_json(fmt: str | None, accept: str | None) -> bool:
    if fmt is not None:
        return fmt.lower() == "json"
    return accept is not None and "application/json" in accept


def _respond(state: GameState, as_json: bool) -> FrameResponse | HTMLResponse:
    frame = build_frame(state, get_state_codec(), config.frame)
    if as_json:
        return frame
    return HTMLResponse(render_frame_html(frame))


@router.get("", response_model=None)
async def initial_frame(
    fmt: Annotated[str | None, Query(alias="format")] = None,
    accept: Annotated[str | None, Header()] = None,
) -> FrameResponse | HTMLResponse:
    """Serve the opening frame."""
    return _respond(GameState(), _wants_json(fmt, accept))


@router.post("", response_model=None)
async def frame_action(
    request: FrameActionRequest | None = None,
    value: Annotated[str | None, Query()] = None,
    fmt: Annotated[str | None, Query(alias="format")] = None,
    accept: Annotated[str | None, Header()] = None,
) -> FrameResponse | HTMLResponse:
    """Apply a button click to the carried state and serve the next frame."""
    data = (request or FrameActionRequest()).untrusted_data

    previous = get_state_codec().decode(data.state)
    action = resolve_action(previous, data.button_index, value)
    state = apply_action(previous, action)

    logger.info(
        "Frame action %s: %s -> %s",
        action.value,
        previous.phase.name if previous is not None else "NONE",
        state.phase.name,
    )
    return _respond(state, _wants_json(fmt, accept))


@router.get("/image")
def frame_image(
    state: Annotated[str | None, Query()] = None,
) -> Response:
    """Render the carried state as a PNG."""
    game = get_state_codec().decode(state) or GameState()
    png = render_png(build_table_view(game), config.frame)
    return Response(
        content=png,
        media_type="image/png",
        headers={"Cache-Control": "max-age=0"},
    )
