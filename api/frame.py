"""Frame responses: Farcaster frame meta tags and their JSON equivalent."""

from html import escape
from urllib.parse import urlencode

from api.schemas import FrameButtonResponse, FrameResponse
from api.state_codec import StateCodec
from config import FrameConfig
from core.game import GameState, build_table_view


def build_frame(state: GameState, codec: StateCodec, frame: FrameConfig) -> FrameResponse:
    """Describe the frame for a state: image, buttons and the next state blob."""
    view = build_table_view(state)
    token = codec.encode(state)

    return FrameResponse(
        title=frame.title,
        image=f"{frame.post_url}/image?{urlencode({'state': token})}",
        aspect_ratio=frame.aspect_ratio,
        post_url=frame.post_url,
        state=token,
        buttons=[
            FrameButtonResponse(index=i, label=action.label, value=action.value)
            for i, action in enumerate(view.actions, start=1)
        ],
        player_score=view.player_score,
        dealer_score=view.dealer_score_text,
        game_over=state.game_over,
        outcome=view.message,
    )


def _meta(prop: str, content: str) -> str:
    return f'<meta property="{escape(prop)}" content="{escape(content)}" />'


def render_frame_html(frame: FrameResponse) -> str:
    """Render a frame as an HTML document of fc:frame meta tags."""
    tags = [
        _meta("og:title", frame.title),
        _meta("og:image", frame.image),
        _meta("fc:frame", "vNext"),
        _meta("fc:frame:image", frame.image),
        _meta("fc:frame:image:aspect_ratio", frame.aspect_ratio),
        _meta("fc:frame:post_url", frame.post_url),
        _meta("fc:frame:state", frame.state),
    ]
    for button in frame.buttons:
        tags.append(_meta(f"fc:frame:button:{button.index}", button.label))
        tags.append(_meta(f"fc:frame:button:{button.index}:action", "post"))

    head = "\n    ".join(tags)
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "  <head>\n"
        f"    <title>{escape(frame.title)}</title>\n"
        f"    {head}\n"
        "  </head>\n"
        "  <body>\n"
        f'    <img src="{escape(frame.image)}" alt="{escape(frame.title)}" />\n'
        "  </body>\n"
        "</html>\n"
    )
