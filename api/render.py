"""
Frame image rendering with Pillow.

Draws the table for a TableView: title, player hand and score, dealer hand
and score (hidden mid-hand), and the outcome once the hand is over.

Card art is loaded from the assets directory by asset name
(``{value}_of_{suit}.png``, ``card_back.png``). When a file is missing the
card is drawn as a plain placeholder, so rendering never depends on the
asset pack being installed.
"""

import io
import logging
from functools import lru_cache
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont, ImageOps

from config import config, FrameConfig
from core.game import TableView
from core.game.view import CARD_BACK

logger = logging.getLogger(__name__)

BACKGROUND = "background.png"

TABLE_GREEN = (17, 94, 56)
TEXT_WHITE = (255, 255, 255)
CARD_FACE = (250, 250, 245)
CARD_EDGE = (40, 40, 40)
CARD_BACK_BLUE = (32, 56, 140)
SUIT_RED = (200, 30, 40)

CARD_GAP = 5


@lru_cache(maxsize=8)
def _font(size: int) -> ImageFont.ImageFont:
    return ImageFont.load_default(size=size)


@lru_cache(maxsize=128)
def _load_asset(path: str, width: int, height: int) -> Image.Image | None:
    """Load and scale an asset; None if it does not exist."""
    p = Path(path)
    if not p.is_file():
        return None
    with Image.open(p) as img:
        return img.convert("RGBA").resize((width, height))


def _placeholder_card(name: str, width: int, height: int) -> Image.Image:
    """Draw a stand-in for a missing card image."""
    card = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(card)

    if name == CARD_BACK:
        draw.rounded_rectangle(
            (0, 0, width - 1, height - 1), radius=8, fill=CARD_BACK_BLUE, outline=CARD_EDGE, width=2
        )
        return card

    draw.rounded_rectangle(
        (0, 0, width - 1, height - 1), radius=8, fill=CARD_FACE, outline=CARD_EDGE, width=2
    )
    value, _, suit = name.removesuffix(".png").partition("_of_")
    colour = SUIT_RED if suit in ("hearts", "diamonds") else CARD_EDGE
    font = _font(height // 4)
    draw.text((width // 2, height // 3), value.upper(), font=font, fill=colour, anchor="mm")
    draw.text((width // 2, height * 2 // 3), suit[:1].upper(), font=font, fill=colour, anchor="mm")
    return card


def _card_image(name: str, frame: FrameConfig) -> Image.Image:
    path = str(Path(frame.assets_dir) / name)
    img = _load_asset(path, frame.card_width, frame.card_height)
    if img is None:
        return _placeholder_card(name, frame.card_width, frame.card_height)
    return img


def _background(frame: FrameConfig) -> Image.Image:
    path = Path(frame.assets_dir) / BACKGROUND
    size = (frame.image_width, frame.image_height)
    if path.is_file():
        with Image.open(path) as img:
            return ImageOps.fit(img.convert("RGBA"), size)
    return Image.new("RGBA", size, TABLE_GREEN)


def _draw_row(canvas: Image.Image, names: list[str], top: int, frame: FrameConfig) -> None:
    """Paste a row of cards centred horizontally."""
    if not names:
        return
    row_width = len(names) * frame.card_width + (len(names) - 1) * CARD_GAP
    x = (canvas.width - row_width) // 2
    for name in names:
        card = _card_image(name, frame)
        canvas.alpha_composite(card, (x, top))
        x += frame.card_width + CARD_GAP


def render_table(view: TableView, frame: FrameConfig | None = None) -> Image.Image:
    """Draw the table for a view."""
    frame = frame or config.frame
    canvas = _background(frame)
    draw = ImageDraw.Draw(canvas)
    centre = canvas.width // 2

    title_font = _font(48)
    heading_font = _font(32)

    y = 30
    draw.text((centre, y), frame.title, font=title_font, fill=TEXT_WHITE, anchor="mt")
    y += 70

    draw.text((centre, y), f"Your Hand: {view.player_score}", font=heading_font, fill=TEXT_WHITE, anchor="mt")
    y += 45
    _draw_row(canvas, view.player_cards, y, frame)
    y += frame.card_height + 20

    draw.text(
        (centre, y), f"Dealer's Hand: {view.dealer_score_text}", font=heading_font, fill=TEXT_WHITE, anchor="mt"
    )
    y += 45
    _draw_row(canvas, view.dealer_cards, y, frame)
    y += frame.card_height + 20

    if view.message:
        draw.text((centre, y), view.message, font=heading_font, fill=TEXT_WHITE, anchor="mt")

    return canvas


def render_png(view: TableView, frame: FrameConfig | None = None) -> bytes:
    """Render a view to PNG bytes."""
    image = render_table(view, frame)
    buffer = io.BytesIO()
    image.convert("RGB").save(buffer, format="PNG")
    logger.debug("Rendered frame image (%d bytes)", buffer.tell())
    return buffer.getvalue()
