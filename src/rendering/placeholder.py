"""Loading placeholder shown while no device frame is available."""

from __future__ import annotations

import io

from PIL import Image, ImageDraw, ImageFont

from src.rendering.frame_data import Frame

PLACEHOLDER_WIDTH = 640
PLACEHOLDER_HEIGHT = 360
PLACEHOLDER_TEXT = "Loading..."

COLOR_BACKGROUND = (17, 17, 17)
COLOR_TEXT = (136, 136, 136)
COLOR_BORDER = (42, 42, 42)
BORDER_WIDTH = 2


def compose_placeholder(
    width: int = PLACEHOLDER_WIDTH,
    height: int = PLACEHOLDER_HEIGHT,
    text: str = PLACEHOLDER_TEXT,
) -> Image.Image:
    """Compose the RGB loading image with centered text."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Placeholder size must be positive, got {width}x{height}.")

    image = Image.new("RGB", (width, height), COLOR_BACKGROUND)
    draw = ImageDraw.Draw(image)
    draw.rectangle((0, 0, width - 1, height - 1), outline=COLOR_BORDER, width=BORDER_WIDTH)

    font = ImageFont.load_default()
    bbox = draw.textbbox((0, 0), text, font=font)
    text_width = bbox[2] - bbox[0]
    text_height = bbox[3] - bbox[1]
    draw.text(
        ((width - text_width) // 2, (height - text_height) // 2),
        text,
        font=font,
        fill=COLOR_TEXT,
    )
    return image


def placeholder_frame(width: int = PLACEHOLDER_WIDTH, height: int = PLACEHOLDER_HEIGHT) -> Frame:
    """Return the placeholder as a PNG frame."""
    buffer = io.BytesIO()
    compose_placeholder(width, height).save(buffer, format="PNG")
    return Frame(data=buffer.getvalue(), content_type="image/png")


__all__ = ["compose_placeholder", "placeholder_frame"]
