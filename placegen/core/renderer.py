"""Placeholder rendering and encoding."""

import io
import logging
from typing import Optional, Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFont

from .config import (
    BACKGROUND_LIGHTNESS,
    BACKGROUND_SATURATION,
    JPEG_QUALITY,
    OutputFormat,
)
from .errors import EncodingError
from .providers import RandomDataProvider, SeededProvider

logger = logging.getLogger(__name__)

LIGHT_TEXT = (255, 255, 255)
DARK_TEXT = (20, 20, 20)


def random_background(rng: RandomDataProvider) -> Tuple[int, int, int]:
    """Random hue at the configured saturation and lightness."""
    return ImageColor.getrgb(
        f"hsl({rng.hue()}, {BACKGROUND_SATURATION}%, {BACKGROUND_LIGHTNESS}%)"
    )


def text_color_for(background: Tuple[int, int, int]) -> Tuple[int, int, int]:
    """Pick a readable overlay colour for the given background."""
    r, g, b = background[:3]
    luminance = 0.299 * r + 0.587 * g + 0.114 * b
    return DARK_TEXT if luminance > 160 else LIGHT_TEXT


def _load_font(size: int) -> ImageFont.ImageFont:
    return ImageFont.load_default(size=max(size, 8))


def render_image(width: int,
                 height: int,
                 label: str,
                 background: Optional[str] = None,
                 rng: Optional[RandomDataProvider] = None) -> Image.Image:
    """Draw a labelled colour swatch.

    The dimensions are drawn centred as "W × H", the short label in the
    bottom-right corner.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        label: Short identifier drawn in the corner
        background: Pillow colour string, or None for a random hue
        rng: Random data provider used for the random hue

    Returns:
        RGB image
    """
    if background is None:
        fill = random_background(rng or SeededProvider())
    else:
        fill = ImageColor.getrgb(background)[:3]

    img = Image.new('RGB', (width, height), fill)
    draw = ImageDraw.Draw(img)
    text_fill = text_color_for(fill)

    short_side = min(width, height)

    # Dimensions, centred
    caption = f"{width} × {height}"
    font = _load_font(short_side // 8)
    bbox = draw.textbbox((0, 0), caption, font=font)
    text_width = bbox[2] - bbox[0]
    text_height = bbox[3] - bbox[1]
    position = ((width - text_width) // 2 - bbox[0], (height - text_height) // 2 - bbox[1])
    draw.text(position, caption, fill=text_fill, font=font)

    # Label, bottom-right corner
    label_font = _load_font(short_side // 20)
    margin = max(short_side // 40, 2)
    bbox = draw.textbbox((0, 0), label, font=label_font)
    position = (width - (bbox[2] - bbox[0]) - margin - bbox[0],
                height - (bbox[3] - bbox[1]) - margin - bbox[1])
    draw.text(position, label, fill=text_fill, font=label_font)

    return img


def encode_image(img: Image.Image, fmt: OutputFormat) -> bytes:
    """Encode an image with the fixed quality settings.

    Args:
        img: Image to encode
        fmt: Target format

    Returns:
        Encoded bytes

    Raises:
        EncodingError: If Pillow cannot encode the image
    """
    buf = io.BytesIO()
    try:
        if fmt is OutputFormat.JPEG:
            img.save(buf, format=fmt.pil_format, quality=JPEG_QUALITY)
        else:
            img.save(buf, format=fmt.pil_format, optimize=True)
    except (OSError, ValueError) as e:
        raise EncodingError(f"Failed to encode {img.width}x{img.height} image as {fmt.name}: {e}")

    data = buf.getvalue()
    logger.debug(f"Encoded {img.width}x{img.height} {fmt.name}: {len(data)} bytes")
    return data
