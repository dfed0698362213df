"""Tests for placeholder rendering and encoding."""

import io

import pytest
from PIL import Image

from placegen.core.config import OutputFormat
from placegen.core.errors import EncodingError
from placegen.core.renderer import (
    DARK_TEXT,
    LIGHT_TEXT,
    encode_image,
    random_background,
    render_image,
    text_color_for,
)

from conftest import FixedProvider


def test_render_dimensions_and_explicit_background():
    img = render_image(320, 200, 'abc123', background='#336699')

    assert img.size == (320, 200)
    assert img.mode == 'RGB'
    assert img.getpixel((0, 0)) == (0x33, 0x66, 0x99)


def test_render_draws_overlay_text():
    img = render_image(320, 200, 'abc123', background='#336699')
    colors = {color for _, color in img.getcolors(maxcolors=320 * 200)}

    assert len(colors) > 1


def test_random_background_uses_provider_hue():
    rng = FixedProvider()
    img = render_image(100, 80, 'lbl', rng=rng)

    assert img.getpixel((0, 0)) == random_background(rng)


def test_text_color_contrasts_with_background():
    assert text_color_for((255, 255, 255)) == DARK_TEXT
    assert text_color_for((0, 0, 0)) == LIGHT_TEXT


@pytest.mark.parametrize("fmt,magic", [
    (OutputFormat.JPEG, b"\xff\xd8"),
    (OutputFormat.PNG, b"\x89PNG"),
])
def test_encode_formats(fmt, magic):
    img = render_image(64, 48, 'x', background='white')
    data = encode_image(img, fmt)

    assert data.startswith(magic)
    with Image.open(io.BytesIO(data)) as decoded:
        assert decoded.size == (64, 48)
        assert decoded.format == fmt.pil_format


def test_encode_failure_raises_encoding_error():
    # JPEG cannot store an alpha channel
    img = Image.new('RGBA', (10, 10))
    with pytest.raises(EncodingError):
        encode_image(img, OutputFormat.JPEG)
