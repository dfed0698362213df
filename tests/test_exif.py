"""Tests for fabricated EXIF metadata."""

import io
from datetime import datetime, timedelta

import piexif
import pytest
from PIL import Image

from placegen.core.config import OutputFormat
from placegen.core.errors import MetadataError
from placegen.core.exif import fabricate_metadata, inject_metadata, read_metadata
from placegen.core.models import to_dms_rational
from placegen.core.providers import SeededProvider
from placegen.core.renderer import encode_image, render_image

from conftest import FixedProvider


@pytest.fixture
def jpeg_bytes():
    return encode_image(render_image(120, 90, 'exif', background='#884422'), OutputFormat.JPEG)


def test_dms_rational_conversion():
    assert to_dms_rational(45.5) == ((45, 1), (30, 1), (0, 100))
    assert to_dms_rational(10.0) == ((10, 1), (0, 1), (0, 100))

    degrees, minutes, seconds = to_dms_rational(48.8566)
    assert degrees == (48, 1)
    assert minutes == (51, 1)
    assert seconds[1] == 100
    assert abs(seconds[0] / 100 - 23.76) < 0.02


def test_fabricate_metadata_uses_provider():
    metadata = fabricate_metadata(FixedProvider())

    assert metadata.make == 'Canon'
    assert metadata.model == 'EOS R5'
    assert metadata.software == 'GIMP 2.10.34'
    assert metadata.taken_at == datetime(2024, 5, 1, 12, 30, 15)
    assert (metadata.latitude, metadata.longitude) == (48.8566, 2.3522)


def test_seeded_provider_ranges():
    now = datetime(2025, 1, 1)
    provider = SeededProvider(seed=99, now=now)

    for _ in range(200):
        metadata = fabricate_metadata(provider)
        assert 0 <= metadata.latitude < 90
        assert 0 <= metadata.longitude < 180
        assert now - timedelta(days=366) <= metadata.taken_at <= now
        assert metadata.make and metadata.model and metadata.software


def test_inject_and_read_back(jpeg_bytes):
    metadata = fabricate_metadata(FixedProvider())
    tagged = inject_metadata(jpeg_bytes, metadata)
    exif = read_metadata(tagged)

    assert exif['0th'][piexif.ImageIFD.Make] == b'Canon'
    assert exif['0th'][piexif.ImageIFD.Model] == b'EOS R5'
    assert exif['0th'][piexif.ImageIFD.Software] == b'GIMP 2.10.34'
    assert exif['Exif'][piexif.ExifIFD.DateTimeOriginal] == b'2024:05:01 12:30:15'
    assert exif['GPS'][piexif.GPSIFD.GPSLatitudeRef] == b'N'
    assert exif['GPS'][piexif.GPSIFD.GPSLongitudeRef] == b'E'
    assert exif['GPS'][piexif.GPSIFD.GPSLatitude] == to_dms_rational(48.8566)
    assert exif['GPS'][piexif.GPSIFD.GPSLongitude] == to_dms_rational(2.3522)


def test_inject_leaves_pixels_untouched(jpeg_bytes):
    tagged = inject_metadata(jpeg_bytes, fabricate_metadata(FixedProvider()))

    assert len(tagged) > len(jpeg_bytes)
    with Image.open(io.BytesIO(jpeg_bytes)) as before, Image.open(io.BytesIO(tagged)) as after:
        assert before.size == after.size
        assert before.tobytes() == after.tobytes()


def test_inject_rejects_png():
    png = encode_image(render_image(20, 20, 'p', background='white'), OutputFormat.PNG)

    with pytest.raises(MetadataError):
        inject_metadata(png, fabricate_metadata(FixedProvider()), OutputFormat.PNG)


def test_read_metadata_rejects_garbage():
    with pytest.raises(MetadataError):
        read_metadata(b"not an image at all")
