"""Fabricated EXIF metadata and its insertion into encoded JPEG bytes."""

import io
import logging
from typing import Any, Dict

import piexif

from .config import OutputFormat
from .errors import MetadataError
from .models import ImageMetadata
from .providers import RandomDataProvider

logger = logging.getLogger(__name__)


def fabricate_metadata(provider: RandomDataProvider) -> ImageMetadata:
    """Produce a random camera, software tag, recent timestamp and GPS fix."""
    make, model = provider.camera()
    latitude, longitude = provider.coordinates()

    return ImageMetadata(
        make=make,
        model=model,
        software=provider.software(),
        taken_at=provider.timestamp(),
        latitude=latitude,
        longitude=longitude,
    )


def inject_metadata(data: bytes, metadata: ImageMetadata,
                    fmt: OutputFormat = OutputFormat.JPEG) -> bytes:
    """Embed a metadata block into encoded image bytes.

    The EXIF segment is inserted at header level; the compressed scan data
    is copied unchanged.

    Args:
        data: Encoded image bytes
        metadata: Metadata to embed
        fmt: Format of ``data``

    Returns:
        Image bytes carrying the EXIF segment

    Raises:
        MetadataError: If the format has no metadata support or piexif fails
    """
    if not fmt.supports_metadata:
        raise MetadataError(f"{fmt.name} output does not support embedded metadata")

    try:
        exif_bytes = piexif.dump(metadata.to_exif_dict())
        output = io.BytesIO()
        piexif.insert(exif_bytes, data, output)
    except (ValueError, TypeError, piexif.InvalidImageDataError) as e:
        raise MetadataError(f"Failed to embed metadata: {e}")

    result = output.getvalue()
    logger.debug(f"Embedded {len(exif_bytes)} bytes of EXIF ({metadata.make} {metadata.model})")
    return result


def read_metadata(data: bytes) -> Dict[str, Any]:
    """Load the EXIF dictionary from JPEG bytes produced by this package."""
    # piexif treats anything it does not recognize as a file path
    if not data.startswith(b"\xff\xd8"):
        raise MetadataError("Data is not a JPEG stream")

    try:
        return piexif.load(data)
    except (ValueError, piexif.InvalidImageDataError) as e:
        raise MetadataError(f"Failed to read metadata: {e}")
