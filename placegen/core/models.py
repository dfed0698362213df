"""Data model for generated images and their fabricated metadata."""

import base64
import io
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

import piexif
from PIL import Image

from .config import PREVIEW_MAX_SIZE, OutputFormat
from .errors import InvalidOptionsError
from ..utils.formatter import format_file_size
from ..utils.hasher import ContentHasher


def to_dms_rational(value: float):
    """Convert decimal degrees to EXIF (degrees, minutes, seconds) rationals.

    Seconds are stored with a denominator of 100.
    """
    value = abs(value)
    degrees = int(value)
    minutes = int((value - degrees) * 60)
    seconds = (value - degrees - minutes / 60) * 3600
    return ((degrees, 1), (minutes, 1), (int(seconds * 100), 100))


@dataclass
class ImageMetadata:
    """Fabricated camera and location information."""
    make: str
    model: str
    software: str
    taken_at: datetime
    latitude: float
    longitude: float

    def to_exif_dict(self) -> Dict[str, Any]:
        """Build a piexif dictionary with 0th, Exif and GPS IFDs."""
        stamp = self.taken_at.strftime("%Y:%m:%d %H:%M:%S")
        return {
            "0th": {
                piexif.ImageIFD.Make: self.make.encode('ascii', 'replace'),
                piexif.ImageIFD.Model: self.model.encode('ascii', 'replace'),
                piexif.ImageIFD.Software: self.software.encode('ascii', 'replace'),
                piexif.ImageIFD.DateTime: stamp,
            },
            "Exif": {
                piexif.ExifIFD.DateTimeOriginal: stamp,
                piexif.ExifIFD.DateTimeDigitized: stamp,
            },
            "GPS": {
                piexif.GPSIFD.GPSVersionID: (2, 3, 0, 0),
                piexif.GPSIFD.GPSLatitudeRef: b"N",
                piexif.GPSIFD.GPSLatitude: to_dms_rational(self.latitude),
                piexif.GPSIFD.GPSLongitudeRef: b"E",
                piexif.GPSIFD.GPSLongitude: to_dms_rational(self.longitude),
            },
            "1st": {},
            "thumbnail": None,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            'make': self.make,
            'model': self.model,
            'software': self.software,
            'taken_at': self.taken_at.isoformat(),
            'latitude': round(self.latitude, 6),
            'longitude': round(self.longitude, 6),
        }


@dataclass
class GeneratedImage:
    """A single generated placeholder held in the session list."""
    index: int
    short_id: str
    width: int
    height: int
    format: OutputFormat
    data: bytes
    metadata: Optional[ImageMetadata] = None
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if self.metadata is not None and not self.format.supports_metadata:
            raise InvalidOptionsError(f"{self.format.name} output cannot carry a metadata block")

    @property
    def name(self) -> str:
        return f"image_{self.index}_{self.short_id}_{self.width}x{self.height}.{self.format.extension}"

    @property
    def size(self) -> int:
        return len(self.data)

    def preview_uri(self) -> str:
        """Return a base64 data URI of a thumbnail for display.

        Decoders stop at the end of the image stream, so trailing padding
        does not affect the preview.
        """
        with Image.open(io.BytesIO(self.data)) as img:
            thumb = img.convert('RGB')
        thumb.thumbnail((PREVIEW_MAX_SIZE, PREVIEW_MAX_SIZE))

        buf = io.BytesIO()
        thumb.save(buf, format=self.format.pil_format)
        encoded = base64.b64encode(buf.getvalue()).decode('utf-8')
        return f"data:{self.format.mime_type};base64,{encoded}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'width': self.width,
            'height': self.height,
            'format': self.format.value,
            'size': self.size,
            'size_human': format_file_size(self.size),
            'sha256': ContentHasher().hash_bytes(self.data),
            'metadata': self.metadata.to_dict() if self.metadata else None,
        }
