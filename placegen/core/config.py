"""Generation options and pipeline constants."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from PIL import ImageColor

from .errors import InvalidOptionsError


# Standard landscape presets; portrait presets are the same sizes transposed
LANDSCAPE_PRESETS: List[Tuple[int, int]] = [
    (1920, 1080),
    (1600, 1200),
    (1280, 720),
    (1024, 768),
    (800, 600),
]
PORTRAIT_PRESETS: List[Tuple[int, int]] = [(h, w) for w, h in LANDSCAPE_PRESETS]

# Symmetric random offset applied to each dimension in random mode
SIZE_JITTER = 20

MAX_DIMENSION = 10000
MAX_COUNT = 10000

JPEG_QUALITY = 90

# Random backgrounds use a random hue at fixed saturation/lightness
BACKGROUND_SATURATION = 65
BACKGROUND_LIGHTNESS = 55

SHORT_ID_LENGTH = 6
PREVIEW_MAX_SIZE = 256

# Coarse progress is reported as a step index in [0, PROGRESS_STEPS]
PROGRESS_STEPS = 10

# Fixed ceiling for the estimated byte footprint of a single batch
MAX_BATCH_BYTES = 1024 ** 3

MEGABYTE = 1024 * 1024

TARGET_SIZE_CHOICES: Dict[str, int] = {
    'auto': 0,
    '1MB': 1 * MEGABYTE,
    '2MB': 2 * MEGABYTE,
    '5MB': 5 * MEGABYTE,
    '10MB': 10 * MEGABYTE,
    '20MB': 20 * MEGABYTE,
}


class OutputFormat(Enum):
    """Supported output raster formats."""
    JPEG = "jpeg"
    PNG = "png"

    @property
    def pil_format(self) -> str:
        return self.name

    @property
    def extension(self) -> str:
        return 'jpg' if self is OutputFormat.JPEG else 'png'

    @property
    def mime_type(self) -> str:
        return f"image/{self.value}"

    @property
    def supports_metadata(self) -> bool:
        """Only the JPEG container carries EXIF tags here."""
        return self is OutputFormat.JPEG

    @classmethod
    def parse(cls, value: Union[str, 'OutputFormat']) -> 'OutputFormat':
        """Parse a user-supplied format name.

        Args:
            value: Format name (jpeg, jpg, png) or an OutputFormat

        Returns:
            Matching OutputFormat
        """
        if isinstance(value, cls):
            return value

        name = str(value).strip().lower()
        if name in ('jpeg', 'jpg'):
            return cls.JPEG
        if name == 'png':
            return cls.PNG

        raise InvalidOptionsError(f"Unsupported output format: {value}. Supported: jpeg, png")


def parse_target_size(value: Union[str, int, None]) -> int:
    """Parse a target byte size from a menu label or a plain byte count.

    Args:
        value: One of TARGET_SIZE_CHOICES keys (case-insensitive), an integer,
            or None for "auto"

    Returns:
        Target size in bytes, 0 meaning no target
    """
    if value is None:
        return 0
    if isinstance(value, int):
        if value < 0:
            raise InvalidOptionsError(f"Target size must not be negative: {value}")
        return value

    text = str(value).strip()
    for label, size in TARGET_SIZE_CHOICES.items():
        if text.lower() == label.lower():
            return size

    if text.isascii() and text.isdecimal():
        return int(text)

    raise InvalidOptionsError(
        f"Invalid target size: {value}. Choose one of {', '.join(TARGET_SIZE_CHOICES)} or a byte count"
    )


def parse_dimensions(value: str) -> Tuple[int, int]:
    """Parse a WIDTHxHEIGHT string such as 800x600."""
    match = re.fullmatch(r'\s*(\d+)\s*[xX×]\s*(\d+)\s*', value or '')
    if not match:
        raise InvalidOptionsError(f"Invalid size '{value}', expected WIDTHxHEIGHT")
    return int(match.group(1)), int(match.group(2))


@dataclass
class GenerationOptions:
    """User-facing configuration of a single generation run."""
    count: int = 1
    random_size: bool = True
    width: int = 800
    height: int = 600
    format: OutputFormat = OutputFormat.JPEG
    include_metadata: bool = True
    background: Optional[str] = None
    target_size: int = 0

    def __post_init__(self):
        self.format = OutputFormat.parse(self.format)

    @property
    def embeds_metadata(self) -> bool:
        """Whether items produced with these options carry a metadata block."""
        return self.include_metadata and self.format.supports_metadata

    def validate(self) -> None:
        """Check option values.

        Raises:
            InvalidOptionsError: If any value is out of range
        """
        if not isinstance(self.count, int) or self.count < 1:
            raise InvalidOptionsError(f"Image count must be at least 1, got {self.count}")
        if self.count > MAX_COUNT:
            raise InvalidOptionsError(f"Image count must not exceed {MAX_COUNT}, got {self.count}")

        if not self.random_size:
            for label, value in (('width', self.width), ('height', self.height)):
                if not isinstance(value, int) or value < 1 or value > MAX_DIMENSION:
                    raise InvalidOptionsError(
                        f"Image {label} must be between 1 and {MAX_DIMENSION}, got {value}"
                    )

        if self.target_size < 0:
            raise InvalidOptionsError(f"Target size must not be negative: {self.target_size}")

        if self.background is not None:
            try:
                ImageColor.getrgb(self.background)
            except ValueError:
                raise InvalidOptionsError(f"Unrecognized background color: {self.background}")

    def to_dict(self) -> Dict[str, object]:
        return {
            'count': self.count,
            'random_size': self.random_size,
            'width': None if self.random_size else self.width,
            'height': None if self.random_size else self.height,
            'format': self.format.value,
            'include_metadata': self.embeds_metadata,
            'background': self.background or 'random',
            'target_size': self.target_size,
        }
