"""Random data providers used for labels, backgrounds and fabricated metadata."""

import random
import string
from datetime import datetime, timedelta
from typing import Optional, Protocol, Sequence, Tuple, TypeVar

from .config import SHORT_ID_LENGTH


T = TypeVar('T')

CAMERA_CATALOG = {
    'Canon': ['EOS 5D Mark IV', 'EOS R5', 'EOS 90D', 'PowerShot G7 X Mark III'],
    'Nikon': ['D850', 'Z6 II', 'D7500', 'Z fc'],
    'Sony': ['ILCE-7M4', 'ILCE-6400', 'DSC-RX100M7'],
    'FUJIFILM': ['X-T4', 'X100V', 'X-S10'],
    'Apple': ['iPhone 14 Pro', 'iPhone 13', 'iPhone 15 Pro Max'],
    'samsung': ['SM-G998B', 'SM-S918B'],
    'Google': ['Pixel 7', 'Pixel 8 Pro'],
    'OLYMPUS': ['E-M10MarkIV', 'E-M1MarkIII'],
}

SOFTWARE_TAGS = [
    'Adobe Photoshop Lightroom Classic 12.4',
    'Adobe Photoshop 24.7 (Windows)',
    'GIMP 2.10.34',
    'Capture One 23',
    'Darktable 4.4.2',
    'Firmware Ver.1.10',
    '17.1.2',
]

SHORT_ID_ALPHABET = string.ascii_lowercase + string.digits


class RandomDataProvider(Protocol):
    """Source of every random value the pipeline consumes.

    Tests substitute deterministic implementations to pin names, colours
    and metadata.
    """

    def short_id(self) -> str: ...

    def hue(self) -> int: ...

    def randint(self, a: int, b: int) -> int: ...

    def choice(self, seq: Sequence[T]) -> T: ...

    def camera(self) -> Tuple[str, str]: ...

    def software(self) -> str: ...

    def timestamp(self) -> datetime: ...

    def coordinates(self) -> Tuple[float, float]: ...


class SeededProvider:
    """Default provider backed by random.Random.

    Args:
        seed: Optional seed for reproducible runs
        now: Reference time for fabricated timestamps (default: current time)
    """

    def __init__(self, seed: Optional[int] = None, now: Optional[datetime] = None):
        self._random = random.Random(seed)
        self._now = now

    def short_id(self) -> str:
        return ''.join(self._random.choice(SHORT_ID_ALPHABET) for _ in range(SHORT_ID_LENGTH))

    def hue(self) -> int:
        return self._random.randint(0, 359)

    def randint(self, a: int, b: int) -> int:
        return self._random.randint(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        return self._random.choice(seq)

    def camera(self) -> Tuple[str, str]:
        make = self._random.choice(sorted(CAMERA_CATALOG))
        return make, self._random.choice(CAMERA_CATALOG[make])

    def software(self) -> str:
        return self._random.choice(SOFTWARE_TAGS)

    def timestamp(self) -> datetime:
        """Return a moment within the last 365 days, second precision."""
        now = self._now or datetime.now()
        offset = timedelta(seconds=self._random.randint(0, 365 * 24 * 3600))
        return (now - offset).replace(microsecond=0)

    def coordinates(self) -> Tuple[float, float]:
        """Return (latitude, longitude) in the north-east quadrant."""
        latitude = self._random.randint(0, 89) + self._random.random()
        longitude = self._random.randint(0, 179) + self._random.random()
        return latitude, longitude
