"""Output dimension selection."""

from typing import Optional, Tuple

from .config import LANDSCAPE_PRESETS, PORTRAIT_PRESETS, SIZE_JITTER, GenerationOptions
from .providers import RandomDataProvider, SeededProvider


def pick_size(random_size: bool,
              width: Optional[int] = None,
              height: Optional[int] = None,
              rng: Optional[RandomDataProvider] = None) -> Tuple[int, int]:
    """Choose output dimensions.

    In fixed mode the explicit width and height are returned unchanged. In
    random mode an orientation is picked with equal probability, then a preset
    of that orientation, and each dimension gets an independent offset in
    [-SIZE_JITTER, SIZE_JITTER].

    Args:
        random_size: Use the randomized presets instead of width/height
        width: Fixed width in pixels
        height: Fixed height in pixels
        rng: Random data provider

    Returns:
        (width, height) tuple
    """
    if not random_size:
        return width, height

    rng = rng or SeededProvider()
    presets = rng.choice([LANDSCAPE_PRESETS, PORTRAIT_PRESETS])
    base_width, base_height = rng.choice(presets)

    return (
        base_width + rng.randint(-SIZE_JITTER, SIZE_JITTER),
        base_height + rng.randint(-SIZE_JITTER, SIZE_JITTER),
    )


def max_dimensions(options: GenerationOptions) -> Tuple[int, int]:
    """Largest (width, height) a run with these options can produce."""
    if not options.random_size:
        return options.width, options.height

    # Portrait presets share the landscape areas
    width, height = max(LANDSCAPE_PRESETS, key=lambda size: size[0] * size[1])
    return width + SIZE_JITTER, height + SIZE_JITTER
