"""Tests for output dimension selection."""

from placegen.core.config import (
    LANDSCAPE_PRESETS,
    PORTRAIT_PRESETS,
    SIZE_JITTER,
    GenerationOptions,
)
from placegen.core.providers import SeededProvider
from placegen.core.sizing import max_dimensions, pick_size

from conftest import FixedProvider


def test_fixed_mode_returns_requested_size():
    for seed in range(20):
        assert pick_size(False, 800, 600, SeededProvider(seed)) == (800, 600)


def test_random_mode_stays_within_preset_jitter():
    presets = LANDSCAPE_PRESETS + PORTRAIT_PRESETS
    rng = SeededProvider(1234)

    for _ in range(500):
        width, height = pick_size(True, rng=rng)
        assert any(
            abs(width - w) <= SIZE_JITTER and abs(height - h) <= SIZE_JITTER
            for w, h in presets
        ), (width, height)


def test_random_mode_uses_both_orientations():
    rng = SeededProvider(7)
    sizes = [pick_size(True, rng=rng) for _ in range(200)]

    assert any(w > h for w, h in sizes)
    assert any(h > w for w, h in sizes)


def test_random_mode_applies_offset_to_chosen_preset():
    width, height = pick_size(True, rng=FixedProvider(offset=-5))
    base_width, base_height = LANDSCAPE_PRESETS[0]

    assert (width, height) == (base_width - 5, base_height - 5)


def test_offset_is_bounded_by_jitter():
    width, height = pick_size(True, rng=FixedProvider(offset=1000))
    base_width, base_height = LANDSCAPE_PRESETS[0]

    assert (width, height) == (base_width + SIZE_JITTER, base_height + SIZE_JITTER)


def test_max_dimensions():
    assert max_dimensions(GenerationOptions(random_size=False, width=640, height=480)) == (640, 480)
    assert max_dimensions(GenerationOptions(random_size=True)) == (1920 + SIZE_JITTER, 1080 + SIZE_JITTER)
