"""Presets command implementation."""

from ..core.config import (
    LANDSCAPE_PRESETS,
    PORTRAIT_PRESETS,
    SIZE_JITTER,
    TARGET_SIZE_CHOICES,
)
from ..utils.formatter import OutputFormatter, format_file_size


def collect_presets() -> dict:
    """Size presets and target size menu as plain data."""
    sizes = []
    for orientation, presets in (('landscape', LANDSCAPE_PRESETS), ('portrait', PORTRAIT_PRESETS)):
        for width, height in presets:
            sizes.append({
                'orientation': orientation,
                'size': f"{width}x{height}",
                'range': (
                    f"{width - SIZE_JITTER}-{width + SIZE_JITTER} x "
                    f"{height - SIZE_JITTER}-{height + SIZE_JITTER}"
                ),
            })

    targets = [
        {'choice': label, 'bytes': size, 'size': format_file_size(size) if size else 'natural'}
        for label, size in TARGET_SIZE_CHOICES.items()
    ]

    return {'sizes': sizes, 'target_sizes': targets}


def execute(args) -> int:
    """Execute the presets command."""
    data = collect_presets()
    formatter = OutputFormatter(args.format)

    if args.format == 'table':
        print("Random size presets:")
        formatter.print_data(data['sizes'])
        print("\nTarget sizes:")
        formatter.print_data(data['target_sizes'])
    else:
        formatter.print_data(data)

    return 0
