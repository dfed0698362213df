"""placegen - placeholder image generator with optional fabricated EXIF metadata."""

__version__ = "1.0.0"
