"""Image generation pipeline for placegen."""
