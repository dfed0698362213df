"""Command implementations for the placegen CLI."""
