"""Shared utilities for placegen."""
