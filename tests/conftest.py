"""Shared fixtures for the placegen test suite."""

import logging
from datetime import datetime

import pytest

from placegen.core.budget import ResourceBudget
from placegen.core.generator import ImageGenerator
from placegen.core.session import GenerationSession


class FixedProvider:
    """Deterministic stand-in for SeededProvider."""

    def __init__(self, offset: int = 0):
        self.offset = offset
        self.issued = 0

    def short_id(self):
        self.issued += 1
        return f"id{self.issued:04d}"

    def hue(self):
        return 200

    def randint(self, a, b):
        # Clamp the configured offset into the requested range
        return max(a, min(b, self.offset))

    def choice(self, seq):
        return seq[0]

    def camera(self):
        return 'Canon', 'EOS R5'

    def software(self):
        return 'GIMP 2.10.34'

    def timestamp(self):
        return datetime(2024, 5, 1, 12, 30, 15)

    def coordinates(self):
        return 48.8566, 2.3522


@pytest.fixture
def provider():
    return FixedProvider()


@pytest.fixture
def generator(provider):
    return ImageGenerator(provider=provider, budget=ResourceBudget(use_system_memory=False))


@pytest.fixture
def session():
    return GenerationSession()


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers installed by setup_logger during a test."""
    yield
    logger = logging.getLogger('placegen')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
