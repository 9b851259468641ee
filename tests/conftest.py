"""Shared test fixtures."""

import random

import pytest

from rc5cipher.config import SUPPORTED_WIDTHS


@pytest.fixture
def rng():
    """Provide a seeded Random for deterministic test data."""
    return random.Random(42)


@pytest.fixture(params=SUPPORTED_WIDTHS, ids=lambda w: f"w{w}")
def width(request):
    """Run a test once for each supported word size."""
    return request.param


def random_bytes(rng: random.Random, length: int) -> bytes:
    return bytes(rng.getrandbits(8) for _ in range(length))
