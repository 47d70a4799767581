"""Shared fixtures for the codec tests."""

from __future__ import annotations

import secrets
from typing import Callable

import pytest


@pytest.fixture
def random_bytes() -> Callable[..., bytes]:
    """Provide a generator of random byte sequences.

    The returned callable takes an optional length; without one it picks a
    length between 1 and 256.
    """

    def generate(length: int | None = None) -> bytes:
        if length is None:
            length = secrets.randbelow(256) + 1
        return secrets.token_bytes(length)

    return generate
