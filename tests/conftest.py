"""Shared pytest fixtures for the securetally test suite."""

import random

import pytest

from securetally.crypto.paillier import generate_key


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def seeded_random():
    """Deterministic random source, same bytes on every run."""
    return random.Random(1234).randbytes


@pytest.fixture(scope="session")
def keypair():
    """A 128-bit key pair shared by the whole session."""
    return generate_key(random.Random(42).randbytes, 128)
