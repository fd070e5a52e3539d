"""Shared pytest fixtures for the catalog client tests."""

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from pact import Pact

PACT_DIR = Path(__file__).parent / "pacts"


@pytest.fixture
def pact() -> Generator[Pact, None, None]:
    """
    One Pact per test, merged into the shared pact file on teardown.

    Each test enters ``pact.serve()`` itself; leaving that block fails the
    test if a request did not match or a registered interaction was never
    exercised.
    """
    consumer = os.getenv("PACT_CONSUMER", "pactflow-example-consumer")
    provider = os.getenv("PACT_PROVIDER", "pactflow-example-provider")
    pact = Pact(consumer, provider).with_specification("V4")
    yield pact
    PACT_DIR.mkdir(parents=True, exist_ok=True)
    pact.write_file(PACT_DIR)


@pytest.fixture
def anyio_backend() -> str:
    """Run ``@pytest.mark.anyio`` tests on asyncio, the backend the client targets."""
    return "asyncio"
