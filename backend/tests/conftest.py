"""
Bills Demo Backend: Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the test suite.

Fixtures:
    ├── app:            A fresh FastAPI instance from create_app()
    ├── test_client:    HTTPX AsyncClient bound to that instance
    └── sample_bill:    A bill named "Alice" with the default catalog
"""

import logging
import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set before any app import so Settings() picks them up
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["BILL_OUTPUT_PATH"] = "bill.txt"


@pytest.fixture
def app():
    """A new application per test; routes added by a test stay local to it."""
    from app.main import create_app
    return create_app()


@pytest_asyncio.fixture
async def test_client(app) -> AsyncGenerator[AsyncClient, None]:
    """
    Async HTTP client talking to the app in-process.

    raise_app_exceptions=False lets tests observe the 500 responses built by
    the catch-all handler instead of the re-raised exception.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_bill():
    from app.models.bill import new_bill
    return new_bill("Alice")


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drop the stream handlers setup_logging() installs during a test."""
    root = logging.getLogger()
    before, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler and handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)
