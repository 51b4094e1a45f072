"""Shared test fixtures."""

import hashlib
import hmac
from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from slash_lookup.app import app

TEST_SECRET = "S"


def _signature(body: bytes, secret: str, timestamp: str) -> str:
    """Slack-compatible v0 signature, computed independently of the app code."""
    basestring = b"v0:" + timestamp.encode() + b":" + body
    return "v0=" + hmac.new(secret.encode(), basestring, hashlib.sha256).hexdigest()


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app (lifespan not started)."""
    return TestClient(app)


@pytest.fixture
def valid_headers() -> Callable[..., dict[str, str]]:
    """Return a factory for signature headers over a body, timestamp "0"."""

    def _valid_headers(
        body: bytes, *, secret: str = TEST_SECRET, timestamp: str = "0"
    ) -> dict[str, str]:
        return {
            "X-Slack-Request-Timestamp": timestamp,
            "X-Slack-Signature": _signature(body, secret, timestamp),
        }

    return _valid_headers
