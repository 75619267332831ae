"""Shared test fixtures.

No test touches the network: HTTP goes through ``httpx.MockTransport`` and
the LLM is replaced by in-memory fakes defined in each test module.
"""
import os

import httpx
import pytest


def pytest_configure(config):
    """Set a dummy API key before any test modules are imported.

    ``csvq.config.settings`` is built at import time; tests that exercise
    the real OpenAI adapter must inject a fake SDK client themselves.
    """
    os.environ.setdefault("OPENAI_API_KEY", "sk-test-dummy-for-tests")


@pytest.fixture
def csv_transport():
    """Factory for a MockTransport serving fixed bodies, recording requested URLs."""

    def _make(body: str = "", status_code: int = 200, exc: Exception | None = None):
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            if exc is not None:
                raise exc
            return httpx.Response(status_code, text=body)

        transport = httpx.MockTransport(handler)
        transport.seen = seen
        return transport

    return _make


@pytest.fixture
def no_api_key(monkeypatch):
    """Run with no OpenAI key in either the environment or the loaded settings."""
    from csvq.config import settings

    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.setattr(settings, "OPENAI_API_KEY", None)
