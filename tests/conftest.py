"""
Shared fixtures for posthog_llm tests.
"""

import pytest

from posthog_llm import InMemorySink, PostHogLLM, PostHogLLMConfig


@pytest.fixture
def sink():
    """Sink that keeps captured events in memory."""
    return InMemorySink()


@pytest.fixture
def config():
    """Configuration with a default distinct ID and privacy mode off."""
    return PostHogLLMConfig(api_key="phc_test", default_distinct_id="default-user")


@pytest.fixture
def client(config, sink):
    """Client capturing into the in-memory sink."""
    return PostHogLLM(config, sink=sink)


@pytest.fixture
def trace(client):
    """A trace attributed to user-123."""
    return client.trace("test-trace", distinct_id="user-123")
