"""
Shared pytest fixtures and configuration for SynX tests.
"""

import pytest


class Recorder:
    """Listener that records every value it is called with."""

    def __init__(self):
        self.calls = []

    def __call__(self, value):
        self.calls.append(value)

    @property
    def count(self):
        return len(self.calls)

    def reset(self):
        self.calls.clear()


@pytest.fixture
def recorder():
    """Provide a fresh recording listener."""
    return Recorder()


@pytest.fixture
def subscribed(recorder):
    """Subscribe the recorder to a container and forget the immediate call."""

    def attach(container):
        unsubscribe = container.subscribe(recorder)
        recorder.reset()
        return unsubscribe

    return attach
