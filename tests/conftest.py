"""Shared fixtures for sorting tests."""

from __future__ import annotations

import pytest

from cqrs_ddd_sorting.adapters.memory import RecordingQueryAdapter
from cqrs_ddd_sorting.handlers import SortHandlerRegistry


@pytest.fixture
def handlers() -> SortHandlerRegistry:
    return SortHandlerRegistry()


@pytest.fixture
def adapter(handlers: SortHandlerRegistry) -> RecordingQueryAdapter:
    """Fresh recording adapter wired to the ``handlers`` registry."""
    return RecordingQueryAdapter(handlers=handlers)
