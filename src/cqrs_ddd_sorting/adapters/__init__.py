"""Query adapter implementations."""

from __future__ import annotations

from .memory import RecordedJoin, RecordingQueryAdapter

__all__ = ["RecordedJoin", "RecordingQueryAdapter"]
