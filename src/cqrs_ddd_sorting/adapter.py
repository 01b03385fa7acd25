"""IQueryAdapter — protocol for backend-specific query builders."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .handlers import SortHandler
    from .order import SortOrder


@runtime_checkable
class IQueryAdapter(Protocol):
    """Query-builder capabilities a ``Criterion`` applies itself to.

    An adapter wraps one query under construction and is owned by a single
    request; criteria are applied to it sequentially.
    """

    def has_join(self, table: str) -> bool:
        """Return True if ``table`` is already joined into the query."""
        ...

    def add_left_join(self, table: str, left_column: str, right_column: str) -> None:
        """Left join ``table`` on ``left_column = right_column``."""
        ...

    def add_order_by(self, column: str, order: SortOrder) -> None:
        """Append an ``ORDER BY`` term."""
        ...

    def restrict_projection_to(self, pattern: str) -> None:
        """Restrict selected columns to ``pattern`` (e.g. ``"orders.*"``)."""
        ...

    def get_sort_handler(self, name: str) -> SortHandler | None:
        """Return the custom sort handler registered under ``name``, if any."""
        ...
