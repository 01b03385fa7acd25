"""Sorting configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import InvalidOrderError
from .order import SortOrder


@dataclass(frozen=True)
class SortConfig:
    """Configuration for parsing sort directives from query parameters.

    Attributes:
        sort_key: Query parameter holding the sort directives.
        default_order: Order used by directives without an order suffix.
        default_sort: Directives applied when the request has none.
        max_criteria: Maximum number of directives per request
            (``None`` = unlimited).
        sortable_fields: Fields that may be sorted on (``None`` = any field,
            ``"*"`` in the set also allows any field).
    """

    sort_key: str = "sort"
    default_order: SortOrder = SortOrder.ASCENDING
    default_sort: tuple[str, ...] = ()
    max_criteria: int | None = None
    sortable_fields: frozenset[str] | None = None

    def __post_init__(self) -> None:
        # Accept plain strings ("desc") for convenience.
        try:
            order = SortOrder(self.default_order)
        except ValueError:
            raise InvalidOrderError(self.default_order) from None
        object.__setattr__(self, "default_order", order)
        if self.max_criteria is not None and self.max_criteria < 1:
            raise ValueError("max_criteria must be a positive integer or None")
