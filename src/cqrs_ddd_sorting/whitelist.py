"""SortWhitelist — per-resource sortable fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .exceptions import FieldNotSortableError

if TYPE_CHECKING:
    from collections.abc import Iterable

WILDCARD = "*"


class SortWhitelist:
    """Per-resource allowed sort fields; ``"*"`` allows every field."""

    def __init__(self, fields: Iterable[str] | None = None) -> None:
        self.fields = frozenset(fields or ())

    def is_allowed(self, field: str) -> bool:
        return WILDCARD in self.fields or field in self.fields

    def allow(self, field: str) -> None:
        """Raise FieldNotSortableError if the field is not allowed."""
        if not self.is_allowed(field):
            raise FieldNotSortableError(field)
