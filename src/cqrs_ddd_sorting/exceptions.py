"""
Sorting exception hierarchy.

All exceptions inherit from ``SortingError`` and provide ``to_dict()``
for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any

from .order import SortOrder


class SortingError(Exception):
    """Base exception for all sorting errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class SortParseError(SortingError):
    """A sort directive could not be parsed into field and order."""

    def __init__(self, value: str, reason: str | None = None) -> None:
        self.value = value
        self.reason = reason

        message = f'Unable to parse field name or order from "{value}"'
        if reason:
            message += f": {reason}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "SORT_PARSE_ERROR",
            "value": self.value,
            "reason": self.reason,
        }


class InvalidOrderError(SortingError):
    """Sort order is not one of the supported directions."""

    def __init__(self, order: object) -> None:
        self.order = order
        valid = ", ".join(o.value for o in SortOrder)
        super().__init__(f"Invalid order value {order!r}. Valid orders: {valid}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_ORDER",
            "order": str(self.order),
        }


class FieldNotSortableError(SortingError):
    """Field is not in the sortable whitelist."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Field {field!r} is not sortable")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_SORTABLE",
            "field": self.field,
        }


class TooManySortCriteriaError(SortingError):
    """More sort directives were supplied than allowed."""

    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(f"Got {count} sort criteria, at most {limit} allowed")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "TOO_MANY_SORT_CRITERIA",
            "count": self.count,
            "limit": self.limit,
        }
