"""Sort directives from API query strings — parsing and query translation."""

from __future__ import annotations

from .adapter import IQueryAdapter
from .config import SortConfig
from .criterion import Criterion, apply_criteria
from .exceptions import (
    FieldNotSortableError,
    InvalidOrderError,
    SortingError,
    SortParseError,
    TooManySortCriteriaError,
)
from .handlers import SortHandler, SortHandlerRegistry, handler_name, studly_case
from .order import SortOrder
from .parser import SortParser
from .path import JoinPath
from .whitelist import SortWhitelist

__all__ = [
    "Criterion",
    "FieldNotSortableError",
    "IQueryAdapter",
    "InvalidOrderError",
    "JoinPath",
    "SortConfig",
    "SortHandler",
    "SortHandlerRegistry",
    "SortOrder",
    "SortParseError",
    "SortParser",
    "SortWhitelist",
    "SortingError",
    "TooManySortCriteriaError",
    "apply_criteria",
    "handler_name",
    "studly_case",
]
