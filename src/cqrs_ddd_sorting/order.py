from enum import Enum


class SortOrder(str, Enum):
    """Supported sort directions."""

    ASCENDING = "asc"
    DESCENDING = "desc"
