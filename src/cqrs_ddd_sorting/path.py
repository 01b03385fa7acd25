"""
Dotted join paths.

A sort field spanning a join is written as::

    base_table.join_table.foreign_key.sort_column[.flip]

Without ``flip`` the foreign key lives in the joined table
(``join_table.foreign_key = base_table.id``).  With ``flip`` it lives in
the base table (``base_table.foreign_key = join_table.id``).
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import SortParseError

FLIP_TOKEN = "flip"
PATH_SEPARATOR = "."


@dataclass(frozen=True)
class JoinPath:
    """Parsed form of a dotted sort field."""

    base_table: str
    join_table: str
    foreign_key: str
    sort_column: str
    flip: bool = False

    @classmethod
    def parse(cls, field: str) -> JoinPath:
        """
        Split a dotted field into its join components.

        Raises:
            SortParseError: If the path does not have 4 segments, or 5
                segments ending with ``flip``, or has an empty segment.
        """
        parts = field.split(PATH_SEPARATOR)
        if any(not p for p in parts):
            raise SortParseError(field, "empty segment in join path")

        if len(parts) == 5:
            if parts[4] != FLIP_TOKEN:
                raise SortParseError(
                    field, f"5th path segment must be {FLIP_TOKEN!r}, got {parts[4]!r}"
                )
            return cls(*parts[:4], flip=True)

        if len(parts) != 4:
            raise SortParseError(
                field,
                "join path must be base.join_table.foreign_key.sort_column[.flip]",
            )
        return cls(*parts)

    @property
    def sort_column_ref(self) -> str:
        """Qualified column the query is ordered by."""
        return f"{self.join_table}.{self.sort_column}"

    @property
    def projection(self) -> str:
        """Projection keeping only base table columns."""
        return f"{self.base_table}.*"

    @property
    def join_columns(self) -> tuple[str, str]:
        """``(left_column, right_column)`` of the join condition."""
        if self.flip:
            return (
                f"{self.base_table}.{self.foreign_key}",
                f"{self.join_table}.id",
            )
        return (
            f"{self.join_table}.{self.foreign_key}",
            f"{self.base_table}.id",
        )
