"""RecordingQueryAdapter — in-memory query adapter for tests and dry runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..handlers import SortHandler, SortHandlerRegistry
    from ..order import SortOrder


@dataclass(frozen=True)
class RecordedJoin:
    table: str
    left_column: str
    right_column: str


class RecordingQueryAdapter:
    """In-memory implementation of ``IQueryAdapter``.

    Records every join, order-by and projection it receives instead of
    building a real query.
    """

    def __init__(
        self,
        handlers: SortHandlerRegistry | None = None,
        joined_tables: set[str] | None = None,
    ) -> None:
        self._handlers = handlers
        self.joins: list[RecordedJoin] = []
        self.order_by: list[tuple[str, SortOrder]] = []
        self.projection: str | None = None
        self._preexisting = set(joined_tables or ())

    def has_join(self, table: str) -> bool:
        return table in self._preexisting or any(j.table == table for j in self.joins)

    def add_left_join(self, table: str, left_column: str, right_column: str) -> None:
        self.joins.append(RecordedJoin(table, left_column, right_column))

    def add_order_by(self, column: str, order: SortOrder) -> None:
        self.order_by.append((column, order))

    def restrict_projection_to(self, pattern: str) -> None:
        self.projection = pattern

    def get_sort_handler(self, name: str) -> SortHandler | None:
        if self._handlers is None:
            return None
        return self._handlers.get(name)

    def to_sql(self, base_table: str) -> str:
        """Render the recorded operations as an approximate SELECT statement."""
        sql = f"SELECT {self.projection or '*'} FROM {base_table}"
        for join in self.joins:
            sql += (
                f" LEFT JOIN {join.table}"
                f" ON {join.left_column} = {join.right_column}"
            )
        if self.order_by:
            terms = ", ".join(
                f"{col} {order.value.upper()}" for col, order in self.order_by
            )
            sql += f" ORDER BY {terms}"
        return sql
