"""
Apply sort criteria to a SQLAlchemy ``Select`` statement.

``SQLAlchemyQueryAdapter`` implements ``IQueryAdapter`` on top of a
``Select``.  Table and column names coming from sort directives are never
rendered as raw SQL: they are resolved against the model's ``MetaData``
when possible and otherwise turned into lightweight ``table()`` /
``column()`` constructs, so the compiler quotes them like any identifier.

Custom handlers are looked up in the registry passed to the adapter, then
in a ``__sort_handlers__`` registry declared on the model::

    class OrderRecord(Base):
        __tablename__ = "orders"
        __sort_handlers__ = SortHandlerRegistry()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy.sql import operators
from sqlalchemy.sql.expression import Join, column, table

from ..criterion import apply_criteria
from ..order import SortOrder

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy import ColumnElement, FromClause, Select

    from ..criterion import Criterion
    from ..handlers import SortHandler, SortHandlerRegistry

logger = logging.getLogger(__name__)


class SQLAlchemyQueryAdapter:
    """``IQueryAdapter`` backed by a SQLAlchemy ``Select``.

    Args:
        stmt: The statement to extend.
        model: Optional mapped class; its table is the base table for plain
            fields and its metadata is used to resolve joined tables.
        handlers: Optional registry of custom sort handlers.
    """

    def __init__(
        self,
        stmt: Select[Any],
        model: type[Any] | None = None,
        handlers: SortHandlerRegistry | None = None,
    ) -> None:
        self._stmt = stmt
        self._model = model
        self._handlers = handlers
        self._tables: dict[str, FromClause] = {}
        self._joined: set[str] = set()

        metadata = getattr(model, "metadata", None)
        if metadata is not None:
            for tbl in metadata.tables.values():
                self._tables.setdefault(tbl.name, tbl)

        froms = stmt.get_final_froms()
        for from_ in froms:
            for tbl in _tables_in(from_):
                self._tables.setdefault(tbl.name, tbl)
            self._joined |= _joined_names(from_)

        self._base_table = _base_table(model, froms)

    @property
    def statement(self) -> Select[Any]:
        return self._stmt

    @statement.setter
    def statement(self, stmt: Select[Any]) -> None:
        self._stmt = stmt

    def has_join(self, table: str) -> bool:
        return table in self._joined

    def add_left_join(self, table: str, left_column: str, right_column: str) -> None:
        target = self._table(table)
        # Rendered as "left = right"; a bare == may dispatch to the reflected side.
        onclause = self._column(left_column).operate(
            operators.eq, self._column(right_column)
        )
        self._stmt = self._stmt.outerjoin(target, onclause)
        self._joined.add(table)
        logger.debug("LEFT JOIN %s ON %s = %s", table, left_column, right_column)

    def add_order_by(self, column: str, order: SortOrder) -> None:
        col = self._column(column)
        term = col.desc() if order is SortOrder.DESCENDING else col.asc()
        self._stmt = self._stmt.order_by(term)

    def restrict_projection_to(self, pattern: str) -> None:
        table_name = pattern.removesuffix(".*")
        described = self._stmt.column_descriptions

        # Mapped entities of the base table are kept whole so the result
        # still hydrates model instances.
        entities = [
            d["expr"]
            for d in described
            if d.get("entity") is not None
            and d.get("expr") is d["entity"]
            and _entity_table_name(d["entity"]) == table_name
        ]
        if entities:
            if len(entities) < len(described):
                self._stmt = self._stmt.with_only_columns(*entities)
            return

        selected = list(self._stmt.selected_columns)
        kept = [c for c in selected if _table_name(c) == table_name]
        if kept and len(kept) < len(selected):
            self._stmt = self._stmt.with_only_columns(*kept)

    def get_sort_handler(self, name: str) -> SortHandler | None:
        if self._handlers is not None:
            handler = self._handlers.get(name)
            if handler is not None:
                return handler
        model_handlers = getattr(self._model, "__sort_handlers__", None)
        if model_handlers is None:
            return None
        return model_handlers.get(name)

    def _table(self, name: str) -> FromClause:
        tbl = self._tables.get(name)
        if tbl is None:
            tbl = self._tables[name] = table(name)
        return tbl

    def _column(self, ref: str) -> ColumnElement[Any]:
        table_name, _, name = ref.rpartition(".")
        tbl = self._table(table_name) if table_name else self._base_table
        if tbl is None:
            return column(name)
        if name in tbl.c:
            return tbl.c[name]
        # Unknown column: a detached table() of the same name renders as
        # "<table>.<column>" without touching the FROM list.
        return table(tbl.name, column(name)).c[name]


def apply_sorting(
    stmt: Select[Any],
    criteria: Iterable[Criterion],
    model: type[Any] | None = None,
    handlers: SortHandlerRegistry | None = None,
) -> Select[Any]:
    """Apply ``criteria`` to ``stmt`` and return the new statement."""
    adapter = SQLAlchemyQueryAdapter(stmt, model=model, handlers=handlers)
    apply_criteria(criteria, adapter)
    return adapter.statement


def _base_table(model: type[Any] | None, froms: list[FromClause]) -> Any:
    model_table = getattr(model, "__table__", None)
    if model_table is not None:
        return model_table
    if not froms:
        return None
    base: Any = froms[0]
    while isinstance(base, Join):
        base = base.left
    return base


def _tables_in(clause: Any) -> list[Any]:
    if isinstance(clause, Join):
        return _tables_in(clause.left) + _tables_in(clause.right)
    return [clause] if getattr(clause, "name", None) else []


def _joined_names(clause: Any) -> set[str]:
    if not isinstance(clause, Join):
        return set()
    names = _joined_names(clause.left)
    names.update(t.name for t in _tables_in(clause.right))
    return names


def _entity_table_name(entity: Any) -> str | None:
    return getattr(getattr(entity, "__table__", None), "name", None)


def _table_name(col: Any) -> str | None:
    tbl = getattr(col, "table", None)
    return getattr(tbl, "name", None)
