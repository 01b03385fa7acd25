"""Criterion — one parsed sort directive and its translation to query operations."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import InvalidOrderError, SortParseError
from .handlers import handler_name
from .order import SortOrder
from .path import PATH_SEPARATOR, JoinPath

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .adapter import IQueryAdapter

logger = logging.getLogger(__name__)

# Characters stripped from both ends of a raw directive.
TRIM_CHARACTERS = " \t\n\r\0\x0b"

_DIRECTIVE = re.compile(r"([^,]+)(,(asc|desc))?")


class Criterion(BaseModel):
    """
    A single ``(field, order)`` sort directive.

    Build instances with :meth:`make`::

        Criterion.make("created_at,desc")
        Criterion.make("orders.customers.customer_id.name", SortOrder.DESCENDING)

    Dotted fields are join paths (see :class:`~cqrs_ddd_sorting.path.JoinPath`)
    and are validated on construction.
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(min_length=1)
    order: SortOrder

    @field_validator("order", mode="before")
    @classmethod
    def _validate_order(cls, value: Any) -> SortOrder:
        try:
            return SortOrder(value)
        except ValueError:
            raise InvalidOrderError(value) from None

    @field_validator("field")
    @classmethod
    def _validate_field(cls, value: str) -> str:
        if PATH_SEPARATOR in value:
            JoinPath.parse(value)
        return value

    @classmethod
    def make(
        cls,
        value: str,
        default_order: SortOrder | str = SortOrder.ASCENDING,
    ) -> Criterion:
        """
        Parse ``"field"`` or ``"field,asc|desc"`` into a criterion.

        Args:
            value: Raw directive, usually a query-string value.
            default_order: Order used when the directive has no order suffix.

        Raises:
            SortParseError: If the directive does not match the grammar or
                the field is a malformed join path.
            InvalidOrderError: If ``default_order`` is not a valid order.
        """
        match = _DIRECTIVE.fullmatch(value.strip(TRIM_CHARACTERS))
        if match is None:
            raise SortParseError(value)

        field, order = match.group(1), match.group(3) or default_order
        try:
            return cls(field=field, order=order)
        except SortParseError as exc:
            raise SortParseError(value, exc.reason) from exc

    @property
    def join_path(self) -> JoinPath | None:
        """Parsed join path for dotted fields, ``None`` otherwise."""
        if PATH_SEPARATOR not in self.field:
            return None
        return JoinPath.parse(self.field)

    def apply(self, adapter: IQueryAdapter) -> None:
        """
        Apply this criterion to a query adapter.

        A custom handler registered for the field takes precedence and
        receives ``(adapter, order)``.  Otherwise dotted fields add a left
        join (once per joined table) and order by the joined column, and
        plain fields order by the field itself.
        """
        name = handler_name(self.field)
        handler = adapter.get_sort_handler(name)
        if handler is not None:
            logger.debug("Sorting by %r delegated to handler %s", self.field, name)
            handler(adapter, self.order)
            return

        path = self.join_path
        if path is None:
            adapter.add_order_by(self.field, self.order)
            return

        if adapter.has_join(path.join_table):
            logger.debug("Reusing existing join to %r", path.join_table)
        else:
            left, right = path.join_columns
            adapter.add_left_join(path.join_table, left, right)
        adapter.add_order_by(path.sort_column_ref, self.order)
        adapter.restrict_projection_to(path.projection)

    def __str__(self) -> str:
        return f"{self.field},{self.order.value}"


def apply_criteria(criteria: Iterable[Criterion], adapter: IQueryAdapter) -> None:
    """Apply criteria in order; the first becomes the primary sort key."""
    for criterion in criteria:
        criterion.apply(adapter)
