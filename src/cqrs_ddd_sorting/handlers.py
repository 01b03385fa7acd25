"""
Custom sort handlers.

An entity can take over sorting for a field by registering a handler.
Handlers are keyed by a name derived from the field
(``user_name`` -> ``SortUserName``) and receive the query adapter and the
sort order; they are fully responsible for the joins and ordering they add.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable

    from .order import SortOrder

HANDLER_PREFIX = "Sort"

_WORD_SEPARATORS = re.compile(r"[-_\s]+")


def studly_case(value: str) -> str:
    """``user_name`` -> ``UserName``; ``first-name`` -> ``FirstName``."""
    return "".join(
        word[:1].upper() + word[1:] for word in _WORD_SEPARATORS.split(value) if word
    )


def handler_name(field: str) -> str:
    """Name under which a custom handler for ``field`` is looked up."""
    return HANDLER_PREFIX + studly_case(field)


class SortHandler(Protocol):
    def __call__(self, adapter: Any, order: SortOrder) -> None:
        ...


class SortHandlerRegistry:
    """
    Registry of custom ``SortHandler`` callables keyed by derived name.

    Usage::

        handlers = SortHandlerRegistry()

        @handlers.handler("full_name")
        def sort_full_name(adapter, order):
            adapter.add_order_by("users.last_name", order)
            adapter.add_order_by("users.first_name", order)
    """

    def __init__(self) -> None:
        self._handlers: dict[str, SortHandler] = {}

    def register(self, field: str, handler: SortHandler) -> None:
        self._handlers[handler_name(field)] = handler

    def unregister(self, field: str) -> None:
        self._handlers.pop(handler_name(field), None)

    def handler(self, field: str) -> Callable[[SortHandler], SortHandler]:
        """Decorator form of :meth:`register`."""

        def decorator(fn: SortHandler) -> SortHandler:
            self.register(field, fn)
            return fn

        return decorator

    def get(self, name: str) -> SortHandler | None:
        return self._handlers.get(name)

    def has(self, name: str) -> bool:
        return name in self._handlers

    @property
    def names(self) -> set[str]:
        return set(self._handlers.keys())
