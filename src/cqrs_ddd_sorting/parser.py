"""SortParser — query params -> list of Criterion."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .config import SortConfig
from .criterion import TRIM_CHARACTERS, Criterion, apply_criteria
from .exceptions import TooManySortCriteriaError
from .whitelist import SortWhitelist

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .adapter import IQueryAdapter

logger = logging.getLogger(__name__)


class SortParser:
    """Parse the sort parameter of an API request into criteria.

    The parameter value is either a single directive (``"name,desc"``) or a
    list of directives, as produced by repeated query parameters
    (``?sort=name,desc&sort=created_at``).
    """

    def __init__(
        self,
        config: SortConfig | None = None,
        whitelist: SortWhitelist | None = None,
    ) -> None:
        self._config = config or SortConfig()
        if whitelist is None and self._config.sortable_fields is not None:
            whitelist = SortWhitelist(self._config.sortable_fields)
        self._whitelist = whitelist

    @property
    def config(self) -> SortConfig:
        return self._config

    def parse(self, query_params: Mapping[str, Any]) -> list[Criterion]:
        """
        Return the criteria for ``query_params``, in priority order.

        Raises:
            SortParseError: If a directive is malformed.
            FieldNotSortableError: If a field is not whitelisted.
            TooManySortCriteriaError: If ``max_criteria`` is exceeded.
        """
        directives = self._directives(query_params.get(self._config.sort_key))
        if not directives:
            directives = list(self._config.default_sort)

        limit = self._config.max_criteria
        if limit is not None and len(directives) > limit:
            raise TooManySortCriteriaError(len(directives), limit)

        criteria: list[Criterion] = []
        for raw in directives:
            criterion = Criterion.make(raw, self._config.default_order)
            if self._whitelist is not None:
                self._whitelist.allow(criterion.field)
            criteria.append(criterion)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Parsed sort criteria: %s", ", ".join(map(str, criteria)))
        return criteria

    def apply(
        self, query_params: Mapping[str, Any], adapter: IQueryAdapter
    ) -> list[Criterion]:
        """Parse ``query_params`` and apply the criteria to ``adapter``."""
        criteria = self.parse(query_params)
        apply_criteria(criteria, adapter)
        return criteria

    def _directives(self, raw: Any) -> list[str]:
        if not raw:
            return []
        if isinstance(raw, str):
            raw = [raw]
        elif not isinstance(raw, (list, tuple)):
            return []
        return [
            item
            for item in raw
            if isinstance(item, str) and item.strip(TRIM_CHARACTERS)
        ]
