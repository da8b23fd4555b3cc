"""SQL fragment builders shared by the company and job access layers.

Both builders emit positional ``$1, $2, ...`` placeholders and return the
bound values in placeholder order. They never touch the database and keep no
state between calls.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from jobly.errors import EmptyPayloadError, InvalidRangeError


# Column names are interpolated into double quotes, so they must be plain words.
_COLUMN_RE = re.compile(r"\w+")


@dataclass(frozen=True)
class SqlFragment:
    """Joined clause text plus the values its placeholders refer to.

    ``clauses[i]`` holds placeholder ``$(start + i)`` and ``values[i]`` is the
    value bound to it. ``clause`` is empty when nothing was emitted.
    """

    clause: str = ""
    clauses: list[str] = field(default_factory=list)
    values: list[Any] = field(default_factory=list)
    start: int = 1

    @property
    def next_index(self) -> int:
        """First placeholder index not used by this fragment."""
        return self.start + len(self.values)

    def __bool__(self) -> bool:
        return bool(self.clauses)


class _ClauseCollector:
    def __init__(self, start: int = 1) -> None:
        self.start = start
        self.clauses: list[str] = []
        self.values: list[Any] = []

    def bind(self, value: Any) -> str:
        placeholder = f"${self.start + len(self.values)}"
        self.values.append(value)
        return placeholder

    def add(self, clause: str) -> None:
        self.clauses.append(clause)

    def build(self, separator: str) -> SqlFragment:
        return SqlFragment(
            clause=separator.join(self.clauses),
            clauses=list(self.clauses),
            values=list(self.values),
            start=self.start,
        )


def sql_for_partial_update(
    data: Mapping[str, Any],
    js_to_sql: Mapping[str, str] | None = None,
    *,
    start: int = 1,
) -> SqlFragment:
    """Build the ``SET`` part of a partial update.

    ``data`` maps attribute names to new values; only the keys present are
    written. ``js_to_sql`` maps attribute names to column names, and an
    attribute missing from it is used as the column name unchanged. Values
    are always bound; column names are written into the SQL, so they must
    consist of word characters only.

        >>> frag = sql_for_partial_update({"numEmployees": 5, "name": "x"}, {"numEmployees": "num_employees"})
        >>> frag.clause
        '"num_employees"=$1, "name"=$2'
        >>> frag.values, frag.next_index
        ([5, 'x'], 3)

    Raises EmptyPayloadError when ``data`` is empty and ValueError for a
    column name that is not a plain word.
    """
    if not data:
        raise EmptyPayloadError("No data")

    columns = js_to_sql or {}
    collector = _ClauseCollector(start)
    for key, value in data.items():
        column = columns.get(key, key)
        if not isinstance(column, str) or not _COLUMN_RE.fullmatch(column):
            raise ValueError(f"Invalid column name: {column!r}")
        collector.add(f'"{column}"={collector.bind(value)}')
    return collector.build(", ")


def _contains(value: str) -> str:
    return f"%{value}%"


def sql_for_company_filters(filters: Mapping[str, Any] | None = None) -> SqlFragment:
    """WHERE conditions for company search.

    Recognised keys, emitted in this order: ``name`` (case-insensitive
    substring), ``minEmployees`` and ``maxEmployees`` (inclusive bounds).
    Missing or None keys emit nothing.

    Raises InvalidRangeError when both bounds are given and min > max.
    """
    filters = filters or {}
    name = filters.get("name")
    min_employees = filters.get("minEmployees")
    max_employees = filters.get("maxEmployees")

    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise InvalidRangeError("minEmployees cannot be greater than maxEmployees")

    collector = _ClauseCollector()
    if name:
        collector.add(f"LOWER(name) LIKE LOWER({collector.bind(_contains(name))})")
    if min_employees is not None:
        collector.add(f"num_employees >= {collector.bind(min_employees)}")
    if max_employees is not None:
        collector.add(f"num_employees <= {collector.bind(max_employees)}")
    return collector.build(" AND ")


def sql_for_job_filters(filters: Mapping[str, Any] | None = None) -> SqlFragment:
    """WHERE conditions for job search.

    Recognised keys, emitted in this order: ``title`` (case-insensitive
    substring), ``minSalary`` (inclusive) and ``hasEquity``. Only a true
    ``hasEquity`` emits a condition, requiring equity above zero.
    """
    filters = filters or {}
    title = filters.get("title")
    min_salary = filters.get("minSalary")

    collector = _ClauseCollector()
    if title:
        collector.add(f"LOWER(title) LIKE LOWER({collector.bind(_contains(title))})")
    if min_salary is not None:
        collector.add(f"salary >= {collector.bind(min_salary)}")
    if filters.get("hasEquity") is True:
        collector.add(f"equity > {collector.bind(0)}")
    return collector.build(" AND ")
