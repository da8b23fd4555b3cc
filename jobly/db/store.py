from __future__ import annotations

import logging
import re
from typing import Any, Iterable

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from jobly.database import engine


logger = logging.getLogger(__name__)


class DatabaseQueryError(RuntimeError):
    pass


class DatabaseIntegrityError(DatabaseQueryError):
    """The store rejected a write on a constraint.

    `constraint` is one of UNIQUE, FOREIGN_KEY, NOT_NULL, CHECK, or None when
    the driver error could not be classified.
    """

    def __init__(self, message: str, constraint: str | None = None) -> None:
        super().__init__(message)
        self.constraint = constraint


UNIQUE = "unique"
FOREIGN_KEY = "foreign_key"
NOT_NULL = "not_null"
CHECK = "check"

# PostgreSQL SQLSTATE codes (class 23, integrity constraint violation).
_SQLSTATE_CONSTRAINTS = {
    "23505": UNIQUE,
    "23503": FOREIGN_KEY,
    "23502": NOT_NULL,
    "23514": CHECK,
}

# sqlite reports the constraint only in the message text.
_SQLITE_CONSTRAINTS = (
    ("UNIQUE constraint failed", UNIQUE),
    ("FOREIGN KEY constraint failed", FOREIGN_KEY),
    ("NOT NULL constraint failed", NOT_NULL),
    ("CHECK constraint failed", CHECK),
)


def classify_integrity_error(orig: BaseException | None) -> str | None:
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate:
        return _SQLSTATE_CONSTRAINTS.get(sqlstate)

    message = str(orig or "")
    for marker, constraint in _SQLITE_CONSTRAINTS:
        if marker in message:
            return constraint
    return None


# `$1`-style positional placeholders, as written by jobly.utils.sql and the services.
_POSITIONAL_PARAM_RE = re.compile(r"\$(\d+)")


def compile_positional_params(sql: str, params: Iterable[Any] | None) -> tuple[str, dict[str, Any]]:
    """Rewrite `$N` placeholders into SQLAlchemy bind parameters.

    `$1` becomes `:p1` and takes `params[0]`. A placeholder may appear more than
    once; every placeholder must have a value and every value must be used.

    Example: `... WHERE handle = $1` with `["acme"]`
      -> (`... WHERE handle = :p1`, {"p1": "acme"})
    """

    values = list(params or [])
    used: set[int] = set()

    def repl(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index < 1 or index > len(values):
            raise DatabaseQueryError(f"Missing SQL parameter: ${index}")
        used.add(index)
        return f":p{index}"

    compiled_sql = _POSITIONAL_PARAM_RE.sub(repl, sql)

    if len(used) != len(values):
        raise DatabaseQueryError(
            f"SQL uses {len(used)} placeholder(s) but {len(values)} parameter(s) were given"
        )
    return compiled_sql, {f"p{i}": value for i, value in enumerate(values, start=1)}


def query(sql: str, params: Iterable[Any] | None = None) -> list[dict[str, Any]]:
    """Run one statement and return its rows as dicts.

    - Supports `$1, $2, ...` placeholders bound from `params` in order.
    - Statements without a result set (or without RETURNING) return `[]`.
    - Runs in its own transaction, committed on success.
    """

    compiled_sql, bind = compile_positional_params(sql, params)

    try:
        with engine.begin() as conn:
            result = conn.execute(text(compiled_sql), bind)
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings().all()]
    except IntegrityError as exc:
        constraint = classify_integrity_error(exc.orig)
        logger.info("store.integrity_error constraint=%s %s", constraint, exc.orig)
        raise DatabaseIntegrityError(str(exc.orig), constraint) from exc
    except SQLAlchemyError as exc:
        logger.error("store.query_failed %s", type(exc).__name__)
        raise DatabaseQueryError("Database query failed") from exc


def query_one(sql: str, params: Iterable[Any] | None = None) -> dict[str, Any] | None:
    rows = query(sql, params)
    return rows[0] if rows else None
