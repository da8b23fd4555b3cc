# job_service.py
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Mapping

from jobly.db.store import FOREIGN_KEY, DatabaseIntegrityError, query, query_one
from jobly.errors import NotFoundError
from jobly.utils.sql import sql_for_job_filters, sql_for_partial_update


logger = logging.getLogger(__name__)

_JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

_JS_TO_SQL = {
    "title": "title",
    "salary": "salary",
    "equity": "equity",
}


def normalize_job(row: dict[str, Any]) -> dict[str, Any]:
    # NUMERIC comes back as Decimal from PostgreSQL and as int/float from sqlite.
    equity = row.get("equity")
    if isinstance(equity, (Decimal, int)) and not isinstance(equity, bool):
        row["equity"] = float(equity)
    return row


class Job:
    """Data access for jobs, keyed by their numeric id."""

    @staticmethod
    def create(data: Mapping[str, Any]) -> dict[str, Any]:
        """Insert a job and return it.

        data should be {title, salary, equity, companyHandle}.

        Raises NotFoundError if companyHandle names no company. Any other
        constraint violation (a negative salary, say) propagates unchanged.
        """
        company_handle = data["companyHandle"]
        try:
            job = query_one(
                f"""
                INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {_JOB_COLUMNS}
                """.strip(),
                [data["title"], data.get("salary"), data.get("equity"), company_handle],
            )
        except DatabaseIntegrityError as exc:
            if exc.constraint != FOREIGN_KEY:
                raise
            raise NotFoundError(f"No company: {company_handle}") from exc

        logger.info("job.create id=%s company=%s", job["id"], company_handle)
        return normalize_job(job)

    @staticmethod
    def find_all() -> list[dict[str, Any]]:
        return Job.find_filtered()

    @staticmethod
    def find_filtered(filters: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        """Jobs matching `filters` (title, minSalary, hasEquity), ordered by title."""
        where = sql_for_job_filters(filters)
        where_sql = f"WHERE {where.clause}" if where else ""
        rows = query(
            f"""
            SELECT {_JOB_COLUMNS}
            FROM jobs
            {where_sql}
            ORDER BY title, id
            """.strip(),
            where.values,
        )
        return [normalize_job(row) for row in rows]

    @staticmethod
    def get(job_id: int) -> dict[str, Any]:
        job = query_one(f"SELECT {_JOB_COLUMNS} FROM jobs WHERE id = $1", [job_id])
        if not job:
            raise NotFoundError(f"No job: {job_id}")
        return normalize_job(job)

    @staticmethod
    def update(job_id: int, data: Mapping[str, Any]) -> dict[str, Any]:
        """Partial update of {title, salary, equity}.

        Raises EmptyPayloadError if `data` is empty and NotFoundError if the
        job does not exist.
        """
        set_cols = sql_for_partial_update(data, _JS_TO_SQL)
        job = query_one(
            f"""
            UPDATE jobs
            SET {set_cols.clause}
            WHERE id = ${set_cols.next_index}
            RETURNING {_JOB_COLUMNS}
            """.strip(),
            [*set_cols.values, job_id],
        )
        if not job:
            raise NotFoundError(f"No job: {job_id}")
        logger.info("job.update id=%s fields=%s", job_id, ",".join(data))
        return normalize_job(job)

    @staticmethod
    def remove(job_id: int) -> None:
        deleted = query_one("DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id])
        if not deleted:
            raise NotFoundError(f"No job: {job_id}")
        logger.info("job.remove id=%s", job_id)
