# company_service.py
from __future__ import annotations

import logging
from typing import Any, Mapping

from jobly.db.store import UNIQUE, DatabaseIntegrityError, query, query_one
from jobly.errors import DuplicateKeyError, NotFoundError
from jobly.services.job_service import normalize_job
from jobly.utils.sql import sql_for_company_filters, sql_for_partial_update


logger = logging.getLogger(__name__)

_COMPANY_COLUMNS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'

# Attributes whose column name differs from the public name.
_JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


class Company:
    """Data access for companies, keyed by their handle."""

    @staticmethod
    def create(data: Mapping[str, Any]) -> dict[str, Any]:
        """Insert a company and return it.

        data should be {handle, name, description, numEmployees, logoUrl}.

        Raises DuplicateKeyError if the handle is taken. The check and the
        insert are separate statements; a concurrent insert of the same handle
        that slips between them fails on the primary key and is reported the
        same way, as is a duplicate name. Other constraint violations propagate.
        """
        handle = data["handle"]
        duplicate = query_one("SELECT handle FROM companies WHERE handle = $1", [handle])
        if duplicate:
            raise DuplicateKeyError(f"Duplicate company: {handle}")

        try:
            company = query_one(
                f"""
                INSERT INTO companies (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {_COMPANY_COLUMNS}
                """.strip(),
                [
                    handle,
                    data["name"],
                    data["description"],
                    data.get("numEmployees"),
                    data.get("logoUrl"),
                ],
            )
        except DatabaseIntegrityError as exc:
            if exc.constraint != UNIQUE:
                raise
            logger.warning("company.create duplicate handle=%s", handle)
            raise DuplicateKeyError(f"Duplicate company: {handle}") from exc

        logger.info("company.create handle=%s", handle)
        return company

    @staticmethod
    def find_all() -> list[dict[str, Any]]:
        return Company.find_filtered()

    @staticmethod
    def find_filtered(filters: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        """Companies matching `filters`, ordered by name.

        filters may hold name (substring, case-insensitive), minEmployees and
        maxEmployees. Raises InvalidRangeError if minEmployees > maxEmployees.
        """
        where = sql_for_company_filters(filters)
        where_sql = f"WHERE {where.clause}" if where else ""
        return query(
            f"""
            SELECT {_COMPANY_COLUMNS}
            FROM companies
            {where_sql}
            ORDER BY name
            """.strip(),
            where.values,
        )

    @staticmethod
    def get(handle: str) -> dict[str, Any]:
        """Company with its jobs as {id, title, salary, equity}, ordered by id.

        Raises NotFoundError if not found.
        """
        company = query_one(
            f"""
            SELECT {_COMPANY_COLUMNS}
            FROM companies
            WHERE handle = $1
            """.strip(),
            [handle],
        )
        if not company:
            raise NotFoundError(f"No company: {handle}")

        jobs = query(
            """
            SELECT id, title, salary, equity
            FROM jobs
            WHERE company_handle = $1
            ORDER BY id
            """.strip(),
            [handle],
        )
        company["jobs"] = [normalize_job(job) for job in jobs]
        return company

    @staticmethod
    def update(handle: str, data: Mapping[str, Any]) -> dict[str, Any]:
        """Partial update; only the fields present in `data` change.

        data can include {name, description, numEmployees, logoUrl}.

        Raises EmptyPayloadError if `data` is empty and NotFoundError if the
        company does not exist.
        """
        set_cols = sql_for_partial_update(data, _JS_TO_SQL)
        try:
            company = query_one(
                f"""
                UPDATE companies
                SET {set_cols.clause}
                WHERE handle = ${set_cols.next_index}
                RETURNING {_COMPANY_COLUMNS}
                """.strip(),
                [*set_cols.values, handle],
            )
        except DatabaseIntegrityError as exc:
            if exc.constraint != UNIQUE:
                raise
            raise DuplicateKeyError(f"Duplicate company name: {data.get('name')}") from exc

        if not company:
            raise NotFoundError(f"No company: {handle}")
        logger.info("company.update handle=%s fields=%s", handle, ",".join(data))
        return company

    @staticmethod
    def remove(handle: str) -> None:
        """Delete a company (and, by cascade, its jobs).

        Raises NotFoundError if not found.
        """
        deleted = query_one("DELETE FROM companies WHERE handle = $1 RETURNING handle", [handle])
        if not deleted:
            raise NotFoundError(f"No company: {handle}")
        logger.info("company.remove handle=%s", handle)
