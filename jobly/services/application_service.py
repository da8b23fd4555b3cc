# application_service.py
from __future__ import annotations

import logging
from typing import Any

from jobly.db.store import UNIQUE, DatabaseIntegrityError, query, query_one
from jobly.errors import DuplicateKeyError, NotFoundError


logger = logging.getLogger(__name__)


def apply_to_job(user_id: int, job_id: int, state: str = "applied") -> dict[str, Any]:
    job = query_one("SELECT id FROM jobs WHERE id = $1", [job_id])
    if not job:
        raise NotFoundError(f"No job: {job_id}")

    try:
        application = query_one(
            """
            INSERT INTO applications (user_id, job_id, state)
            VALUES ($1, $2, $3)
            RETURNING user_id AS "userId", job_id AS "jobId", state
            """.strip(),
            [user_id, job_id, state],
        )
    except DatabaseIntegrityError as exc:
        if exc.constraint != UNIQUE:
            raise
        raise DuplicateKeyError(f"Already applied to job: {job_id}") from exc

    logger.info("application.create user_id=%s job_id=%s state=%s", user_id, job_id, state)
    return application


def list_job_ids(user_id: int) -> list[int]:
    rows = query("SELECT job_id FROM applications WHERE user_id = $1 ORDER BY job_id", [user_id])
    return [row["job_id"] for row in rows]
