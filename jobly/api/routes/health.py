from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from sqlalchemy.engine import make_url

from jobly.config import build_sqlalchemy_db_url, settings
from jobly.db.store import DatabaseQueryError, query_one


router = APIRouter(prefix="/health", tags=["health"])


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime


class DBHealthStatus(BaseModel):
    db: str
    db_url: str
    timestamp: datetime


@router.get("/", response_model=HealthStatus, summary="API heartbeat")
def health_check() -> HealthStatus:
    return HealthStatus(status="ok", timestamp=datetime.now(timezone.utc))


@router.get("/db", response_model=DBHealthStatus, summary="DB connectivity check")
def db_health_check() -> DBHealthStatus:
    db_status = "ok"
    try:
        query_one("SELECT 1 AS ok")
    except DatabaseQueryError:
        db_status = "error"

    db_url = build_sqlalchemy_db_url(settings)
    try:
        masked = make_url(db_url).render_as_string(hide_password=True)
    except Exception:
        masked = db_url

    return DBHealthStatus(db=db_status, db_url=masked, timestamp=datetime.now(timezone.utc))
