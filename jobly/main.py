# main.py
import logging
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo-root .env is loaded for the running server process.
load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env")

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from jobly.config import build_sqlalchemy_db_url, settings
from jobly.database import Base, engine
from jobly.db.store import DatabaseQueryError
from jobly.errors import JoblyError
from jobly.models import ApplicationModel, CompanyModel, JobModel, User  # noqa: F401
from jobly.api.routes.health import router as health_router
from jobly.routers import auth, companies, jobs, users


logger = logging.getLogger(__name__)


def _error_body(status_code: int, message: str) -> dict:
    return {"error": {"message": message, "status": status_code}}


async def jobly_error_handler(request: Request, exc: JoblyError) -> JSONResponse:
    logger.warning("request.failed status=%s route=%s message=%s", exc.status_code, request.url.path, exc.message)
    return JSONResponse(_error_body(exc.status_code, exc.message), status_code=exc.status_code)


async def database_error_handler(request: Request, exc: DatabaseQueryError) -> JSONResponse:
    logger.exception("request.db_error route=%s", request.url.path, exc_info=exc)
    return JSONResponse(_error_body(500, "Internal Server Error"), status_code=500)


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(JoblyError, jobly_error_handler)
    application.add_exception_handler(DatabaseQueryError, database_error_handler)

    application.include_router(health_router)
    application.include_router(auth.router, prefix="/auth", tags=["auth"])
    application.include_router(users.router, prefix="/users", tags=["users"])
    application.include_router(companies.router)
    application.include_router(jobs.router)

    # Shared databases are migrated explicitly (scripts/create_tables.py);
    # local sqlite gets its tables on startup.
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    return application


app = create_app()
