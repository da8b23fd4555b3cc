from __future__ import annotations

import os
from typing import Any

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # The engine is created at import time, so point it at sqlite before any jobly import.
    os.environ["DB_URL"] = "sqlite:///./test.db"
    os.environ["ADMIN_EMAILS"] = '["admin@example.com"]'

    # Ensure local .env cannot leak into tests.
    os.environ["ENVIRONMENT"] = "test"


@pytest.fixture()
def db() -> None:
    from jobly.database import Base, engine
    import jobly.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture()
def client(db: None) -> Any:
    from jobly.main import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c


def _register_and_login(client: TestClient, email: str, password: str = "SecretPass123") -> dict[str, str]:
    r = client.post("/auth/register", json={"email": email, "password": password})
    assert r.status_code == 201
    r = client.post("/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


@pytest.fixture()
def admin_headers(client: TestClient) -> dict[str, str]:
    return _register_and_login(client, "admin@example.com")


@pytest.fixture()
def user_headers(client: TestClient) -> dict[str, str]:
    return _register_and_login(client, "user@example.com")


@pytest.fixture()
def companies(db: None) -> list[dict[str, Any]]:
    from jobly.services.company_service import Company

    return [
        Company.create(
            {"handle": "c1", "name": "C1", "description": "Desc1", "numEmployees": 1, "logoUrl": "http://c1.img"}
        ),
        Company.create(
            {"handle": "c2", "name": "C2", "description": "Desc2", "numEmployees": 2, "logoUrl": "http://c2.img"}
        ),
        Company.create(
            {"handle": "c3", "name": "C3", "description": "Desc3", "numEmployees": 3, "logoUrl": "http://c3.img"}
        ),
    ]


@pytest.fixture()
def jobs(companies: list[dict[str, Any]]) -> list[dict[str, Any]]:
    from jobly.services.job_service import Job

    return [
        Job.create({"title": "Job1", "salary": 100, "equity": 0.1, "companyHandle": "c1"}),
        Job.create({"title": "Job2", "salary": 200, "equity": 0.2, "companyHandle": "c1"}),
        Job.create({"title": "Job3", "salary": 300, "equity": 0, "companyHandle": "c1"}),
        Job.create({"title": "Job4", "salary": None, "equity": None, "companyHandle": "c2"}),
    ]
