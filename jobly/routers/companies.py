# companies.py
from fastapi import APIRouter, Depends, Query, status

from jobly.routers.dependencies import require_admin
from jobly.schemas.company import (
    CompanyDeletedResponse,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyNew,
    CompanyResponse,
    CompanyUpdate,
)
from jobly.services.company_service import Company


router = APIRouter(prefix="/companies", tags=["companies"])


@router.post(
    "",
    response_model=CompanyResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_company(payload: CompanyNew) -> CompanyResponse:
    company = Company.create(payload.model_dump(by_alias=True))
    return CompanyResponse(company=company)


@router.get("", response_model=CompanyListResponse)
def list_companies(
    name: str | None = Query(default=None),
    min_employees: int | None = Query(default=None, alias="minEmployees", ge=0),
    max_employees: int | None = Query(default=None, alias="maxEmployees", ge=0),
) -> CompanyListResponse:
    """Companies, optionally filtered by name substring and employee count range."""
    filters = {"name": name, "minEmployees": min_employees, "maxEmployees": max_employees}
    return CompanyListResponse(companies=Company.find_filtered(filters))


@router.get("/{handle}", response_model=CompanyDetailResponse)
def get_company(handle: str) -> CompanyDetailResponse:
    return CompanyDetailResponse(company=Company.get(handle))


@router.patch("/{handle}", response_model=CompanyResponse, dependencies=[Depends(require_admin)])
def update_company(handle: str, payload: CompanyUpdate) -> CompanyResponse:
    company = Company.update(handle, payload.model_dump(by_alias=True, exclude_unset=True))
    return CompanyResponse(company=company)


@router.delete("/{handle}", response_model=CompanyDeletedResponse, dependencies=[Depends(require_admin)])
def delete_company(handle: str) -> CompanyDeletedResponse:
    Company.remove(handle)
    return CompanyDeletedResponse(deleted=handle)
