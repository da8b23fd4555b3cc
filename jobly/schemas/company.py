from __future__ import annotations

from pydantic import Field, field_validator

from jobly.schemas.common import CamelModel, StrictCamelModel, reject_null


class CompanyNew(StrictCamelModel):
    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: str
    num_employees: int | None = Field(default=None, ge=0)
    logo_url: str | None = None


class CompanyUpdate(StrictCamelModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    num_employees: int | None = Field(default=None, ge=0)
    logo_url: str | None = None

    @field_validator("name", "description")
    @classmethod
    def _required_columns_not_null(cls, v: str | None) -> str | None:
        return reject_null(v)


class CompanyRead(CamelModel):
    handle: str
    name: str
    description: str
    num_employees: int | None = None
    logo_url: str | None = None


class CompanyJob(CamelModel):
    id: int
    title: str
    salary: int | None = None
    equity: float | None = None


class CompanyDetail(CompanyRead):
    jobs: list[CompanyJob] = Field(default_factory=list)


class CompanyResponse(CamelModel):
    company: CompanyRead


class CompanyDetailResponse(CamelModel):
    company: CompanyDetail


class CompanyListResponse(CamelModel):
    companies: list[CompanyRead]


class CompanyDeletedResponse(CamelModel):
    deleted: str
