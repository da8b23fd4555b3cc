from __future__ import annotations

from pydantic import Field, field_validator

from jobly.schemas.common import CamelModel, StrictCamelModel, reject_null


class JobNew(StrictCamelModel):
    title: str = Field(min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: float | None = Field(default=None, ge=0, le=1)
    company_handle: str = Field(min_length=1, max_length=25)


class JobUpdate(StrictCamelModel):
    title: str | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: float | None = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def _title_not_null(cls, v: str | None) -> str | None:
        return reject_null(v)


class JobRead(CamelModel):
    id: int
    title: str
    salary: int | None = None
    equity: float | None = None
    company_handle: str


class JobResponse(CamelModel):
    job: JobRead


class JobListResponse(CamelModel):
    jobs: list[JobRead]


class JobDeletedResponse(CamelModel):
    deleted: int


class AppliedResponse(CamelModel):
    applied: int


class AppliedJobsResponse(CamelModel):
    jobs: list[int]
