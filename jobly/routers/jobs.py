# jobs.py
from fastapi import APIRouter, Depends, Query, status

from jobly.routers.dependencies import require_admin
from jobly.schemas.job import JobDeletedResponse, JobListResponse, JobNew, JobResponse, JobUpdate
from jobly.services.job_service import Job


router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_job(payload: JobNew) -> JobResponse:
    return JobResponse(job=Job.create(payload.model_dump(by_alias=True)))


@router.get("", response_model=JobListResponse)
def list_jobs(
    title: str | None = Query(default=None),
    min_salary: int | None = Query(default=None, alias="minSalary", ge=0),
    has_equity: bool | None = Query(default=None, alias="hasEquity"),
) -> JobListResponse:
    """Jobs, optionally filtered by title substring, minimum salary and equity."""
    filters = {"title": title, "minSalary": min_salary, "hasEquity": has_equity}
    return JobListResponse(jobs=Job.find_filtered(filters))


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int) -> JobResponse:
    return JobResponse(job=Job.get(job_id))


@router.patch("/{job_id}", response_model=JobResponse, dependencies=[Depends(require_admin)])
def update_job(job_id: int, payload: JobUpdate) -> JobResponse:
    job = Job.update(job_id, payload.model_dump(by_alias=True, exclude_unset=True))
    return JobResponse(job=job)


@router.delete("/{job_id}", response_model=JobDeletedResponse, dependencies=[Depends(require_admin)])
def delete_job(job_id: int) -> JobDeletedResponse:
    Job.remove(job_id)
    return JobDeletedResponse(deleted=job_id)
