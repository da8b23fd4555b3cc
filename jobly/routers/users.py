# users.py
from fastapi import APIRouter, Depends, status
from jobly.config import is_admin_email
from jobly.models.user import User
from jobly.routers.dependencies import get_current_user
from jobly.schemas.job import AppliedJobsResponse, AppliedResponse
from jobly.schemas.user import UserRead
from jobly.services.application_service import apply_to_job, list_job_ids


router = APIRouter()


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)) -> UserRead:
    user_out = UserRead.model_validate(current_user)
    return user_out.model_copy(update={"is_admin": is_admin_email(current_user.email)})


@router.get("/me/jobs", response_model=AppliedJobsResponse)
def read_my_applications(current_user: User = Depends(get_current_user)) -> AppliedJobsResponse:
    return AppliedJobsResponse(jobs=list_job_ids(current_user.id))


@router.post("/me/jobs/{job_id}", response_model=AppliedResponse, status_code=status.HTTP_201_CREATED)
def apply_for_job(job_id: int, current_user: User = Depends(get_current_user)) -> AppliedResponse:
    application = apply_to_job(current_user.id, job_id)
    return AppliedResponse(applied=application["jobId"])
