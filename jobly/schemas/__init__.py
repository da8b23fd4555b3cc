from jobly.schemas.company import (
	CompanyDeletedResponse,
	CompanyDetail,
	CompanyDetailResponse,
	CompanyListResponse,
	CompanyNew,
	CompanyRead,
	CompanyResponse,
	CompanyUpdate,
)
from jobly.schemas.job import (
	AppliedJobsResponse,
	AppliedResponse,
	JobDeletedResponse,
	JobListResponse,
	JobNew,
	JobRead,
	JobResponse,
	JobUpdate,
)
from jobly.schemas.user import Token, TokenData, UserCreate, UserLogin, UserRead

__all__ = [
	"CompanyDeletedResponse",
	"CompanyDetail",
	"CompanyDetailResponse",
	"CompanyListResponse",
	"CompanyNew",
	"CompanyRead",
	"CompanyResponse",
	"CompanyUpdate",
	"AppliedJobsResponse",
	"AppliedResponse",
	"JobDeletedResponse",
	"JobListResponse",
	"JobNew",
	"JobRead",
	"JobResponse",
	"JobUpdate",
	"Token",
	"TokenData",
	"UserCreate",
	"UserLogin",
	"UserRead",
]
