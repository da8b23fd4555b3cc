# __init__.py
from jobly.models.application import APPLICATION_STATES, ApplicationModel
from jobly.models.company import CompanyModel
from jobly.models.job import JobModel
from jobly.models.user import User

__all__ = [
	"APPLICATION_STATES",
	"ApplicationModel",
	"CompanyModel",
	"JobModel",
	"User",
]
