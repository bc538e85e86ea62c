from .accept_application_use_case import AcceptApplicationUseCase
from .close_job_use_case import CloseJobUseCase
from .create_application_use_case import CreateApplicationUseCase
from .create_job_use_case import CreateJobUseCase
from .get_job_by_id_use_case import GetJobByIdUseCase
from .list_company_jobs_use_case import ListCompanyJobsUseCase
from .list_job_applications_use_case import ListJobApplicationsUseCase
from .list_jobs_use_case import ListJobsUseCase
from .list_my_applications_use_case import ListMyApplicationsUseCase
from .reject_application_use_case import RejectApplicationUseCase
from .reopen_job_use_case import ReopenJobUseCase

__all__ = [
    "AcceptApplicationUseCase",
    "CloseJobUseCase",
    "CreateApplicationUseCase",
    "CreateJobUseCase",
    "GetJobByIdUseCase",
    "ListCompanyJobsUseCase",
    "ListJobApplicationsUseCase",
    "ListJobsUseCase",
    "ListMyApplicationsUseCase",
    "RejectApplicationUseCase",
    "ReopenJobUseCase",
]
