from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from vagaflow.application.identity.use_cases.authenticate_user_use_case import (
    AuthenticateUserUseCase,
)
from vagaflow.application.identity.use_cases.create_user_use_case import CreateUserUseCase
from vagaflow.application.identity.use_cases.get_user_by_id_use_case import GetUserByIdUseCase
from vagaflow.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from vagaflow.application.profiles.use_cases.create_candidate_use_case import (
    CreateCandidateUseCase,
)
from vagaflow.application.profiles.use_cases.create_company_use_case import CreateCompanyUseCase
from vagaflow.application.profiles.use_cases.get_candidate_for_user_use_case import (
    GetCandidateForUserUseCase,
)
from vagaflow.application.profiles.use_cases.get_company_for_user_use_case import (
    GetCompanyForUserUseCase,
)
from vagaflow.application.recruitment.use_cases.accept_application_use_case import (
    AcceptApplicationUseCase,
)
from vagaflow.application.recruitment.use_cases.close_job_use_case import CloseJobUseCase
from vagaflow.application.recruitment.use_cases.create_application_use_case import (
    CreateApplicationUseCase,
)
from vagaflow.application.recruitment.use_cases.create_job_use_case import CreateJobUseCase
from vagaflow.application.recruitment.use_cases.get_job_by_id_use_case import GetJobByIdUseCase
from vagaflow.application.recruitment.use_cases.list_company_jobs_use_case import (
    ListCompanyJobsUseCase,
)
from vagaflow.application.recruitment.use_cases.list_job_applications_use_case import (
    ListJobApplicationsUseCase,
)
from vagaflow.application.recruitment.use_cases.list_jobs_use_case import ListJobsUseCase
from vagaflow.application.recruitment.use_cases.list_my_applications_use_case import (
    ListMyApplicationsUseCase,
)
from vagaflow.application.recruitment.use_cases.reject_application_use_case import (
    RejectApplicationUseCase,
)
from vagaflow.application.recruitment.use_cases.reopen_job_use_case import ReopenJobUseCase
from vagaflow.config import get_settings
from vagaflow.infrastructure.identity.repositories.user_repository import UserRepository
from vagaflow.infrastructure.identity.services.password_service import BcryptPasswordService
from vagaflow.infrastructure.identity.services.token_service import JwtTokenService
from vagaflow.infrastructure.profiles.repositories.candidate_repository import (
    CandidateRepository,
)
from vagaflow.infrastructure.profiles.repositories.company_repository import CompanyRepository
from vagaflow.infrastructure.recruitment.repositories.application_repository import (
    ApplicationRepository,
)
from vagaflow.infrastructure.recruitment.repositories.job_repository import JobRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    candidate_repository = providers.Factory(CandidateRepository, db=db)
    company_repository = providers.Factory(CompanyRepository, db=db)
    job_repository = providers.Factory(JobRepository, db=db)
    application_repository = providers.Factory(ApplicationRepository, db=db)

    # Identity services
    settings = providers.Singleton(get_settings)
    password_service = providers.Singleton(BcryptPasswordService)
    token_service = providers.Singleton(
        JwtTokenService,
        secret_key=settings.provided.SECRET_KEY,
        expire_minutes=settings.provided.ACCESS_TOKEN_EXPIRE_MINUTES,
    )

    # Identity use cases
    create_user_use_case = providers.Factory(
        CreateUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
    )
    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        create_user_use_case=create_user_use_case,
        token_service=token_service,
    )
    authenticate_user_use_case = providers.Factory(
        AuthenticateUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )
    get_user_by_id_use_case = providers.Factory(
        GetUserByIdUseCase,
        user_repository=user_repository,
    )

    # Profiles use cases
    create_candidate_use_case = providers.Factory(
        CreateCandidateUseCase,
        user_repository=user_repository,
        candidate_repository=candidate_repository,
    )
    create_company_use_case = providers.Factory(
        CreateCompanyUseCase,
        user_repository=user_repository,
        company_repository=company_repository,
    )
    get_candidate_for_user_use_case = providers.Factory(
        GetCandidateForUserUseCase,
        user_repository=user_repository,
        candidate_repository=candidate_repository,
    )
    get_company_for_user_use_case = providers.Factory(
        GetCompanyForUserUseCase,
        user_repository=user_repository,
        company_repository=company_repository,
    )

    # Recruitment use cases
    create_job_use_case = providers.Factory(
        CreateJobUseCase,
        company_repository=company_repository,
        job_repository=job_repository,
    )
    list_jobs_use_case = providers.Factory(ListJobsUseCase, job_repository=job_repository)
    list_company_jobs_use_case = providers.Factory(
        ListCompanyJobsUseCase, job_repository=job_repository
    )
    get_job_by_id_use_case = providers.Factory(GetJobByIdUseCase, job_repository=job_repository)
    close_job_use_case = providers.Factory(CloseJobUseCase, job_repository=job_repository)
    reopen_job_use_case = providers.Factory(ReopenJobUseCase, job_repository=job_repository)

    create_application_use_case = providers.Factory(
        CreateApplicationUseCase,
        candidate_repository=candidate_repository,
        job_repository=job_repository,
        application_repository=application_repository,
    )
    accept_application_use_case = providers.Factory(
        AcceptApplicationUseCase,
        application_repository=application_repository,
        job_repository=job_repository,
    )
    reject_application_use_case = providers.Factory(
        RejectApplicationUseCase,
        application_repository=application_repository,
        job_repository=job_repository,
    )
    list_job_applications_use_case = providers.Factory(
        ListJobApplicationsUseCase,
        job_repository=job_repository,
        application_repository=application_repository,
    )
    list_my_applications_use_case = providers.Factory(
        ListMyApplicationsUseCase,
        application_repository=application_repository,
    )


# Initialize container
container = Container()
