from .create_candidate_use_case import CreateCandidateUseCase
from .create_company_use_case import CreateCompanyUseCase
from .get_candidate_for_user_use_case import GetCandidateForUserUseCase
from .get_company_for_user_use_case import GetCompanyForUserUseCase

__all__ = [
    "CreateCandidateUseCase",
    "CreateCompanyUseCase",
    "GetCandidateForUserUseCase",
    "GetCompanyForUserUseCase",
]
