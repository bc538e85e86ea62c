"""Profile domain exceptions."""

from vagaflow.domain.common.exceptions import ConflictError, NotFoundError


class CandidateNotFoundError(NotFoundError):
    """Raised when a candidate profile cannot be found."""

    def __init__(self, candidate_id: object = None) -> None:
        super().__init__("Candidate", candidate_id)


class CompanyNotFoundError(NotFoundError):
    """Raised when a company profile cannot be found."""

    def __init__(self, company_id: object = None) -> None:
        super().__init__("Company", company_id)


class CandidateProfileMissingError(NotFoundError):
    """Raised when a CANDIDATE user has not created a profile yet."""

    def __init__(self) -> None:
        super().__init__(
            "Candidate profile",
            message="Candidate profile not found. Create a candidate profile first.",
        )


class CompanyProfileMissingError(NotFoundError):
    """Raised when a COMPANY user has not created a profile yet."""

    def __init__(self) -> None:
        super().__init__(
            "Company profile",
            message="Company profile not found. Create a company profile first.",
        )


class CandidateProfileAlreadyExistsError(ConflictError):
    """Raised when a user already owns a candidate profile."""

    def __init__(self, user_id: object) -> None:
        super().__init__("User already has a candidate profile", {"user_id": str(user_id)})


class CompanyProfileAlreadyExistsError(ConflictError):
    """Raised when a user already owns a company profile."""

    def __init__(self, user_id: object) -> None:
        super().__init__("User already has a company profile", {"user_id": str(user_id)})
