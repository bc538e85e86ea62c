"""User roles."""

from enum import StrEnum

from vagaflow.domain.common.exceptions import ValidationError


class UserRole(StrEnum):
    """Role a user registers with. Fixed for the lifetime of the account."""

    CANDIDATE = "CANDIDATE"
    COMPANY = "COMPANY"

    @classmethod
    def parse(cls, raw: str | None) -> "UserRole":
        """
        Parse a role received from outside the domain.

        Raises:
            ValidationError: If the role is missing or unknown
        """
        if not raw:
            raise ValidationError("Role is required", field="role")
        try:
            return cls(raw.strip().upper())
        except ValueError:
            raise ValidationError(
                "Invalid role. Must be CANDIDATE or COMPANY", field="role", value=raw
            ) from None
