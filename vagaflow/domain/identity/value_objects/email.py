"""Email address value object."""

import re
from dataclasses import dataclass

from vagaflow.domain.common.exceptions import ValidationError
from vagaflow.domain.common.value_object import ValueObject

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class Email(ValueObject):
    """
    Normalized email address.

    The stored value is trimmed and lowercased, so two addresses that differ
    only in case or surrounding whitespace are equal.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationError("Email cannot be empty", field="email")
        normalized = self.value.strip().lower()
        if not EMAIL_PATTERN.match(normalized):
            raise ValidationError("Invalid email format", field="email", value=self.value)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
