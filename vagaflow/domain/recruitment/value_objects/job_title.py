"""Job title value object."""

from dataclasses import dataclass

from vagaflow.domain.common.exceptions import ValidationError
from vagaflow.domain.common.value_object import ValueObject

MIN_TITLE_LENGTH = 3
MAX_TITLE_LENGTH = 100


@dataclass(frozen=True)
class JobTitle(ValueObject):
    """Trimmed job title of MIN_TITLE_LENGTH to MAX_TITLE_LENGTH characters."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationError("Job title cannot be empty", field="title")
        title = self.value.strip()
        if len(title) < MIN_TITLE_LENGTH:
            raise ValidationError(
                f"Job title must be at least {MIN_TITLE_LENGTH} characters",
                field="title",
                value=title,
            )
        if len(title) > MAX_TITLE_LENGTH:
            raise ValidationError(
                f"Job title cannot exceed {MAX_TITLE_LENGTH} characters", field="title"
            )
        object.__setattr__(self, "value", title)

    def __str__(self) -> str:
        return self.value
