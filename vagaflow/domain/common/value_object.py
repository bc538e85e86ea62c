"""
Base class for Value Objects.

A value object is an immutable value with no identity of its own: two
instances holding the same fields are interchangeable.

Subclasses are declared with @dataclass(frozen=True), which generates
field-wise __eq__ and __hash__. Validation happens in __post_init__, and a
value that needs normalizing (trimming, lowercasing) is rewritten there with
object.__setattr__ so the stored value is always the canonical one.

Example:
    @dataclass(frozen=True)
    class JobTitle(ValueObject):
        value: str

        def __post_init__(self) -> None:
            if not self.value.strip():
                raise ValidationError("Job title cannot be empty")
            object.__setattr__(self, "value", self.value.strip())
"""

from dataclasses import fields


class ValueObject:
    """Marker base for frozen, self-validating dataclasses."""

    def to_primitive(self) -> object:
        """
        Convert to a plain Python value for serialization.

        Single-field value objects collapse to that field; others become a dict.
        """
        values = {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]
        if len(values) == 1:
            return next(iter(values.values()))
        return values
