"""
Validation result schema.

Every validator returns one of these; failures are data, never exceptions.
"""

from pydantic import ConfigDict, Field

from models.base import BaseSchema


class ValidationResult(BaseSchema):
    """
    Outcome of a validation.

    `errors` block the action being validated. `warnings` are advisory and
    never change `is_valid`.
    """
    model_config = ConfigDict(frozen=True)

    is_valid: bool = Field(..., description="True when errors is empty")
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, warnings: list[str] | None = None) -> "ValidationResult":
        return cls(is_valid=True, errors=[], warnings=list(warnings or []))

    @classmethod
    def from_errors(
        cls,
        errors: list[str],
        warnings: list[str] | None = None
    ) -> "ValidationResult":
        """Build a result whose validity follows from the error list."""
        return cls(
            is_valid=len(errors) == 0,
            errors=list(errors),
            warnings=list(warnings or []),
        )

    @classmethod
    def combine(cls, *results: "ValidationResult") -> "ValidationResult":
        """Concatenate errors and warnings in argument order."""
        errors: list[str] = []
        warnings: list[str] = []
        for result in results:
            errors.extend(result.errors)
            warnings.extend(result.warnings)
        return cls.from_errors(errors, warnings)
