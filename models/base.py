"""
Base schema shared by all models.

Field names are snake_case in Python and camelCase on the wire, so stored
submissions keep the shape of the original browser records.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base for all schemas.
    
    Features:
        - Auto-trim whitespace from strings
        - Validate on attribute assignment
        - camelCase aliases, populate by either name
        - Numbers accepted for numeric string fields
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        validate_assignment=True,
        coerce_numbers_to_str=True,
    )

    def to_record(self) -> dict:
        """Serialize with camelCase keys and JSON-compatible values."""
        return self.model_dump(mode="json", by_alias=True)
