"""
Common record base and shared helpers.

Base model for records fetched from the platform API.

Dependencies: pydantic
System role: Shared configuration for API record schemas
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiRecord(BaseModel):
    """
    Immutable record as delivered by the platform API.

    Accepts the server's camelCase field names as well as snake_case names.
    Records are replaced wholesale on refresh, never edited in place.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )
