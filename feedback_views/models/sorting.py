"""
Sort state models.

Dependencies: pydantic
System role: Sort key and direction value objects
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SortBy(str, Enum):
    """Sortable student table columns."""

    NONE = "NONE"
    SECTION_NAME = "SECTION_NAME"
    STUDENT_NAME = "STUDENT_NAME"
    TEAM_NAME = "TEAM_NAME"
    EMAIL = "EMAIL"
    JOIN_STATUS = "JOIN_STATUS"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "ASC"
    DESC = "DESC"

    def flipped(self) -> "SortOrder":
        """Return the opposite direction."""
        return SortOrder.DESC if self is SortOrder.ASC else SortOrder.ASC


class SortSpec(BaseModel):
    """Active sort key and direction of one list instance."""

    model_config = ConfigDict(frozen=True)

    key: SortBy = SortBy.NONE
    order: SortOrder = SortOrder.ASC
