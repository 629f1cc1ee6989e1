"""
Course models.

Dependencies: pydantic
System role: Course data contracts
"""

from pydantic import Field

from feedback_views.models.common import ApiRecord


class Course(ApiRecord):
    """Course record as listed for the current actor."""

    course_id: str = Field(..., min_length=1, description="Course identifier")
    course_name: str = Field(default="", description="Human-readable course name")
    time_zone: str | None = None
