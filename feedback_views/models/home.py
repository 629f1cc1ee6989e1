"""
Student home page view models.

Per-render views of a student's courses and their feedback sessions.

Dependencies: pydantic
System role: Student home render contracts
"""

from pydantic import BaseModel, ConfigDict

from feedback_views.models.course import Course
from feedback_views.models.session import Session, SessionDisplayState


class StudentSessionView(BaseModel):
    """One session as shown on the student home page."""

    model_config = ConfigDict(frozen=True)

    session: Session
    state: SessionDisplayState
    submission_tooltip: str
    response_tooltip: str


class StudentCourseView(BaseModel):
    """One course with its sessions in display order."""

    model_config = ConfigDict(frozen=True)

    course: Course
    sessions: list[StudentSessionView]
