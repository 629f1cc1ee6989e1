"""Record schemas and value objects."""

from .course import Course
from .home import StudentCourseView, StudentSessionView
from .links import (
    InstructorAccountSearchResult,
    LinkedCredentialSet,
    StudentAccountSearchResult,
)
from .session import PublishStatus, Session, SessionDisplayState, SubmissionStatus
from .sorting import SortBy, SortOrder, SortSpec
from .student import DisplayAnnotation, JoinState, Student, StudentRow, join_annotations

__all__ = [
    "Course",
    "DisplayAnnotation",
    "InstructorAccountSearchResult",
    "JoinState",
    "LinkedCredentialSet",
    "PublishStatus",
    "Session",
    "SessionDisplayState",
    "SortBy",
    "SortOrder",
    "SortSpec",
    "Student",
    "StudentAccountSearchResult",
    "StudentCourseView",
    "StudentRow",
    "StudentSessionView",
    "SubmissionStatus",
    "join_annotations",
]
