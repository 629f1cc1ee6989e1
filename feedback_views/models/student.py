"""
Student models and view-only annotations.

Student records fetched from the API, the view flags attached to them at
render time, and the joined row used by student tables.

Dependencies: pydantic
System role: Student data contracts
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from feedback_views.models.common import ApiRecord


class JoinState(str, Enum):
    """Whether a student has joined the course."""

    JOINED = "JOINED"
    NOT_JOINED = "NOT_JOINED"


class Student(ApiRecord):
    """Student profile within one course."""

    email: str = Field(..., min_length=1)
    course_id: str = Field(..., min_length=1)
    name: str
    section_name: str = "None"
    team_name: str = ""
    join_state: JoinState = JoinState.NOT_JOINED

    @property
    def identifier(self) -> tuple[str, str]:
        """Return the (course_id, email) identifier."""
        return (self.course_id, self.email)


class DisplayAnnotation(BaseModel):
    """
    View-only flags for one record, keyed by the record's identifier.

    Owned by the presentation layer for the lifetime of one list render and
    never sent back to the server.
    """

    model_config = ConfigDict(frozen=True)

    course_id: str
    email: str
    is_allowed_to_view_student_in_section: bool = True
    is_allowed_to_modify_student: bool = True
    show_links: bool = False
    photo_url: str | None = None

    @property
    def identifier(self) -> tuple[str, str]:
        """Return the (course_id, email) identifier."""
        return (self.course_id, self.email)


class StudentRow(BaseModel):
    """A student joined with its display annotation for rendering."""

    model_config = ConfigDict(frozen=True)

    student: Student
    annotation: DisplayAnnotation


def join_annotations(
    students: list[Student],
    annotations: list[DisplayAnnotation] | None = None,
) -> list[StudentRow]:
    """
    Join students with their annotations by identifier.

    Students without an annotation get a default one.

    Args:
        students: Student records in display order
        annotations: Annotations keyed by (course_id, email)

    Returns:
        list[StudentRow]: One row per student, same order as ``students``
    """
    by_id = {a.identifier: a for a in annotations or []}
    rows: list[StudentRow] = []
    for student in students:
        annotation = by_id.get(student.identifier)
        if annotation is None:
            annotation = DisplayAnnotation(course_id=student.course_id, email=student.email)
        rows.append(StudentRow(student=student, annotation=annotation))
    return rows
