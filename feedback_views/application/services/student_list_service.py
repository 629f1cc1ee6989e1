"""
Student list coordinator.

Holds one student table: the rows joined with their view-only
annotations, the active sort state, and the hide list.

Dependencies: feedback_views.core, feedback_views.models, feedback_views.configs
System role: Student table use case orchestration
"""

import logging
from typing import Iterable

from feedback_views.configs import PresentationSettings, get_settings
from feedback_views.core.exceptions import RecordNotFoundError
from feedback_views.core.list_sorter import sort_student_rows, toggle_sort
from feedback_views.models.sorting import SortBy, SortSpec
from feedback_views.models.student import (
    DisplayAnnotation,
    Student,
    StudentRow,
    join_annotations,
)

logger = logging.getLogger(__name__)


class StudentListService:
    """Student table coordinator for one course."""

    def __init__(
        self,
        course_id: str,
        hidden_emails: Iterable[str] = (),
        settings: PresentationSettings | None = None,
    ) -> None:
        """
        Initialize an empty student table.

        Args:
            course_id: Course the table lists
            hidden_emails: Students whose rows are not shown
            settings: Presentation settings (defaults to application settings)
        """
        self.course_id = course_id
        self.settings = settings or get_settings().presentation
        self.hidden_emails = frozenset(hidden_emails)
        self.sort_spec = SortSpec()
        self.rows: list[StudentRow] = []

    def set_students(
        self,
        students: list[Student],
        annotations: list[DisplayAnnotation] | None = None,
    ) -> list[StudentRow]:
        """
        Replace the table contents.

        The current sort, if any, is re-applied without toggling.

        Args:
            students: Fetched student records
            annotations: View-only flags keyed by (course_id, email)

        Returns:
            list[StudentRow]: Rows in display order
        """
        rows = join_annotations(students, annotations)
        if self.sort_spec.key is not SortBy.NONE:
            rows = sort_student_rows(rows, self.sort_spec)
        self.rows = rows
        return self.rows

    def sort_by(self, key: SortBy) -> list[StudentRow]:
        """
        Sort the table by a column after a header click.

        Flips the shared direction and sorts stably by ``key``.

        Args:
            key: Column to sort by

        Returns:
            list[StudentRow]: Rows in the new order
        """
        self.sort_spec = toggle_sort(self.sort_spec, key)
        self.rows = sort_student_rows(self.rows, self.sort_spec)
        logger.debug(
            "Student list sorted",
            extra={
                "course_id": self.course_id,
                "sort_by": self.sort_spec.key.value,
                "sort_order": self.sort_spec.order.value,
            },
        )
        return self.rows

    def has_section(self) -> bool:
        """Return whether any student belongs to a real section."""
        return any(
            row.student.section_name != self.settings.no_section_name
            for row in self.rows
        )

    def is_student_hidden(self, email: str) -> bool:
        """Return whether the student's row is on the hide list."""
        return email in self.hidden_emails

    def visible_rows(self) -> list[StudentRow]:
        """Rows not on the hide list, in display order."""
        return [row for row in self.rows if not self.is_student_hidden(row.student.email)]

    @staticmethod
    def track_by(row: StudentRow) -> str:
        """Stable identity of a row across re-renders."""
        return row.student.email

    def remove_student(self, email: str) -> StudentRow:
        """
        Drop a student's row after the student was removed from the course.

        Args:
            email: Student email

        Returns:
            StudentRow: The removed row

        Raises:
            RecordNotFoundError: If no row has this email
        """
        for row in self.rows:
            if row.student.email == email:
                self.rows = [r for r in self.rows if r is not row]
                logger.info(
                    "Student removed from list",
                    extra={"course_id": self.course_id, "email": email},
                )
                return row
        raise RecordNotFoundError("student", (self.course_id, email))
