"""
Admin search coordinator.

Holds student and instructor account search results, the per-row link
visibility flags, and applies regenerated access keys to displayed links.

Dependencies: feedback_views.core, feedback_views.models, feedback_views.configs,
    feedback_views.observability
System role: Admin search use case orchestration
"""

import logging
from typing import Iterable, Union

from feedback_views.configs import PresentationSettings, get_settings
from feedback_views.core.exceptions import RecordNotFoundError
from feedback_views.core.link_rewriter import rewrite_key_set
from feedback_views.models.links import InstructorAccountSearchResult, StudentAccountSearchResult
from feedback_views.models.student import DisplayAnnotation
from feedback_views.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

AccountResult = Union[StudentAccountSearchResult, InstructorAccountSearchResult]
Annotations = dict[tuple[str, str], DisplayAnnotation]


def _annotation(annotations: Annotations, record: AccountResult) -> DisplayAnnotation:
    annotation = annotations.get(record.identifier)
    if annotation is None:
        annotation = DisplayAnnotation(course_id=record.course_id, email=record.email)
    return annotation


def _flag_links(records: Iterable[AccountResult], annotations: Annotations, show: bool) -> Annotations:
    return {
        r.identifier: _annotation(annotations, r).model_copy(update={"show_links": show})
        for r in records
    }


class AdminSearchService:
    """Admin search page coordinator for student and instructor accounts."""

    def __init__(self, settings: PresentationSettings | None = None) -> None:
        """
        Initialize with no results.

        Args:
            settings: Presentation settings (defaults to application settings)
        """
        self.settings = settings or get_settings().presentation
        self.students: list[StudentAccountSearchResult] = []
        self.instructors: list[InstructorAccountSearchResult] = []
        self._annotations: Annotations = {}
        self._instructor_annotations: Annotations = {}

    def load_results(
        self,
        students: Iterable[StudentAccountSearchResult],
        instructors: Iterable[InstructorAccountSearchResult] = (),
    ) -> None:
        """
        Replace the displayed results with a new search response.

        Links of both lists start collapsed unless ``hide_links_on_load`` is
        disabled.

        Args:
            students: Student accounts matching the query
            instructors: Instructor accounts matching the query
        """
        self.students = list(students)
        self.instructors = list(instructors)
        show = not self.settings.hide_links_on_load
        self._annotations = _flag_links(self.students, {}, show)
        self._instructor_annotations = _flag_links(self.instructors, {}, show)
        if not self.students and not self.instructors:
            logger.info("Admin search returned no results")

    def annotation_for(self, student: StudentAccountSearchResult) -> DisplayAnnotation:
        """Return the display flags joined to a student result row."""
        return _annotation(self._annotations, student)

    def instructor_annotation_for(self, instructor: InstructorAccountSearchResult) -> DisplayAnnotation:
        """Return the display flags joined to an instructor result row."""
        return _annotation(self._instructor_annotations, instructor)

    def show_all_links(self) -> None:
        """Expand the links of every student row."""
        self._annotations = _flag_links(self.students, self._annotations, True)

    def hide_all_links(self) -> None:
        """Collapse the links of every student row."""
        self._annotations = _flag_links(self.students, self._annotations, False)

    def show_all_instructor_links(self) -> None:
        """Expand the links of every instructor row."""
        self._instructor_annotations = _flag_links(self.instructors, self._instructor_annotations, True)

    def hide_all_instructor_links(self) -> None:
        """Collapse the links of every instructor row."""
        self._instructor_annotations = _flag_links(self.instructors, self._instructor_annotations, False)

    def toggle_links(self, course_id: str, email: str) -> DisplayAnnotation:
        """
        Flip link visibility for one student row.

        Raises:
            RecordNotFoundError: If no result matches
        """
        student = self._find(course_id, email)
        current = self.annotation_for(student)
        updated = current.model_copy(update={"show_links": not current.show_links})
        self._annotations = {**self._annotations, student.identifier: updated}
        return updated

    def apply_regenerated_key(
        self,
        course_id: str,
        email: str,
        new_key: str,
    ) -> StudentAccountSearchResult:
        """
        Rewrite a student's displayed links with a regenerated access key.

        The result row is replaced by a new object with a new link set; the
        previous object is left unchanged for anyone still holding it.

        Args:
            course_id: Course identifier
            email: Student email
            new_key: Key from the regeneration response

        Returns:
            StudentAccountSearchResult: The replacement row

        Raises:
            RecordNotFoundError: If no result matches
        """
        student = self._find(course_id, email)
        links = rewrite_key_set(student.links, new_key, self.settings.access_key_param)
        updated = student.model_copy(update={"links": links})
        self._replace(student, updated)
        log_with_context(
            logger,
            logging.INFO,
            "Student links updated with regenerated key",
            student=updated,
            link_count=1
            + len(links.open_sessions)
            + len(links.not_open_sessions)
            + len(links.published_sessions),
        )
        return updated

    def clear_google_id(self, course_id: str, email: str) -> StudentAccountSearchResult:
        """
        Blank a student's Google ID after an account reset.

        Raises:
            RecordNotFoundError: If no result matches
        """
        student = self._find(course_id, email)
        updated = student.model_copy(update={"google_id": ""})
        self._replace(student, updated)
        log_with_context(logger, logging.INFO, "Student Google ID cleared", student=updated)
        return updated

    def _find(self, course_id: str, email: str) -> StudentAccountSearchResult:
        for student in self.students:
            if student.identifier == (course_id, email):
                return student
        log_with_context(
            logger,
            logging.WARNING,
            "Admin search result not found",
            course_id=course_id,
            email=email,
        )
        raise RecordNotFoundError("student", (course_id, email))

    def _replace(
        self,
        old: StudentAccountSearchResult,
        new: StudentAccountSearchResult,
    ) -> None:
        self.students = [new if s is old else s for s in self.students]
