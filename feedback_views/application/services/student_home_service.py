"""
Student home page coordinator.

Collects courses and sessions as per-course fetches complete, keeps both
lists sorted after every insertion, and derives display state on render.

Dependencies: feedback_views.core, feedback_views.models
System role: Student home use case orchestration
"""

import logging

from feedback_views.core.exceptions import PresentationError, RecordNotFoundError
from feedback_views.core.list_sorter import sort_courses, sort_sessions
from feedback_views.core.status_deriver import (
    derive_state,
    response_tooltip,
    submission_tooltip,
)
from feedback_views.models.course import Course
from feedback_views.models.home import StudentCourseView, StudentSessionView
from feedback_views.models.session import Session
from feedback_views.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class _CourseEntry:
    """A fetched course and its sessions, sessions kept in fixed order."""

    __slots__ = ("course", "sessions")

    def __init__(self, course: Course, sessions: list[Session]) -> None:
        self.course = course
        self.sessions = sessions


class StudentHomeService:
    """Student home page coordinator."""

    def __init__(self) -> None:
        """Initialize an empty home page."""
        self._entries: list[_CourseEntry] = []
        self._submitted: dict[tuple[str, str], bool] = {}

    @property
    def course_ids(self) -> list[str]:
        """Course identifiers in display order."""
        return [entry.course.course_id for entry in self._entries]

    def add_course(self, course: Course, sessions: list[Session]) -> None:
        """
        Insert a course and its sessions.

        A course already present is replaced wholesale. Sessions are sorted by
        creation then end time, and the course list is re-sorted by course id,
        so the list is fully sorted once this call returns.

        Args:
            course: Fetched course record
            sessions: Sessions fetched for the course, in any order
        """
        entries = [e for e in self._entries if e.course.course_id != course.course_id]
        entries.append(_CourseEntry(course, sort_sessions(sessions)))
        self._entries = sort_courses(entries, course_of=lambda e: e.course)
        logger.info(
            "Course added to student home",
            extra={"course_id": course.course_id, "session_count": len(sessions)},
        )

    def add_session(self, session: Session) -> None:
        """
        Insert one session into an already added course.

        Raises:
            RecordNotFoundError: If the session's course has not been added
        """
        entry = self._find_entry(session.course_id)
        others = [
            s for s in entry.sessions
            if s.feedback_session_name != session.feedback_session_name
        ]
        entry.sessions = sort_sessions([*others, session])

    def record_submission(self, course_id: str, session_name: str, has_submitted: bool) -> None:
        """
        Record whether the actor has submitted responses for a session.

        Args:
            course_id: Course identifier
            session_name: Feedback session name
            has_submitted: Result of the has-responses query

        Raises:
            RecordNotFoundError: If the session is not on the page
        """
        entry = self._find_entry(course_id)
        if not any(s.feedback_session_name == session_name for s in entry.sessions):
            logger.warning(
                "Submission flag for unknown session",
                extra={"course_id": course_id, "feedback_session_name": session_name},
            )
            raise RecordNotFoundError("session", (course_id, session_name))
        self._submitted[(course_id, session_name)] = bool(has_submitted)

    def render(self) -> list[StudentCourseView]:
        """
        Build the page view.

        Display state is derived afresh on every call. Sessions whose
        submission flag has not arrived yet are left out until it does.

        Returns:
            list[StudentCourseView]: Courses by id, sessions in fixed order

        Raises:
            UnknownStatusError: If a session carries a status outside its domain
        """
        views: list[StudentCourseView] = []
        for entry in self._entries:
            session_views: list[StudentSessionView] = []
            for session in entry.sessions:
                has_submitted = self._submitted.get(session.identifier)
                if has_submitted is None:
                    continue
                try:
                    state = derive_state(session, has_submitted)
                except PresentationError as e:
                    log_exception_with_context(
                        logger,
                        "Failed to derive session state",
                        e,
                        session=session,
                    )
                    raise
                session_views.append(
                    StudentSessionView(
                        session=session,
                        state=state,
                        submission_tooltip=submission_tooltip(state),
                        response_tooltip=response_tooltip(state.is_published),
                    )
                )
            views.append(StudentCourseView(course=entry.course, sessions=session_views))
        return views

    def _find_entry(self, course_id: str) -> _CourseEntry:
        for entry in self._entries:
            if entry.course.course_id == course_id:
                return entry
        raise RecordNotFoundError("course", course_id)
