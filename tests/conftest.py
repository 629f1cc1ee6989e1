"""
Shared test fixtures and configuration for entire test suite.

Provides: record factories for sessions, courses and students, sample
credential links, isolated presentation settings
Dependencies: pytest, pydantic
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timedelta, timezone

import pytest

from feedback_views.configs import PresentationSettings, get_settings
from feedback_views.models import (
    Course,
    JoinState,
    LinkedCredentialSet,
    PublishStatus,
    Session,
    Student,
    StudentAccountSearchResult,
    SubmissionStatus,
)

EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


def at(hours: int) -> datetime:
    """Return a fixed instant ``hours`` after the test epoch."""
    return EPOCH + timedelta(hours=hours)


@pytest.fixture(name="at")
def at_fixture():
    """Provide the instant helper: ``at(hours)`` after the test epoch."""
    return at


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def presentation_settings() -> PresentationSettings:
    """Provide default presentation settings independent of the environment."""
    return PresentationSettings(
        access_key_param="key",
        no_section_name="None",
        hide_links_on_load=True,
    )


@pytest.fixture
def make_session():
    """
    Create Session records with sensible defaults.

    Returns:
        Callable: Factory accepting field overrides
    """

    def _make(
        name: str = "Session 1",
        course_id: str = "CS101",
        created: int = 0,
        start: int = 1,
        end: int = 48,
        submission_status: SubmissionStatus = SubmissionStatus.OPEN,
        publish_status: PublishStatus = PublishStatus.NOT_PUBLISHED,
    ) -> Session:
        return Session(
            course_id=course_id,
            feedback_session_name=name,
            created_at_time=at(created),
            submission_start_time=at(start),
            submission_end_time=at(end),
            submission_status=submission_status,
            publish_status=publish_status,
        )

    return _make


@pytest.fixture
def make_student():
    """
    Create Student records with sensible defaults.

    Returns:
        Callable: Factory accepting field overrides
    """

    def _make(
        email: str,
        name: str = "Student",
        section_name: str = "None",
        team_name: str = "Team 1",
        join_state: JoinState = JoinState.JOINED,
        course_id: str = "CS101",
    ) -> Student:
        return Student(
            email=email,
            course_id=course_id,
            name=name,
            section_name=section_name,
            team_name=team_name,
            join_state=join_state,
        )

    return _make


@pytest.fixture
def course_factory():
    """Create Course records by id."""

    def _make(course_id: str, course_name: str = "") -> Course:
        return Course(course_id=course_id, course_name=course_name or course_id)

    return _make


@pytest.fixture
def credential_links() -> LinkedCredentialSet:
    """Provide a credential set with 2 open, 1 not-open and 3 published links."""
    base = "https://feedback.example.org/web/sessions/submission"
    return LinkedCredentialSet(
        course_join_link="https://feedback.example.org/web/join?key=OLDKEY&courseid=CS101",
        open_sessions={
            "Midterm peer review": f"{base}?courseid=CS101&fsname=Midterm&key=OLDKEY",
            "Lab feedback": f"{base}?courseid=CS101&key=OLDKEY&fsname=Lab",
        },
        not_open_sessions={
            "Final peer review": f"{base}?key=OLDKEY&courseid=CS101&fsname=Final",
        },
        published_sessions={
            "Week 1": "https://feedback.example.org/web/sessions/result?courseid=CS101&fsname=W1&key=OLDKEY",
            "Week 2": "https://feedback.example.org/web/sessions/result?courseid=CS101&fsname=W2&key=OLDKEY",
            "Week 3": "https://feedback.example.org/web/sessions/result?courseid=CS101&fsname=W3",
        },
    )


@pytest.fixture
def search_result(credential_links: LinkedCredentialSet) -> StudentAccountSearchResult:
    """Provide one admin search result carrying the sample links."""
    return StudentAccountSearchResult(
        name="Alice Tan",
        email="alice@example.org",
        course_id="CS101",
        course_name="Programming Methodology",
        google_id="alice.tan",
        links=credential_links,
    )
