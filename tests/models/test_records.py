"""Tests for API record schemas."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from feedback_views.models import (
    DisplayAnnotation,
    InstructorAccountSearchResult,
    JoinState,
    LinkedCredentialSet,
    PublishStatus,
    Session,
    SortOrder,
    Student,
    StudentAccountSearchResult,
    SubmissionStatus,
    join_annotations,
)

API_SESSION = {
    "courseId": "CS101",
    "feedbackSessionName": "Midterm peer review",
    "timeZone": "Asia/Singapore",
    "instructions": "Please be honest.",
    "submissionStartTimestamp": 1704067200000,
    "submissionEndTimestamp": 1704153600000,
    "createdAtTimestamp": 1703980800000,
    "submissionStatus": "OPEN",
    "publishStatus": "NOT_PUBLISHED",
    "gracePeriod": 15,
}


class TestSession:
    """Tests for the Session record."""

    def test_should_parse_api_payload(self) -> None:
        """camelCase payload with epoch-millisecond timestamps."""
        session = Session.model_validate(API_SESSION)

        assert session.course_id == "CS101"
        assert session.feedback_session_name == "Midterm peer review"
        assert session.submission_start_time == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert session.created_at_time < session.submission_start_time < session.submission_end_time
        assert session.submission_status is SubmissionStatus.OPEN
        assert session.publish_status is PublishStatus.NOT_PUBLISHED
        assert session.identifier == ("CS101", "Midterm peer review")

    def test_small_timestamps_should_be_read_as_milliseconds(self) -> None:
        """Values below the seconds/milliseconds guessing threshold stay milliseconds."""
        session = Session.model_validate({
            **API_SESSION,
            "createdAtTimestamp": 0,
            "submissionStartTimestamp": 5000,
            "submissionEndTimestamp": 1500,
        })

        assert session.submission_start_time == datetime(1970, 1, 1, 0, 0, 5, tzinfo=timezone.utc)
        assert session.submission_end_time == datetime(1970, 1, 1, 0, 0, 1, 500000, tzinfo=timezone.utc)
        assert session.created_at_time == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_unknown_submission_status_should_fail_validation(self) -> None:
        with pytest.raises(ValidationError):
            Session.model_validate({**API_SESSION, "submissionStatus": "HALF_OPEN"})

    def test_unknown_publish_status_should_fail_validation(self) -> None:
        with pytest.raises(ValidationError):
            Session.model_validate({**API_SESSION, "publishStatus": "MAYBE"})

    def test_session_should_be_immutable(self) -> None:
        session = Session.model_validate(API_SESSION)

        with pytest.raises(ValidationError):
            session.submission_status = SubmissionStatus.CLOSED


class TestStudent:
    """Tests for Student and its annotations."""

    def test_should_parse_api_payload(self) -> None:
        student = Student.model_validate({
            "email": "alice@example.org",
            "courseId": "CS101",
            "name": "Alice",
            "sectionName": "Tutorial 1",
            "teamName": "Team A",
            "joinState": "JOINED",
        })

        assert student.join_state is JoinState.JOINED
        assert student.identifier == ("CS101", "alice@example.org")

    def test_join_should_attach_matching_annotation(self, make_student) -> None:
        alice = make_student("alice@example.org")
        bob = make_student("bob@example.org")
        annotation = DisplayAnnotation(
            course_id="CS101",
            email="bob@example.org",
            is_allowed_to_modify_student=False,
        )

        rows = join_annotations([alice, bob], [annotation])

        assert [r.student for r in rows] == [alice, bob]
        assert rows[0].annotation == DisplayAnnotation(course_id="CS101", email="alice@example.org")
        assert rows[1].annotation is annotation

    def test_annotation_from_other_course_should_not_match(self, make_student) -> None:
        student = make_student("alice@example.org", course_id="CS101")
        other = DisplayAnnotation(course_id="CS102", email="alice@example.org", show_links=True)

        rows = join_annotations([student], [other])

        assert rows[0].annotation.show_links is False


class TestLinks:
    """Tests for credential link records."""

    def test_search_result_should_gather_flat_link_fields(self) -> None:
        """Link fields arrive flat on the result, not under a nested object."""
        result = StudentAccountSearchResult.model_validate({
            "name": "Alice",
            "email": "alice@example.org",
            "courseId": "CS101",
            "googleId": "alice",
            "courseJoinLink": "https://x/join?key=K",
            "openSessions": {"S1": "https://x/s?key=K"},
            "notOpenSessions": {"S2": "https://x/s2?key=K"},
            "publishedSessions": {},
        })

        assert result.links.course_join_link == "https://x/join?key=K"
        assert result.links.open_sessions == {"S1": "https://x/s?key=K"}
        assert result.links.not_open_sessions == {"S2": "https://x/s2?key=K"}
        assert result.links.published_sessions == {}

    def test_search_result_without_links_should_default_empty(self) -> None:
        result = StudentAccountSearchResult.model_validate({
            "name": "Alice",
            "email": "alice@example.org",
            "courseId": "CS101",
        })

        assert result.links == LinkedCredentialSet()

    def test_instructor_result_should_parse_api_payload(self) -> None:
        result = InstructorAccountSearchResult.model_validate({
            "name": "Prof Lee",
            "email": "lee@example.org",
            "courseId": "CS101",
            "courseName": "Programming Methodology",
            "courseJoinLink": "https://x/join?key=K",
        })

        assert result.identifier == ("CS101", "lee@example.org")
        assert result.course_join_link == "https://x/join?key=K"
        assert result.google_id == ""

    def test_defaults_should_not_share_mappings(self) -> None:
        assert LinkedCredentialSet().open_sessions is not LinkedCredentialSet().open_sessions


class TestSortOrder:
    def test_flipped(self) -> None:
        assert SortOrder.ASC.flipped() is SortOrder.DESC
        assert SortOrder.DESC.flipped() is SortOrder.ASC
