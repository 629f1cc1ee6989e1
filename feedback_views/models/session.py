"""
Feedback session models and enums.

Session records as fetched from the API and the display state derived
from them.

Dependencies: pydantic
System role: Feedback session data contracts
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from feedback_views.models.common import ApiRecord


class SubmissionStatus(str, Enum):
    """Server-computed phase of a session's submission window."""

    NOT_VISIBLE = "NOT_VISIBLE"
    VISIBLE_NOT_OPEN = "VISIBLE_NOT_OPEN"
    OPEN = "OPEN"
    GRACE_PERIOD = "GRACE_PERIOD"
    CLOSED = "CLOSED"


class PublishStatus(str, Enum):
    """Whether a session's results are released to respondents."""

    PUBLISHED = "PUBLISHED"
    NOT_PUBLISHED = "NOT_PUBLISHED"


class Session(ApiRecord):
    """
    Feedback session record.

    Identified by (course_id, feedback_session_name). Timestamp fields accept
    the API's epoch-millisecond ``*Timestamp`` values.
    """

    course_id: str = Field(..., min_length=1, description="Owning course identifier")
    feedback_session_name: str = Field(..., min_length=1, description="Session name, unique per course")
    submission_start_time: datetime = Field(..., alias="submissionStartTimestamp")
    submission_end_time: datetime = Field(..., alias="submissionEndTimestamp")
    created_at_time: datetime = Field(..., alias="createdAtTimestamp")
    submission_status: SubmissionStatus
    publish_status: PublishStatus
    time_zone: str | None = Field(default=None, description="IANA zone the session is scheduled in")
    instructions: str | None = None

    @field_validator(
        "submission_start_time", "submission_end_time", "created_at_time", mode="before"
    )
    @classmethod
    def _from_epoch_millis(cls, v):
        # API timestamps are epoch milliseconds at every magnitude
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return datetime.fromtimestamp(v / 1000, tz=timezone.utc)
        return v

    @property
    def identifier(self) -> tuple[str, str]:
        """Return the (course_id, feedback_session_name) identifier."""
        return (self.course_id, self.feedback_session_name)


class SessionDisplayState(BaseModel):
    """Display flags derived from a session and the actor's submission flag."""

    model_config = ConfigDict(frozen=True)

    is_opened: bool
    is_waiting_to_open: bool
    is_published: bool
    is_submitted: bool
