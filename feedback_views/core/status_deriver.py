"""
Session display status derivation.

Maps a session's enumerated server state plus the actor's submission flag
to display booleans and tooltip text.

Dependencies: feedback_views.models, feedback_views.core.exceptions
System role: Session status business logic
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Any

from feedback_views.core.exceptions import UnknownStatusError
from feedback_views.models.session import (
    PublishStatus,
    Session,
    SessionDisplayState,
    SubmissionStatus,
)

logger = logging.getLogger(__name__)

STATUS_PUBLISHED = "The responses for the session have been published and can now be viewed."
STATUS_NOT_PUBLISHED = "The responses for the session have not yet been published and cannot be viewed."
STATUS_AWAITING = "The session is not open for submission at this time. It is expected to open later."
STATUS_PENDING = "The feedback session is yet to be completed by you."
STATUS_SUBMITTED = "You have submitted your feedback for this session."
STATUS_CLOSED = " The session is now closed for submissions."


def _coerce_status(enum_cls: type[Enum], value: Any, field: str, session: Session) -> Enum:
    """Return ``value`` as a member of ``enum_cls`` or raise UnknownStatusError."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        logger.error(
            "Session carries unrecognized status",
            extra={
                "field": field,
                "value": repr(value),
                "course_id": getattr(session, "course_id", None),
                "feedback_session_name": getattr(session, "feedback_session_name", None),
            },
        )
        raise UnknownStatusError(field, value) from None


def derive_state(session: Session, has_submitted: bool) -> SessionDisplayState:
    """
    Derive display flags for a session.

    Args:
        session: Fetched session record
        has_submitted: Whether the current actor has submitted responses

    Returns:
        SessionDisplayState: Flags for one render pass

    Raises:
        UnknownStatusError: If a status field is outside its enum domain
    """
    submission_status = _coerce_status(
        SubmissionStatus, session.submission_status, "submission_status", session
    )
    publish_status = _coerce_status(
        PublishStatus, session.publish_status, "publish_status", session
    )
    return SessionDisplayState(
        is_opened=submission_status is SubmissionStatus.OPEN,
        is_waiting_to_open=submission_status is SubmissionStatus.VISIBLE_NOT_OPEN,
        is_published=publish_status is PublishStatus.PUBLISHED,
        is_submitted=bool(has_submitted),
    )


def submission_tooltip(state: SessionDisplayState) -> str:
    """
    Build the submission status tooltip.

    The first part is picked by an ordered decision table (waiting, then
    submitted, then pending). The closed suffix is appended independently,
    so a session that closed before the actor submitted reads as pending
    and closed.

    Args:
        state: Derived display state

    Returns:
        str: Tooltip text
    """
    if state.is_waiting_to_open:
        msg = STATUS_AWAITING
    elif state.is_submitted:
        msg = STATUS_SUBMITTED
    else:
        msg = STATUS_PENDING

    if not state.is_opened and not state.is_waiting_to_open:
        msg += STATUS_CLOSED
    return msg


def response_tooltip(is_published: bool) -> str:
    """Return the response status tooltip for a published flag."""
    if is_published:
        return STATUS_PUBLISHED
    return STATUS_NOT_PUBLISHED


def is_open_at(session: Session, now: datetime) -> bool:
    """
    Check whether ``now`` falls inside the session's submission window.

    Start is inclusive, end is exclusive. ``now`` must be comparable with the
    session timestamps (both aware or both naive).

    Args:
        session: Fetched session record
        now: Instant to check

    Returns:
        bool: True if submissions are accepted at ``now``
    """
    return session.submission_start_time <= now < session.submission_end_time


def is_published(session: Session) -> bool:
    """Check whether the session's results are published."""
    publish_status = _coerce_status(
        PublishStatus, session.publish_status, "publish_status", session
    )
    return publish_status is PublishStatus.PUBLISHED
