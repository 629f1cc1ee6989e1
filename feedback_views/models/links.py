"""
Student access link models.

Join and session links that embed an account's access key, and the admin
search results that carry them.

Dependencies: pydantic
System role: Credential link data contracts
"""

from typing import Any

from pydantic import Field, model_validator

from feedback_views.models.common import ApiRecord

# (field name, API name) of the link fields sent flat on a student result
_LINK_FIELDS = (
    ("course_join_link", "courseJoinLink"),
    ("open_sessions", "openSessions"),
    ("not_open_sessions", "notOpenSessions"),
    ("published_sessions", "publishedSessions"),
)


class LinkedCredentialSet(ApiRecord):
    """
    All links that embed one student's access key.

    Attributes:
        course_join_link: Top-level course join URL
        open_sessions: Session name to submission URL, open sessions
        not_open_sessions: Session name to submission URL, not yet open
        published_sessions: Session name to results URL, published sessions
    """

    course_join_link: str = ""
    open_sessions: dict[str, str] = Field(default_factory=dict)
    not_open_sessions: dict[str, str] = Field(default_factory=dict)
    published_sessions: dict[str, str] = Field(default_factory=dict)


class StudentAccountSearchResult(ApiRecord):
    """
    Student account as returned by the admin search.

    The API sends the four link fields flat on the result; they are gathered
    into ``links`` on parse. A ``links`` value passed directly takes
    precedence.
    """

    name: str
    email: str
    course_id: str
    course_name: str = ""
    google_id: str = ""
    links: LinkedCredentialSet = Field(default_factory=LinkedCredentialSet)

    @model_validator(mode="before")
    @classmethod
    def _gather_links(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "links" in data:
            return data
        data = dict(data)
        links: dict[str, Any] = {}
        for field, api_name in _LINK_FIELDS:
            for name in (api_name, field):
                if name in data:
                    links[field] = data.pop(name)
        if links:
            data["links"] = links
        return data

    @property
    def identifier(self) -> tuple[str, str]:
        """Return the (course_id, email) identifier."""
        return (self.course_id, self.email)


class InstructorAccountSearchResult(ApiRecord):
    """Instructor account as returned by the admin search."""

    name: str
    email: str
    course_id: str
    course_name: str = ""
    google_id: str = ""
    course_join_link: str = ""
    home_page_link: str = ""

    @property
    def identifier(self) -> tuple[str, str]:
        """Return the (course_id, email) identifier."""
        return (self.course_id, self.email)
