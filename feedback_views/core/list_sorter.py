"""
List sorting.

Comparator engine for interactive table columns and the fixed orderings
used for session and course lists.

Dependencies: feedback_views.models, feedback_views.core.exceptions
System role: List ordering business logic
"""

from functools import cmp_to_key
from typing import Any, Callable, Iterable, Mapping, TypeVar

from feedback_views.core.exceptions import SortKeyError
from feedback_views.models.course import Course
from feedback_views.models.session import Session
from feedback_views.models.sorting import SortBy, SortOrder, SortSpec
from feedback_views.models.student import JoinState, StudentRow

T = TypeVar("T")
K = TypeVar("K")

Comparator = Callable[[T, T], int]

JOIN_STATE_LABELS: dict[JoinState, str] = {
    JoinState.JOINED: "Joined",
    JoinState.NOT_JOINED: "Yet to Join",
}


def join_state_label(join_state: JoinState) -> str:
    """Return the display label for a join state."""
    return JOIN_STATE_LABELS[JoinState(join_state)]


def _compare_values(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def make_comparator(
    key: K,
    order: SortOrder,
    extract: Callable[[T, K], Any],
) -> Comparator:
    """
    Build a three-way comparator for one sort key.

    Extracted values are compared with ordinary ordering (lexicographic for
    strings). Equal values compare as 0; no secondary key is applied.

    Args:
        key: Sort key passed through to ``extract``
        order: Direction, DESC flips the sign
        extract: Returns the comparable value of a record for ``key``

    Returns:
        Comparator: Function returning -1, 0 or 1
    """
    sign = -1 if SortOrder(order) is SortOrder.DESC else 1

    def compare(a: T, b: T) -> int:
        return sign * _compare_values(extract(a, key), extract(b, key))

    return compare


def sort_records(
    records: Iterable[T],
    spec: SortSpec,
    extract: Callable[[T, SortBy], Any],
) -> list[T]:
    """
    Return ``records`` sorted by ``spec``.

    Uses Python's stable sort, so records with equal keys keep their
    incoming relative order.
    """
    return sorted(records, key=cmp_to_key(make_comparator(spec.key, spec.order, extract)))


def toggle_sort(spec: SortSpec, key: SortBy) -> SortSpec:
    """
    Return the sort state after a column header click.

    The direction flips on every call, including when the column changes;
    it is shared across columns rather than reset to ascending.
    """
    return SortSpec(key=key, order=spec.order.flipped())


STUDENT_SORT_EXTRACTORS: Mapping[SortBy, Callable[[StudentRow], str]] = {
    SortBy.NONE: lambda row: "",
    SortBy.SECTION_NAME: lambda row: row.student.section_name,
    SortBy.STUDENT_NAME: lambda row: row.student.name,
    SortBy.TEAM_NAME: lambda row: row.student.team_name,
    SortBy.EMAIL: lambda row: row.student.email,
    SortBy.JOIN_STATUS: lambda row: join_state_label(row.student.join_state),
}


def _check_extractors(table: Mapping[SortBy, Callable[[StudentRow], str]]) -> None:
    missing = [key for key in SortBy if key not in table]
    if missing:
        raise SortKeyError(missing[0], {"missing": [key.value for key in missing]})


_check_extractors(STUDENT_SORT_EXTRACTORS)


def extract_student_value(row: StudentRow, key: SortBy) -> str:
    """
    Extract the comparable value of a student row for ``key``.

    Raises:
        SortKeyError: If ``key`` has no extractor
    """
    try:
        extractor = STUDENT_SORT_EXTRACTORS[SortBy(key)]
    except (KeyError, ValueError):
        raise SortKeyError(key) from None
    return extractor(row)


def sort_student_rows(rows: Iterable[StudentRow], spec: SortSpec) -> list[StudentRow]:
    """Sort student rows by the active column."""
    return sort_records(rows, spec, extract_student_value)


def _identity(record: Any) -> Any:
    return record


def sort_sessions(
    items: Iterable[T],
    session_of: Callable[[T], Session] = _identity,
) -> list[T]:
    """
    Sort sessions by creation time, then by submission end time.

    Both keys ascending. The list is rebuilt on every call, so callers
    re-apply it after each insertion.

    Args:
        items: Sessions, or wrappers holding a session
        session_of: Returns the session of an item

    Returns:
        list: New sorted list
    """
    def session_key(item: T) -> tuple:
        session = session_of(item)
        return (session.created_at_time, session.submission_end_time)

    return sorted(items, key=session_key)


def sort_courses(
    items: Iterable[T],
    course_of: Callable[[T], Course] = _identity,
) -> list[T]:
    """
    Sort courses by identifier, ascending.

    Plain string comparison, not locale-aware collation.
    """
    return sorted(items, key=lambda item: course_of(item).course_id)
