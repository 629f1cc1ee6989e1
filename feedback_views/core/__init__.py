"""
Core derivation logic.

Pure, stateless transformers: session status derivation, list sorting and
access key rewriting.
"""

from feedback_views.core.link_rewriter import rewrite_key, rewrite_key_set
from feedback_views.core.list_sorter import (
    make_comparator,
    sort_courses,
    sort_records,
    sort_sessions,
    toggle_sort,
)
from feedback_views.core.status_deriver import (
    derive_state,
    response_tooltip,
    submission_tooltip,
)

__all__ = [
    "derive_state",
    "make_comparator",
    "response_tooltip",
    "rewrite_key",
    "rewrite_key_set",
    "sort_courses",
    "sort_records",
    "sort_sessions",
    "submission_tooltip",
    "toggle_sort",
]
