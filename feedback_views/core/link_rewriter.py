"""
Access key rewriting for student links.

Replaces the access key embedded in a student's join and session URLs after
the key has been regenerated.

Dependencies: feedback_views.models
System role: Credential link business logic
"""

import re
from functools import lru_cache

from feedback_views.models.links import LinkedCredentialSet

DEFAULT_KEY_PARAM = "key"


@lru_cache(maxsize=8)
def _key_pattern(param: str) -> re.Pattern:
    # value runs to the next '&' or end of string
    return re.compile(rf"([?&]{re.escape(param)}=)[^&]*")


def rewrite_key(url: str, new_key: str, param: str = DEFAULT_KEY_PARAM) -> str:
    """
    Replace the value of the access key query parameter.

    Only the first parameter named exactly ``param`` is rewritten. Every other
    parameter, the path, and the parameter name itself are left untouched.

    Args:
        url: URL that may embed the key
        new_key: Replacement key value, inserted verbatim
        param: Query parameter name

    Returns:
        str: Rewritten URL, or ``url`` unchanged if it has no such parameter
    """
    if not url:
        return url
    return _key_pattern(param).sub(lambda m: m.group(1) + new_key, url, count=1)


def _rewrite_mapping(urls: dict[str, str], new_key: str, param: str) -> dict[str, str]:
    return {name: rewrite_key(url, new_key, param) for name, url in urls.items()}


def rewrite_key_set(
    links: LinkedCredentialSet,
    new_key: str,
    param: str = DEFAULT_KEY_PARAM,
) -> LinkedCredentialSet:
    """
    Rewrite the access key in every link of a credential set.

    Builds a new set; ``links`` and its mappings are not modified, so other
    holders of the old set see no change. Mapping keys and sizes are
    preserved.

    Args:
        links: Current credential links
        new_key: Regenerated access key
        param: Query parameter name

    Returns:
        LinkedCredentialSet: New set with every URL carrying ``new_key``
    """
    return LinkedCredentialSet(
        course_join_link=rewrite_key(links.course_join_link, new_key, param),
        open_sessions=_rewrite_mapping(links.open_sessions, new_key, param),
        not_open_sessions=_rewrite_mapping(links.not_open_sessions, new_key, param),
        published_sessions=_rewrite_mapping(links.published_sessions, new_key, param),
    )
