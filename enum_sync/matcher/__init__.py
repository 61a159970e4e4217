"""Matcher registry: named line-matching strategies."""

from __future__ import annotations

from enum_sync.errors import MisconfiguredJobError
from enum_sync.matcher.builtin import (
    NAME_ARGS_RE,
    NAME_COMMENT_RE,
    NAME_COMMENT_VALUE_RE,
    NAME_RE,
    NAME_VALUE_COMMENT_RE,
    by_name_only,
    by_name_quoted_comment_value,
    by_name_value_quoted_comment,
    by_name_with_args,
    by_name_with_quoted_comment,
)
from enum_sync.matcher.custom import pattern_matcher
from enum_sync.models import Matcher

MATCHERS: dict[str, Matcher] = {
    "name": by_name_only,
    "name_args": by_name_with_args,
    "name_comment": by_name_with_quoted_comment,
    "name_value_comment": by_name_value_quoted_comment,
    "name_comment_value": by_name_quoted_comment_value,
}

PATTERNS = {
    "name": NAME_RE,
    "name_args": NAME_ARGS_RE,
    "name_comment": NAME_COMMENT_RE,
    "name_value_comment": NAME_VALUE_COMMENT_RE,
    "name_comment_value": NAME_COMMENT_VALUE_RE,
}


def get_matcher(name: str) -> Matcher:
    """Look up a built-in matcher by its registry name."""
    try:
        return MATCHERS[name]
    except KeyError:
        raise MisconfiguredJobError(
            f"Unknown matcher {name!r}, expected one of: {', '.join(MATCHERS)}"
        ) from None


__all__ = [
    "MATCHERS",
    "PATTERNS",
    "by_name_only",
    "by_name_with_args",
    "by_name_with_quoted_comment",
    "by_name_value_quoted_comment",
    "by_name_quoted_comment_value",
    "get_matcher",
    "pattern_matcher",
]
