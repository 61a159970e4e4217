"""Matchers built from caller-supplied patterns."""

from __future__ import annotations

import logging
import re

from enum_sync.errors import MisconfiguredJobError
from enum_sync.models import Matcher, MatchResult

logger = logging.getLogger(__name__)


def _compile(pattern: str | re.Pattern[str], what: str) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as e:
        raise MisconfiguredJobError(f"Invalid {what} {pattern!r}: {e}") from e


def _check_group(regex: re.Pattern[str], group: int | None, label: str) -> None:
    if group is not None and not 0 < group <= regex.groups:
        raise MisconfiguredJobError(
            f"Pattern {regex.pattern!r} has {regex.groups} group(s), "
            f"{label} refers to group {group}"
        )


def pattern_matcher(
    pattern: str | re.Pattern[str],
    *,
    name_group: int = 1,
    value_group: int | None = None,
    comment_group: int | None = None,
    description_pattern: str | re.Pattern[str] | None = None,
    description_group: int = 1,
    extra_group: int | None = None,
) -> Matcher:
    """Build a matcher from a regular expression and its group layout.

    ``value_group`` defaults to the name. When ``description_pattern`` is set it
    is searched inside the ``comment_group`` capture and its ``description_group``
    becomes the comment; this handles arguments that are themselves constructor
    calls, e.g. ``RED(new Label("Red", 1))``. ``extra_group`` is passed through
    as ``MatchResult.extra`` for description functions.
    """
    regex = _compile(pattern, "pattern")
    _check_group(regex, name_group, "name_group")
    _check_group(regex, value_group, "value_group")
    _check_group(regex, comment_group, "comment_group")
    _check_group(regex, extra_group, "extra_group")

    satellite = None
    if description_pattern is not None:
        if comment_group is None:
            raise MisconfiguredJobError("description_pattern requires comment_group")
        satellite = _compile(description_pattern, "description pattern")
        _check_group(satellite, description_group, "description_group")

    def match(line: str) -> MatchResult | None:
        m = regex.search(line)
        if not m or not m.group(name_group):
            return None
        name = m.group(name_group)
        value = m.group(value_group) if value_group is not None else None

        comment = m.group(comment_group) if comment_group is not None else None
        if satellite is not None and comment is not None:
            sm = satellite.search(comment)
            comment = sm.group(description_group) if sm else None

        return MatchResult(
            name=name,
            value=value.strip() if value else name,
            comment=comment or None,
            extra=m.group(extra_group) if extra_group is not None else None,
        )

    logger.debug("Built matcher for pattern %r", regex.pattern)
    return match
