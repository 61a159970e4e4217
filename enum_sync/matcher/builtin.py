"""Built-in line matchers for Java-style enum constants."""

from __future__ import annotations

import re

from enum_sync.models import MatchResult

# NAME -> [1: NAME]
NAME_RE = re.compile(r"^\s*?([A-Z0-9_]+)[;,]?$")
# NAME(...) -> [1: NAME]
NAME_ARGS_RE = re.compile(r"([A-Z0-9_]+)\s*\([^)]*\)")
# NAME("COMMENT", ...) -> [1: NAME, 2: quote, 3: COMMENT]
NAME_COMMENT_RE = re.compile(r"([A-Z0-9_]+)\s*\((['\"])(.*?)(?<!\\)\2")
# NAME(VALUE, "COMMENT", ...) -> [1: NAME, 2: VALUE, 3: quote, 4: COMMENT]
NAME_VALUE_COMMENT_RE = re.compile(r"([A-Z0-9_]+)\s*\((.+),\s*(['\"])(.*?)(?<!\\)\3")
# NAME("COMMENT", VALUE, ...) -> [1: NAME, 2: quote, 3: COMMENT, 4: VALUE]
NAME_COMMENT_VALUE_RE = re.compile(r"([A-Z0-9_]+)\s*\((['\"])(.*?)(?<!\\)\2,\s*(.+)")


def by_name_only(line: str) -> MatchResult | None:
    """Match a bare constant: ``NAME``, ``NAME,`` or ``NAME;``."""
    m = NAME_RE.search(line)
    if not m:
        return None
    return MatchResult(name=m.group(1), value=m.group(1))


def by_name_with_args(line: str) -> MatchResult | None:
    """Match ``NAME(...)``, ignoring the arguments."""
    m = NAME_ARGS_RE.search(line)
    if not m:
        return None
    return MatchResult(name=m.group(1), value=m.group(1))


def by_name_with_quoted_comment(line: str) -> MatchResult | None:
    """Match ``NAME("comment", ...)``."""
    m = NAME_COMMENT_RE.search(line)
    if not m:
        return None
    return MatchResult(name=m.group(1), value=m.group(1), comment=m.group(3))


def by_name_value_quoted_comment(line: str) -> MatchResult | None:
    """Match ``NAME(value, "comment", ...)``; the value argument is not exposed."""
    m = NAME_VALUE_COMMENT_RE.search(line)
    if not m:
        return None
    return MatchResult(name=m.group(1), value=m.group(1), comment=m.group(4) or None)


def by_name_quoted_comment_value(line: str) -> MatchResult | None:
    """Match ``NAME("comment", value, ...)``; the value argument is not exposed."""
    m = NAME_COMMENT_VALUE_RE.search(line)
    if not m:
        return None
    return MatchResult(name=m.group(1), value=m.group(1), comment=m.group(3) or None)
