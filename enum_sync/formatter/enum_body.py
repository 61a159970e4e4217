"""Render matched members into TypeScript enum bodies."""

from __future__ import annotations

import logging
import math
import re
from typing import Iterable

from enum_sync.errors import DuplicateMemberError
from enum_sync.lines import split_lines
from enum_sync.models import DescriptionFunc, EnumBodies, Matcher, MatchResult

logger = logging.getLogger(__name__)

INDENT = "    "
TAB_WIDTH = 4
EOL = "\n"

_UNESCAPED_QUOTE_RE = re.compile(r"(?<!\\)((?:\\\\)*)'")


def alignment_column(max_len: int) -> int:
    """Column where trailing comments start: at least one full tab stop past ``max_len``."""
    return math.ceil(max_len / TAB_WIDTH + 1) * TAB_WIDTH


def quote(text: str) -> str:
    """Wrap text in a single-quoted TypeScript string literal."""
    return "'" + _UNESCAPED_QUOTE_RE.sub(r"\1\\'", text) + "'"


def member_line(name: str, value: str) -> str:
    return f"{INDENT}{name} = {quote(value)},"


def match_lines(
    content: str | None,
    matcher: Matcher,
    allow_duplicates: bool = False,
) -> list[MatchResult]:
    """Run ``matcher`` over every line of ``content``; misses are skipped."""
    results: list[MatchResult] = []
    seen: set[str] = set()
    for line in split_lines(content):
        res = matcher(line)
        if res is None:
            continue
        if res.name in seen and not allow_duplicates:
            raise DuplicateMemberError(res.name)
        seen.add(res.name)
        results.append(res)
    logger.debug("Matched %d member(s)", len(results))
    return results


def align_comments(rows: Iterable[tuple[str, str | None]]) -> list[str]:
    """Pad each line to a shared column and append ``// comment`` where present."""
    rows = list(rows)
    if not rows:
        return []
    column = alignment_column(max(len(line) for line, _ in rows))
    return [
        line.ljust(column) + (f"// {comment}" if comment else "")
        for line, comment in rows
    ]


def get_enums(
    content: str | None,
    matcher: Matcher,
    allow_duplicates: bool = False,
) -> EnumBodies:
    """Build the value enum body.

    Comments are column-aligned only when at least one member has one.
    """
    results = match_lines(content, matcher, allow_duplicates)
    rows = [(member_line(r.name, r.value), r.comment) for r in results]

    if any(comment for _, comment in rows):
        lines = align_comments(rows)
    else:
        lines = [line for line, _ in rows]
    return EnumBodies(values=EOL.join(lines), member_count=len(results))


def describe(result: MatchResult, description_func: DescriptionFunc | None = None) -> str:
    """Human-readable text for a member, falling back to its name."""
    if description_func is not None and result.extra is not None:
        text = description_func(result.extra)
        if text:
            return text
    return result.comment or result.name


def get_enums_with_description(
    content: str | None,
    matcher: Matcher,
    description_func: DescriptionFunc | None = None,
    allow_duplicates: bool = False,
) -> EnumBodies:
    """Build the value enum body and a parallel description enum body.

    Both enums are keyed by the member value, in source order.
    """
    results = match_lines(content, matcher, allow_duplicates)
    rows: list[tuple[str, str]] = []
    descriptions: list[str] = []
    for r in results:
        text = describe(r, description_func)
        rows.append((member_line(r.value, r.value), text))
        descriptions.append(member_line(r.value, text))

    return EnumBodies(
        values=EOL.join(align_comments(rows)),
        descriptions=EOL.join(descriptions),
        member_count=len(results),
    )
