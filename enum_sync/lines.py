"""Split file content into lines regardless of the platform it was saved on."""

from __future__ import annotations

import re

_EOL_RE = re.compile(r"\r\n|\r|\n")


def split_lines(content: str | None, ignore_empty_lines: bool = True) -> list[str]:
    """Split on ``\\r\\n``, ``\\r`` or ``\\n``; mixed endings are fine.

    Only exactly-empty lines are dropped when ``ignore_empty_lines`` is set,
    whitespace-only lines are kept.
    """
    if not content:
        return []
    lines = _EOL_RE.split(content)
    if ignore_empty_lines:
        return [line for line in lines if line != ""]
    return lines
