"""Enum body formatting."""

from enum_sync.formatter.enum_body import (
    alignment_column,
    get_enums,
    get_enums_with_description,
    match_lines,
)

__all__ = ["alignment_column", "get_enums", "get_enums_with_description", "match_lines"]
