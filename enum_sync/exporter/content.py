"""Templates for generated enum files and the index file."""

from __future__ import annotations

from typing import Iterable

from enum_sync.lines import split_lines

BANNER = (
    "/**\n"
    " * IMPORTANT NOTE!\n"
    " * This file is generated automatically\n"
    " * Any changes will be overwritten\n"
    " */"
)


def create_comment_content(comment: str | None) -> str:
    """Render free text as a block comment, or nothing when empty."""
    if not comment:
        return ""
    lines = ["/**"]
    for line in split_lines(comment, ignore_empty_lines=False):
        lines.append(f" * {line}".rstrip())
    lines.append(" */")
    return "\n".join(lines)


def _enum_block(enum_name: str, body: str) -> str:
    if not body:
        return f"export enum {enum_name} {{\n}}"
    return f"export enum {enum_name} {{\n{body}\n}}"


def create_description_content(description_name: str | None, body: str | None) -> str:
    """Render the description enum, or nothing when it has no name."""
    if not description_name:
        return ""
    return _enum_block(description_name, body or "")


def create_file_content(
    enum_name: str,
    enum_content: str,
    comment_content: str = "",
    description_content: str = "",
) -> str:
    """Assemble a generated enum file: banner, doc comment, enum, description enum."""
    sections = [BANNER]
    if comment_content:
        sections.append(comment_content + "\n" + _enum_block(enum_name, enum_content))
    else:
        sections.append(_enum_block(enum_name, enum_content))
    if description_content:
        sections.append(description_content)
    return "\n\n".join(sections) + "\n"


def create_index_content(enum_names: Iterable[str], extra_enums: Iterable[str] = ()) -> str:
    """Re-export every generated enum, then every extra enum not already listed."""
    names: list[str] = []
    for name in enum_names:
        if name not in names:
            names.append(name)
    for name in extra_enums:
        if name not in names:
            names.append(name)

    lines = [BANNER, ""]
    lines.extend(f"export * from './{name}';" for name in names)
    return "\n".join(lines) + "\n"
