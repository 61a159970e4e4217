"""Data models for the enum-sync pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable


@dataclass(frozen=True)
class MatchResult:
    """One enum member extracted from a source line."""
    name: str
    value: str
    comment: str | None = None
    extra: str | None = None  # auxiliary group for description extraction


Matcher = Callable[[str], "MatchResult | None"]
DescriptionFunc = Callable[[str], "str | None"]


@dataclass(frozen=True)
class ParseJob:
    """One source file mapped to one generated enum file."""
    src_file_name: str
    src_directory: str | Path
    enum_name: str
    matcher: Matcher
    description_enum_name: str | None = None
    comment: str | None = None
    description_func: DescriptionFunc | None = None
    skip: bool = False

    @property
    def has_description(self) -> bool:
        return bool(self.description_enum_name)


@dataclass
class EnumBodies:
    """Rendered member text for the value enum and, optionally, the description enum."""
    values: str
    descriptions: str | None = None
    member_count: int = 0


@dataclass
class BatchResult:
    """Result from running a batch of jobs."""
    output_dir: Path
    files_created: list[Path] = field(default_factory=list)
    generated: list[str] = field(default_factory=list)
    ignored: list[str] = field(default_factory=list)
    index_path: Path | None = None
