"""Batch configuration loaded from a JSON file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from enum_sync.errors import ConfigError, MisconfiguredJobError
from enum_sync.matcher import get_matcher, pattern_matcher
from enum_sync.models import Matcher, ParseJob

logger = logging.getLogger(__name__)


class JobConfig(BaseModel):
    src_file_name: str
    src_directory: str
    enum_name: str
    description_enum_name: Optional[str] = None
    comment: Optional[str] = None
    skip: bool = False

    # Either a built-in matcher name or a custom pattern
    matcher: Optional[str] = None
    pattern: Optional[str] = None
    name_group: int = 1
    value_group: Optional[int] = None
    comment_group: Optional[int] = None
    description_pattern: Optional[str] = None
    description_group: int = 1

    @model_validator(mode="after")
    def _one_strategy(self) -> "JobConfig":
        if bool(self.matcher) == bool(self.pattern):
            raise ValueError(
                f"job {self.enum_name!r} must set exactly one of 'matcher' or 'pattern'"
            )
        if not self.enum_name.isidentifier():
            raise ValueError(f"enum_name {self.enum_name!r} is not a valid identifier")
        if self.description_enum_name and not self.description_enum_name.isidentifier():
            raise ValueError(
                f"description_enum_name {self.description_enum_name!r} is not a valid identifier"
            )
        return self

    def build_matcher(self) -> Matcher:
        if self.matcher:
            return get_matcher(self.matcher)
        return pattern_matcher(
            self.pattern,
            name_group=self.name_group,
            value_group=self.value_group,
            comment_group=self.comment_group,
            description_pattern=self.description_pattern,
            description_group=self.description_group,
        )

    def to_job(self, base_dir: Path) -> ParseJob:
        if not self.src_directory.strip():
            raise MisconfiguredJobError(
                f"No source directory specified for {self.src_file_name} (job {self.enum_name!r})"
            )
        return ParseJob(
            src_file_name=self.src_file_name,
            src_directory=base_dir / self.src_directory,
            enum_name=self.enum_name,
            matcher=self.build_matcher(),
            description_enum_name=self.description_enum_name,
            comment=self.comment,
            skip=self.skip,
        )


class BatchConfig(BaseModel):
    dest_dir: str = "generated"
    extension: str = "ts"
    index: bool = True
    extra_enums: list[str] = []
    allow_duplicates: bool = False
    jobs: list[JobConfig] = []

    # Directory relative paths resolve against; set by load_config
    base_dir: Path = Path(".")

    @field_validator("extra_enums")
    @classmethod
    def _extra_identifiers(cls, names: list[str]) -> list[str]:
        bad = [n for n in names if not n.isidentifier()]
        if bad:
            raise ValueError(f"extra_enums are not valid identifiers: {', '.join(bad)}")
        return names

    @property
    def dest_path(self) -> Path:
        return self.base_dir / self.dest_dir

    def build_jobs(self) -> list[ParseJob]:
        return [job.to_job(self.base_dir) for job in self.jobs]


def load_config(path: str | Path) -> BatchConfig:
    """Read and validate a batch configuration file."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be an object")
    raw["base_dir"] = str(path.resolve().parent / raw.get("base_dir", "."))

    try:
        config = BatchConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}:\n{e}") from e

    logger.debug("Loaded %d job(s) from %s", len(config.jobs), path)
    return config
