"""Exceptions raised by enum-sync."""

from __future__ import annotations


class EnumSyncError(Exception):
    """Base class for fatal enum-sync errors."""


class SourceNotFoundError(EnumSyncError):
    """The source file of a job does not exist under its search root."""

    def __init__(self, file_name: str, src_directory: object):
        self.file_name = file_name
        self.src_directory = src_directory
        super().__init__(f"File {file_name} is not found in {src_directory}")


class MisconfiguredJobError(EnumSyncError):
    """A job cannot run as configured (no search root, unknown matcher, bad pattern)."""


class DuplicateMemberError(EnumSyncError):
    """Two members of one source file share a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Duplicate enum member: {name}")


class ConfigError(EnumSyncError):
    """The batch configuration file is missing or invalid."""
