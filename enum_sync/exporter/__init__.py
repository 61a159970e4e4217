"""Exporter layer: file templates, discovery and writing."""

from enum_sync.exporter.content import (
    BANNER,
    create_comment_content,
    create_description_content,
    create_file_content,
    create_index_content,
)
from enum_sync.exporter.files import find_file_path, read_file, write_file

__all__ = [
    "BANNER",
    "create_comment_content",
    "create_description_content",
    "create_file_content",
    "create_index_content",
    "find_file_path",
    "read_file",
    "write_file",
]
