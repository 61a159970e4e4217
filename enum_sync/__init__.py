"""enum-sync: generate TypeScript enums from enum declarations in other sources."""

__version__ = "0.1.0"
