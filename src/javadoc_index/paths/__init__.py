"""Index file discovery."""

from .resolver import (
    ResolvedFiles,
    SkippedEntry,
    expand_wildcard,
    read_index_file_list,
    resolve_entries,
)

__all__ = [
    "ResolvedFiles",
    "SkippedEntry",
    "expand_wildcard",
    "read_index_file_list",
    "resolve_entries",
]
