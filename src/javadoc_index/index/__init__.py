"""Symbol index construction and rendering."""

from .aggregator import SymbolIndex
from .builder import FileStats, IndexBuilder, build_index_text, parse_document, write_index
from .emacs import escape_string, render_index
from .models import IndexEmission, IndexEntry
from .normalize import clean_label, file_reference, is_network_link, normalize_link
from .prefixes import PrefixClassifier

__all__ = [
    "FileStats",
    "IndexBuilder",
    "IndexEmission",
    "IndexEntry",
    "PrefixClassifier",
    "SymbolIndex",
    "build_index_text",
    "clean_label",
    "escape_string",
    "file_reference",
    "is_network_link",
    "normalize_link",
    "parse_document",
    "render_index",
    "write_index",
]
