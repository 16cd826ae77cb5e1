"""Canonical symbol text and file references for extracted links."""

from __future__ import annotations

import os
import re
from typing import Final

from javadoc_index.index.models import IndexEntry

FILE_SCHEME: Final[str] = "file:"
NETWORK_SCHEMES: Final[tuple[str, ...]] = ("http:", "https:")

_CODE_TAG_RE: Final[re.Pattern[str]] = re.compile(r"</?code>")
_SPAN_OPEN_RE: Final[re.Pattern[str]] = re.compile(r'<span class="[^"]*">')
_SPAN_CLOSE_RE: Final[re.Pattern[str]] = re.compile(r"</span>")
_TAG_MARKER_RE: Final[re.Pattern[str]] = re.compile(r"@[a-zA-Z.]+ ")
_LEADING_AT_RE: Final[re.Pattern[str]] = re.compile(r"^@")


def is_network_link(href: str) -> bool:
    """Return True when href points at a remote web page."""
    return href.lower().startswith(NETWORK_SCHEMES)


def clean_label(label: str) -> str:
    """Strip markup from an anchor's inner HTML, leaving the symbol text."""
    text = label.replace("&lt;", "<").replace("&gt;", ">")
    text = _CODE_TAG_RE.sub("", text)
    text = _SPAN_OPEN_RE.sub("", text)
    text = _SPAN_CLOSE_RE.sub("", text)
    text = _TAG_MARKER_RE.sub("", text)
    return _LEADING_AT_RE.sub("", text)


def file_reference(href: str, directory: str) -> str:
    """Resolve href against directory into an absolute file: reference."""
    location = os.path.normpath(os.path.join(os.path.abspath(directory), href))
    reference = FILE_SCHEME + location
    reference = reference.replace("(", "-").replace(")", "-")
    return _TAG_MARKER_RE.sub("", reference)


def normalize_link(label: str, href: str, directory: str) -> IndexEntry | None:
    """Return the canonical entry for a link, or None for remote links."""
    if is_network_link(href):
        return None
    return IndexEntry(symbol=clean_label(label), reference=file_reference(href, directory))
