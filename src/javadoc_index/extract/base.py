"""Matcher protocol and raw extraction records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from bs4 import BeautifulSoup, Tag


@dataclass(slots=True, frozen=True)
class RawLink:
    """A symbol label and link target as found in index markup."""

    label: str
    href: str
    matcher: str


def anchor_link(anchor: Tag, matcher: str) -> RawLink:
    """Build a raw link from an anchor's inner markup and href."""
    href = anchor.get("href", "")
    if not isinstance(href, str):
        href = " ".join(href)
    return RawLink(label=anchor.decode_contents(), href=href, matcher=matcher)


class ElementMatcher(Protocol):
    """Protocol implemented by markup dialect matchers."""

    name: str

    def matches(self, document: BeautifulSoup, source: str) -> list[RawLink]:
        """Return raw links for every element of this dialect in document order."""
