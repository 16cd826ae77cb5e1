"""Matchers for the index page dialects emitted by javadoc versions."""

from __future__ import annotations

from bs4 import BeautifulSoup

from javadoc_index.errors import MalformedDocumentationError
from javadoc_index.extract.base import RawLink, anchor_link


class MemberNameSpanMatcher:
    """Older javadoc: <span class="memberNameLink"><a href=...>...</a></span>."""

    name = "member_name_span"
    selector = "span[class=memberNameLink]"

    def matches(self, document: BeautifulSoup, source: str) -> list[RawLink]:
        links: list[RawLink] = []
        for element in document.select(self.selector):
            anchor = element.select_one("a[href]")
            if anchor is None:
                raise MalformedDocumentationError(
                    reason=f"In {source}, no <a href=...> in: {element}",
                    hint=f"parent = {element.parent}",
                )
            links.append(anchor_link(anchor, self.name))
        return links


class MemberNameAnchorMatcher:
    """Newer javadoc: <a class="member-name-link" href=...>...</a>."""

    name = "member_name_anchor"
    selector = "a[class=member-name-link]"

    def matches(self, document: BeautifulSoup, source: str) -> list[RawLink]:
        _ = source
        return [anchor_link(anchor, self.name) for anchor in document.select(self.selector)]


class TitleDescriptorMatcher:
    """Type links whose title reads like "class in java.util"."""

    name = "title_descriptor"
    selector = "a[title]"

    def __init__(self, descriptors: tuple[str, ...]) -> None:
        self.descriptors = descriptors

    def matches(self, document: BeautifulSoup, source: str) -> list[RawLink]:
        _ = source
        links: list[RawLink] = []
        for anchor in document.select(self.selector):
            title = anchor.get("title", "")
            if isinstance(title, str) and title.startswith(self.descriptors):
                links.append(anchor_link(anchor, self.name))
        return links
