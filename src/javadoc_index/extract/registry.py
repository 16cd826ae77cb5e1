"""Matcher registry with deterministic evaluation order."""

from __future__ import annotations

from dataclasses import dataclass, field

from bs4 import BeautifulSoup

from javadoc_index.extract.base import ElementMatcher, RawLink


@dataclass(slots=True)
class MatcherRegistry:
    """Ordered set of dialect matchers whose results are unioned."""

    _matchers: list[ElementMatcher] = field(default_factory=list)

    def register(self, matcher: ElementMatcher) -> None:
        """Register a matcher in deterministic insertion order."""
        self._matchers.append(matcher)

    def extract(self, document: BeautifulSoup, source: str) -> list[RawLink]:
        """Run every matcher against the document, in registration order."""
        links: list[RawLink] = []
        for matcher in self._matchers:
            links.extend(matcher.matches(document, source))
        return links

    def names(self) -> tuple[str, ...]:
        """Return registered matcher names in deterministic order."""
        return tuple(matcher.name for matcher in self._matchers)
