"""Runtime matcher registry construction."""

from __future__ import annotations

from javadoc_index.config import ExtractConfig
from javadoc_index.extract.matchers import (
    MemberNameAnchorMatcher,
    MemberNameSpanMatcher,
    TitleDescriptorMatcher,
)
from javadoc_index.extract.registry import MatcherRegistry


def build_matcher_registry(config: ExtractConfig) -> MatcherRegistry:
    """Build matcher registry from effective config."""
    registry = MatcherRegistry()
    registry.register(MemberNameSpanMatcher())
    registry.register(MemberNameAnchorMatcher())
    registry.register(TitleDescriptorMatcher(config.title_descriptors))
    return registry
