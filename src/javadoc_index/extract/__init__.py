"""Markup extraction for javadoc index pages."""

from .base import ElementMatcher, RawLink, anchor_link
from .matchers import MemberNameAnchorMatcher, MemberNameSpanMatcher, TitleDescriptorMatcher
from .registry import MatcherRegistry
from .runtime import build_matcher_registry

__all__ = [
    "ElementMatcher",
    "MatcherRegistry",
    "MemberNameAnchorMatcher",
    "MemberNameSpanMatcher",
    "RawLink",
    "TitleDescriptorMatcher",
    "anchor_link",
    "build_matcher_registry",
]
