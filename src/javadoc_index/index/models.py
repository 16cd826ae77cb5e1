"""Typed models for index state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class IndexEntry:
    """One symbol and the documentation location that describes it."""

    symbol: str
    reference: str


@dataclass(slots=True, frozen=True)
class IndexEmission:
    """Deterministic snapshot of a finished index."""

    refs: tuple[tuple[str, tuple[str, ...]], ...]
    ignored_prefixes: tuple[str, ...]
