"""Symbol to reference-set accumulation with deterministic emission."""

from __future__ import annotations

from collections.abc import Iterable

from javadoc_index.index.models import IndexEmission, IndexEntry


class SymbolIndex:
    """Maps symbol text to the set of documentation references for it."""

    def __init__(self) -> None:
        self._refs: dict[str, set[str]] = {}

    def insert(self, entry: IndexEntry) -> None:
        """Add entry.reference under entry.symbol; repeated pairs collapse."""
        self._refs.setdefault(entry.symbol, set()).add(entry.reference)

    def references(self, symbol: str) -> tuple[str, ...]:
        """Return the sorted references for one symbol."""
        return tuple(sorted(self._refs.get(symbol, ())))

    def __len__(self) -> int:
        return len(self._refs)

    def emit(self, ignored_prefixes: Iterable[str] = ()) -> IndexEmission:
        """Return keys in descending order and prefixes in ascending order.

        The editor tries candidates in list order, so a symbol must come
        before any shorter symbol it extends.
        """
        refs = tuple(
            (symbol, tuple(sorted(self._refs[symbol])))
            for symbol in sorted(self._refs, reverse=True)
        )
        return IndexEmission(refs=refs, ignored_prefixes=tuple(sorted(set(ignored_prefixes))))
