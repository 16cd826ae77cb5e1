"""Classification of documentation roots into ignorable path prefixes."""

from __future__ import annotations

import os
from pathlib import Path

from javadoc_index.config import LayoutConfig
from javadoc_index.errors import MalformedDocumentationError
from javadoc_index.index.normalize import FILE_SCHEME


class PrefixClassifier:
    """Owns the set of installation roots the editor should hide.

    Documentation sets nest their pages differently: per-letter index pages
    live under an ``index-files`` directory, some vendors add a namespace
    directory, and the modular JDK keeps every module in its own directory.
    Each input file contributes at most one root, or one root per module for
    a JDK tree.
    """

    def __init__(self, layout: LayoutConfig) -> None:
        self._layout = layout
        self._prefixes: set[str] = set()

    def add_for_file(self, index_file: str) -> tuple[str, ...]:
        """Classify the directory containing index_file and record its prefixes."""
        directory = Path(os.path.abspath(index_file)).parent
        added = tuple(sorted(self.classify(directory, source=index_file)))
        self._prefixes.update(added)
        return added

    def classify(self, directory: Path, source: str) -> list[str]:
        """Return the prefixes for one documentation directory."""
        root = directory
        if not root.name:
            raise MalformedDocumentationError(reason=f"Null parent dir for {source}")
        if root.name == self._layout.index_files_dir:
            if root.parent == root:
                raise MalformedDocumentationError(reason=f"Null parent dir for {source}")
            root = root.parent

        for vendor_dir in self._layout.vendor_subdirectories:
            candidate = root / vendor_dir
            if candidate.is_dir():
                root = candidate
                break

        if not (root / self._layout.module_marker).exists():
            return [FILE_SCHEME + str(root)]

        prefixes: list[str] = []
        with os.scandir(root) as listing:
            for entry in listing:
                if entry.is_dir() and entry.name.startswith(self._layout.module_prefixes):
                    prefixes.append(FILE_SCHEME + entry.path)
        return prefixes

    def prefixes(self) -> tuple[str, ...]:
        """Return recorded prefixes in ascending order."""
        return tuple(sorted(self._prefixes))
