"""Index build orchestration: resolve inputs, parse pages, aggregate entries."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from bs4 import BeautifulSoup

from javadoc_index.config import ToolConfig
from javadoc_index.extract import MatcherRegistry, build_matcher_registry
from javadoc_index.index.aggregator import SymbolIndex
from javadoc_index.index.emacs import render_index
from javadoc_index.index.models import IndexEmission
from javadoc_index.index.normalize import normalize_link
from javadoc_index.index.prefixes import PrefixClassifier
from javadoc_index.logging import DiagnosticLogger
from javadoc_index.paths import ResolvedFiles, read_index_file_list, resolve_entries

HTML_PARSER = "lxml"


@dataclass(slots=True, frozen=True)
class FileStats:
    """Per-file extraction counters."""

    path: str
    raw_links: int
    remote_links: int
    prefixes: tuple[str, ...]


def parse_document(path: str) -> BeautifulSoup:
    """Parse one index page as UTF-8 HTML."""
    with open(path, "rb") as handle:
        return BeautifulSoup(handle, HTML_PARSER, from_encoding="utf-8")


class IndexBuilder:
    """Runs one index build over a sequence of documentation index pages."""

    def __init__(
        self,
        config: ToolConfig,
        logger: DiagnosticLogger,
        matchers: MatcherRegistry | None = None,
    ) -> None:
        self._config = config
        self._logger = logger
        if matchers is None:
            matchers = build_matcher_registry(config.extract)
        self._matchers = matchers
        self._index = SymbolIndex()
        self._prefixes = PrefixClassifier(config.layout)
        self._files: list[str] = []

    @property
    def symbol_index(self) -> SymbolIndex:
        return self._index

    @property
    def files(self) -> tuple[str, ...]:
        """Files absorbed so far, in processing order."""
        return tuple(self._files)

    def resolve_inputs(self, arguments: Sequence[str]) -> ResolvedFiles:
        """Resolve CLI arguments, or the configured list file when there are none."""
        if arguments:
            entries = list(arguments)
        else:
            self._logger.debug(
                "read_files_list",
                f"Reading index file list {self._config.files_list}",
                path=str(self._config.files_list),
            )
            entries = read_index_file_list(self._config.files_list)
        resolved = resolve_entries(entries)
        for skipped in resolved.skipped:
            self._logger.warning("missing_input", skipped.reason, entry=skipped.entry)
        return resolved

    def add_file(self, path: str) -> FileStats:
        """Parse one page and absorb its entries."""
        self._logger.debug("parse_file", f"About to parse: {path}", path=path)
        document = parse_document(path)
        directory = os.path.dirname(os.path.abspath(path))
        added_prefixes = self._prefixes.add_for_file(path)
        raw_links = self._matchers.extract(document, source=path)
        remote = 0
        for link in raw_links:
            entry = normalize_link(link.label, link.href, directory)
            if entry is None:
                remote += 1
                continue
            self._index.insert(entry)
        self._files.append(path)
        return FileStats(
            path=path,
            raw_links=len(raw_links),
            remote_links=remote,
            prefixes=added_prefixes,
        )

    def emit(self) -> IndexEmission:
        return self._index.emit(self._prefixes.prefixes())

    def render(self) -> str:
        """Render the Emacs Lisp index for every file absorbed so far."""
        return render_index(self.emit(), self._files)


def build_index_text(
    config: ToolConfig,
    logger: DiagnosticLogger,
    arguments: Sequence[str] = (),
) -> str:
    """Run a complete build and return the rendered index text."""
    builder = IndexBuilder(config=config, logger=logger)
    resolved = builder.resolve_inputs(arguments)
    for path in resolved.paths:
        stats = builder.add_file(path)
        logger.debug(
            "file_indexed",
            f"Indexed {stats.path}: {stats.raw_links} links, {stats.remote_links} remote",
            path=stats.path,
            raw_links=stats.raw_links,
            remote_links=stats.remote_links,
            prefixes=list(stats.prefixes),
        )
    logger.info(
        "index_built",
        f"Indexed {len(builder.symbol_index)} symbols from {len(builder.files)} files",
        symbols=len(builder.symbol_index),
        files=len(builder.files),
    )
    return builder.render()


def write_index(text: str, output: Path | None, stream: TextIO) -> None:
    """Write rendered index text to output, or to stream when output is None."""
    if output is None:
        stream.write(text)
        stream.flush()
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
