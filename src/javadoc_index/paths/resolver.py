"""Deterministic expansion of literal and wildcard index file entries."""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from javadoc_index.errors import ConfigurationError

WILDCARD = "*"


@dataclass(slots=True, frozen=True)
class SkippedEntry:
    """An entry dropped from the file list, with the reason it was dropped."""

    entry: str
    reason: str


@dataclass(slots=True, frozen=True)
class ResolvedFiles:
    """Sorted, deduplicated existing files plus the entries that were skipped."""

    paths: tuple[str, ...]
    skipped: tuple[SkippedEntry, ...]


def read_index_file_list(list_path: Path) -> list[str]:
    """Read entries from a list file, ignoring blank lines and '#' comments."""
    try:
        with list_path.open("r", encoding="utf-8") as handle:
            lines = handle.readlines()
    except FileNotFoundError as exc:
        raise ConfigurationError(
            reason=f"File not found: {list_path}",
            hint="Pass index files as arguments or create the list file.",
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(reason=f"Trouble while reading file {list_path}: {exc}") from exc
    entries: list[str] = []
    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def resolve_entries(entries: Iterable[str]) -> ResolvedFiles:
    """Expand entries into the sorted list of files that exist on disk."""
    found: set[str] = set()
    skipped: list[SkippedEntry] = []
    for entry in entries:
        if WILDCARD not in entry:
            if os.path.exists(entry):
                found.add(entry)
            else:
                skipped.append(SkippedEntry(entry=entry, reason=f"Didn't find {entry}"))
            continue
        matches, skip = expand_wildcard(entry)
        if skip is not None:
            skipped.append(skip)
            continue
        found.update(matches)
    return ResolvedFiles(paths=tuple(sorted(found)), skipped=tuple(skipped))


def expand_wildcard(entry: str) -> tuple[list[str], SkippedEntry | None]:
    """Glob the final path component of an entry within its directory."""
    wildcard_pos = entry.index(WILDCARD)
    slash_pos = entry.rfind("/", 0, wildcard_pos)
    if slash_pos == -1:
        raise ConfigurationError(
            reason=f"glob pattern contains no directory slash: {entry}",
            hint="Write wildcard entries as <dir>/<pattern>, e.g. docs/api/index-files/*.html.",
        )
    dir_name = entry[:slash_pos] or "/"
    pattern = entry[slash_pos + 1 :]
    if "/" in pattern:
        return [], SkippedEntry(
            entry=entry,
            reason=f"Wildcards in directory names are not supported: {entry}",
        )
    if not os.path.isdir(dir_name):
        return [], SkippedEntry(entry=entry, reason=f"Didn't find {dir_name}")
    matches: list[str] = []
    with os.scandir(dir_name) as listing:
        for item in listing:
            if fnmatch.fnmatchcase(item.name, pattern):
                matches.append(os.path.join(dir_name, item.name))
    matches.sort()
    return matches, None
