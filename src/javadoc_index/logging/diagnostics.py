"""Structured diagnostics for index builds."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import TextIO

LEVELS = ("debug", "info", "warning", "error")


@dataclass(slots=True, frozen=True)
class DiagnosticEvent:
    """Single diagnostic emitted during a run."""

    timestamp: str
    level: str
    code: str
    message: str
    metadata: dict[str, object] = field(default_factory=dict)


def utc_timestamp() -> str:
    """Return an ISO-8601 UTC timestamp."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DiagnosticLogger:
    """Writes human-readable diagnostics and an optional JSONL run log."""

    def __init__(
        self,
        stream: TextIO,
        jsonl_path: Path | None = None,
        verbose: bool = False,
    ) -> None:
        self._stream = stream
        self._jsonl_path = jsonl_path
        self._verbose = verbose
        self._counts: dict[str, int] = {level: 0 for level in LEVELS}
        if self._jsonl_path is not None:
            self._jsonl_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def jsonl_path(self) -> Path | None:
        """Return on-disk JSONL path, if any."""
        return self._jsonl_path

    def counts(self) -> dict[str, int]:
        """Return number of events emitted per level."""
        return dict(self._counts)

    def emit(self, level: str, code: str, message: str, **metadata: object) -> DiagnosticEvent:
        """Record one event."""
        if level not in LEVELS:
            raise ValueError(f"Unknown diagnostic level: {level}")
        event = DiagnosticEvent(
            timestamp=utc_timestamp(),
            level=level,
            code=code,
            message=message,
            metadata=dict(sorted(metadata.items())),
        )
        self._counts[level] += 1
        if level in ("warning", "error") or self._verbose:
            self._stream.write(f"{level}: {message}\n")
            self._stream.flush()
        if self._jsonl_path is not None:
            with self._jsonl_path.open("a", encoding="utf-8") as handle:
                handle.write(json.dumps(asdict(event), sort_keys=True))
                handle.write("\n")
        return event

    def debug(self, code: str, message: str, **metadata: object) -> DiagnosticEvent:
        return self.emit("debug", code, message, **metadata)

    def info(self, code: str, message: str, **metadata: object) -> DiagnosticEvent:
        return self.emit("info", code, message, **metadata)

    def warning(self, code: str, message: str, **metadata: object) -> DiagnosticEvent:
        return self.emit("warning", code, message, **metadata)

    def error(self, code: str, message: str, **metadata: object) -> DiagnosticEvent:
        return self.emit("error", code, message, **metadata)
