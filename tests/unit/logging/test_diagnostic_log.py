from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from javadoc_index.logging import DiagnosticLogger


def test_warnings_are_written_and_debug_is_hidden_by_default() -> None:
    stream = io.StringIO()
    logger = DiagnosticLogger(stream=stream)

    logger.debug("parse_file", "About to parse: a.html")
    logger.warning("missing_input", "Didn't find b.html", entry="b.html")

    assert stream.getvalue() == "warning: Didn't find b.html\n"
    assert logger.counts() == {"debug": 1, "info": 0, "warning": 1, "error": 0}


def test_verbose_logger_writes_debug_events() -> None:
    stream = io.StringIO()
    logger = DiagnosticLogger(stream=stream, verbose=True)

    logger.debug("parse_file", "About to parse: a.html")

    assert stream.getvalue() == "debug: About to parse: a.html\n"


def test_jsonl_log_schema(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "run.jsonl"
    logger = DiagnosticLogger(stream=io.StringIO(), jsonl_path=log_path)

    logger.warning("missing_input", "Didn't find b.html", entry="b.html")
    logger.error("ConfigurationError", "glob pattern contains no directory slash")

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    event = json.loads(lines[0])
    assert set(event.keys()) == {"code", "level", "message", "metadata", "timestamp"}
    assert event["level"] == "warning"
    assert event["code"] == "missing_input"
    assert event["metadata"] == {"entry": "b.html"}
    assert event["timestamp"].endswith("Z")
    assert json.loads(lines[1])["level"] == "error"


def test_unknown_level_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown diagnostic level"):
        DiagnosticLogger(stream=io.StringIO()).emit("fatal", "x", "y")
