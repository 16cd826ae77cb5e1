"""Command-line entrypoint for building the javadoc-lookup index."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from javadoc_index.config import CliOverrides, load_effective_config
from javadoc_index.errors import IndexBuildError
from javadoc_index.index import build_index_text, write_index
from javadoc_index.logging import DiagnosticLogger

EXIT_OK = 0
EXIT_FATAL = 1


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for index builds."""
    parser = argparse.ArgumentParser(
        prog="javadoc-index",
        description=(
            "Read javadoc index-all.html files and print an index that the Emacs "
            "function javadoc-lookup can use. With no files, read the list file "
            "(default ~/.javadoc-index-files)."
        ),
    )
    parser.add_argument("files", nargs="*", help="index-all.html or index-files/*.html pages")
    parser.add_argument("--config", required=False, default=None, help="TOML settings file")
    parser.add_argument(
        "--index-files-list",
        required=False,
        default=None,
        help="file listing index pages, one per line; '*' globs the last component",
    )
    parser.add_argument("--output", required=False, default=None, help="write index to a file")
    parser.add_argument("--log-file", required=False, default=None, help="append JSONL diagnostics")
    parser.add_argument("--verbose", action="store_true", help="report progress on stderr")
    return parser


def main(
    argv: list[str] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Entrypoint for the javadoc-index process."""
    out_stream = stdout if stdout is not None else sys.stdout
    err_stream = stderr if stderr is not None else sys.stderr
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logger = DiagnosticLogger(
        stream=err_stream,
        jsonl_path=Path(args.log_file) if args.log_file is not None else None,
        verbose=args.verbose,
    )
    overrides = CliOverrides(
        files_list=(
            Path(args.index_files_list).expanduser()
            if args.index_files_list is not None
            else None
        ),
    )
    try:
        config = load_effective_config(
            config_path=Path(args.config).expanduser() if args.config is not None else None,
            overrides=overrides,
        )
        logger.debug("config_loaded", "Effective config loaded", **config.to_public_dict())
        text = build_index_text(config=config, logger=logger, arguments=args.files)
        write_index(
            text,
            output=Path(args.output) if args.output is not None else None,
            stream=out_stream,
        )
    except IndexBuildError as exc:
        logger.error(type(exc).__name__, exc.reason, hint=exc.hint)
        if exc.hint:
            err_stream.write(f"{exc.hint}\n")
        err_stream.write("javadoc-index FAILED; exiting.\n")
        return EXIT_FATAL
    except OSError as exc:
        logger.error("io_error", str(exc), filename=str(exc.filename) if exc.filename else None)
        err_stream.write("javadoc-index FAILED; exiting.\n")
        return EXIT_FATAL
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
