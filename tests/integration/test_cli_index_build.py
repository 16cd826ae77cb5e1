from __future__ import annotations

import io
import json
from pathlib import Path

from javadoc_index.cli import main

INDEX_ALL = """<!DOCTYPE html>
<html lang="en"><head><title>Index</title></head>
<body><main><dl class="index">
<dt><a href="java/util/List.html" class="type-name-link" title="interface in java.util">List</a>
 - Interface in java.util</dt>
<dt><a href="java/util/List.html#add(E)" class="member-name-link">add(E)</a>
 - Method in interface java.util.List</dt>
<dt><span class="memberNameLink"><a href="java/util/Map.html#get(java.lang.Object)">get(Object)</a>
</span> - Method in interface java.util.Map</dt>
<dt><a href="https://docs.oracle.com/javase/8/docs/api/java/lang/Object.html"
 title="class in java.lang">Object</a></dt>
<dt><a href="java/util/List.html" title="type parameter in List">E</a></dt>
</dl></main></body></html>
"""


def _write_docs(root: Path) -> Path:
    api = root / "api"
    api.mkdir(parents=True)
    index = api / "index-all.html"
    index.write_text(INDEX_ALL, encoding="utf-8")
    return index


def _run(argv: list[str]) -> tuple[int, str, str]:
    stdout = io.StringIO()
    stderr = io.StringIO()
    code = main(argv, stdout=stdout, stderr=stderr)
    return code, stdout.getvalue(), stderr.getvalue()


def test_cli_prints_index_for_argument_files(tmp_path: Path) -> None:
    index = _write_docs(tmp_path)
    api = index.parent

    code, out, err = _run([str(index)])

    assert code == 0
    assert err == ""
    assert out == (
        ";; For use by Emacs function javadoc-lookup.\n"
        ";; Created by javadoc-index.\n"
        f";; arguments: {index}\n"
        "(setq javadoc-html-refs '(\n"
        f' ("get(Object)" "file:{api}/java/util/Map.html#get-java.lang.Object-")\n'
        f' ("add(E)" "file:{api}/java/util/List.html#add-E-")\n'
        f' ("List" "file:{api}/java/util/List.html")\n'
        "))\n"
        "\n"
        "(setq javadoc-ignored-prefixes (list\n"
        f'  (concat "^" (regexp-quote "file:{api}/"))\n'
        "))\n"
    )


def test_cli_reads_globbed_list_file_for_modular_jdk(tmp_path: Path) -> None:
    api = tmp_path / "jdk" / "api"
    for module in ("java.base", "jdk.compiler"):
        (api / module).mkdir(parents=True)
    index_files = api / "index-files"
    index_files.mkdir()
    (index_files / "index-19.html").write_text(
        '<html><body><dl><dt><a href="../java.base/java/lang/String.html" '
        'class="type-name-link" title="class in java.lang">String</a></dt></dl></body></html>',
        encoding="utf-8",
    )
    (index_files / "index-3.html").write_text(
        '<html><body><dl><dt><a href="../jdk.compiler/com/sun/source/tree/ClassTree.html" '
        'title="interface in com.sun.source.tree">ClassTree</a></dt></dl></body></html>',
        encoding="utf-8",
    )
    list_file = tmp_path / "index-files-list"
    list_file.write_text(
        f"# JDK\n{index_files}/*.html\n\n{tmp_path}/missing/index-all.html\n",
        encoding="utf-8",
    )

    code, out, err = _run(["--index-files-list", str(list_file)])

    assert code == 0
    assert err == f"warning: Didn't find {tmp_path}/missing/index-all.html\n"
    assert f";; arguments: {index_files}/index-19.html {index_files}/index-3.html\n" in out
    assert f' ("String" "file:{api}/java.base/java/lang/String.html")\n' in out
    assert (
        f' ("ClassTree" "file:{api}/jdk.compiler/com/sun/source/tree/ClassTree.html")\n' in out
    )
    assert out.endswith(
        "(setq javadoc-ignored-prefixes (list\n"
        f'  (concat "^" (regexp-quote "file:{api}/java.base/"))\n'
        f'  (concat "^" (regexp-quote "file:{api}/jdk.compiler/"))\n'
        "))\n"
    )


def test_missing_nested_anchor_fails_without_output(tmp_path: Path) -> None:
    api = tmp_path / "api"
    api.mkdir()
    index = api / "index-all.html"
    index.write_text(
        '<html><body><dl><dt><span class="memberNameLink">broken</span></dt></dl></body></html>',
        encoding="utf-8",
    )

    code, out, err = _run([str(index)])

    assert code == 1
    assert out == ""
    assert f"error: In {index}, no <a href=...> in:" in err
    assert "parent = <dt>" in err
    assert err.endswith("javadoc-index FAILED; exiting.\n")


def test_malformed_glob_in_list_file_is_fatal(tmp_path: Path) -> None:
    list_file = tmp_path / "list"
    list_file.write_text("index-*.html\n", encoding="utf-8")

    code, out, err = _run(["--index-files-list", str(list_file)])

    assert code == 1
    assert out == ""
    assert "glob pattern contains no directory slash" in err


def test_missing_list_file_is_fatal(tmp_path: Path) -> None:
    code, out, err = _run(["--index-files-list", str(tmp_path / "absent")])

    assert code == 1
    assert out == ""
    assert "File not found" in err


def test_output_file_and_jsonl_log(tmp_path: Path) -> None:
    index = _write_docs(tmp_path)
    output = tmp_path / "out" / "javadoc-index.el"
    log_file = tmp_path / "run.jsonl"

    code, out, _ = _run(
        [str(index), "--output", str(output), "--log-file", str(log_file), "--verbose"]
    )

    assert code == 0
    assert out == ""
    assert output.read_text(encoding="utf-8").startswith(
        ";; For use by Emacs function javadoc-lookup.\n"
    )
    events = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    codes = [event["code"] for event in events]
    assert codes[:2] == ["config_loaded", "parse_file"]
    assert codes[-1] == "index_built"
    assert events[-1]["metadata"] == {"files": 1, "symbols": 3}
