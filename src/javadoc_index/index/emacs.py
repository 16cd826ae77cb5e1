"""Emacs Lisp rendering of a finished index."""

from __future__ import annotations

import os
from collections.abc import Sequence

from javadoc_index.index.models import IndexEmission

HEADER_LINES = (
    ";; For use by Emacs function javadoc-lookup.",
    ";; Created by javadoc-index.",
)


def escape_string(value: str) -> str:
    """Escape double quotes for an Emacs Lisp string literal."""
    return value.replace('"', '\\"')


def render_index(emission: IndexEmission, arguments: Sequence[str]) -> str:
    """Render the javadoc-html-refs and javadoc-ignored-prefixes forms."""
    lines = list(HEADER_LINES)
    lines.append(f";; arguments: {' '.join(arguments)}")
    lines.append("(setq javadoc-html-refs '(")
    for symbol, references in emission.refs:
        quoted = "".join(f' "{reference}"' for reference in references)
        lines.append(f' ("{escape_string(symbol)}"{quoted})')
    lines.append("))")
    lines.append("")
    lines.append("(setq javadoc-ignored-prefixes (list")
    for prefix in emission.ignored_prefixes:
        lines.append(f'  (concat "^" (regexp-quote "{prefix}{os.sep}"))')
    lines.append("))")
    return "\n".join(lines) + "\n"
