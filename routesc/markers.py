"""Provenance markers embedded in generated router sources.

Generated files carry three kinds of reserved comment lines:

* ``// @GENERATOR:play-routes-compiler`` identifies the file as ours.
* ``// @SOURCE:<path>`` records the absolute path of the routes file.
* ``// @LINE:<n>`` precedes the code generated for routes line ``n``.

The markers are ordinary comments in the target language, so the generated
file stays valid source while remaining self-describing.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

GENERATOR_MARKER = "// @GENERATOR:play-routes-compiler"
SOURCE_PREFIX = "// @SOURCE:"
LINE_PREFIX = "// @LINE:"

_LINE_PATTERN = re.compile(r"\s*// @LINE:\s*(\d+)\s*")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def line_marker(line: int) -> str:
    """Render the marker announcing code derived from routes ``line``."""
    if isinstance(line, bool) or not isinstance(line, int) or line < 1:
        raise ValueError(f"Line markers require a positive line number, got {line!r}")
    return f"{LINE_PREFIX}{line}"


def source_marker(source: Path | str) -> str:
    """Render the marker recording the original routes file."""
    return f"{SOURCE_PREFIX}{source}"


def header(source: Path | str | None = None) -> List[str]:
    """Return the marker lines that open every generated file."""
    lines = [GENERATOR_MARKER]
    if source is not None:
        lines.append(source_marker(source))
    return lines


def parse_line_marker(text: str) -> Optional[int]:
    """Return the routes line number carried by ``text`` if it is a line marker."""
    match = _LINE_PATTERN.fullmatch(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_source_marker(text: str) -> Optional[str]:
    if not text.startswith(SOURCE_PREFIX):
        return None
    return text.strip()[len(SOURCE_PREFIX):] or None


def is_reserved(text: str) -> bool:
    """Return True when ``text`` is one of the reserved marker forms."""
    return (
        text == GENERATOR_MARKER
        or text.startswith(SOURCE_PREFIX)
        or parse_line_marker(text) is not None
    )


def split_lines(text: str) -> List[str]:
    """Split ``text`` on CR, LF and CRLF only, dropping one trailing break."""
    lines = _LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class MarkerWriter:
    """Lays out generated code blocks with the provenance markers."""

    def render(
        self,
        blocks: Iterable[Tuple[int, str]],
        source: Path | str | None = None,
    ) -> str:
        """Render ``(routes_line, code)`` blocks into a marked generated file.

        Each block's code is copied verbatim after its line marker; only a
        missing final newline is added.
        """
        parts = [f"{text}\n" for text in header(source)]
        for routes_line, code in blocks:
            for text in split_lines(code):
                if is_reserved(text):
                    raise ValueError(
                        f"Generated code for line {routes_line} contains reserved marker {text!r}"
                    )
            parts.append(f"{line_marker(routes_line)}\n")
            if code:
                parts.append(code if code.endswith(("\n", "\r")) else f"{code}\n")
        return "".join(parts)


__all__ = [
    "GENERATOR_MARKER",
    "LINE_PREFIX",
    "SOURCE_PREFIX",
    "MarkerWriter",
    "header",
    "is_reserved",
    "line_marker",
    "parse_line_marker",
    "parse_source_marker",
    "split_lines",
    "source_marker",
]
