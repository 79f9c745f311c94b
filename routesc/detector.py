"""Detection of router sources written by routesc.

A file counts as generated only when it contains the exact generator marker
line. Detection is speculative by nature (error reporters probe arbitrary
files), so a miss is expressed as ``None`` rather than an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .logging import get_logger
from .markers import (
    GENERATOR_MARKER,
    SOURCE_PREFIX,
    parse_line_marker,
    parse_source_marker,
    split_lines,
)
from .models import DEFAULT_ENCODING

_LOGGER = get_logger("detector")


@dataclass(frozen=True)
class SourcePosition:
    """A location in the original routes file."""

    source: Optional[Path]
    line: int


@dataclass(frozen=True)
class GeneratedSource:
    """A generated file together with the provenance recorded inside it."""

    path: Path
    lines: Tuple[str, ...]

    @property
    def source(self) -> Optional[Path]:
        """The routes file this file was generated from, if recorded."""
        for text in self.lines:
            if text.startswith(SOURCE_PREFIX):
                value = parse_source_marker(text)
                return Path(value) if value else None
        return None

    def map_line(self, generated_line: int) -> Optional[int]:
        """Map a 1-based generated line to the routes line it derives from."""
        if generated_line < 1:
            return None
        for text in reversed(self.lines[:generated_line]):
            original = parse_line_marker(text)
            if original is not None:
                return original
        return None


def detect(path: Path | str, *, encoding: str = DEFAULT_ENCODING) -> Optional[GeneratedSource]:
    """Return the generated-source view of ``path``, or None if we did not write it."""
    file_path = Path(path)
    lines = _read_lines(file_path, encoding)
    if GENERATOR_MARKER not in lines:
        return None
    return GeneratedSource(path=file_path, lines=lines)


def remap_position(
    path: Path | str, line: int, *, encoding: str = DEFAULT_ENCODING
) -> Optional[SourcePosition]:
    """Translate a position in a generated file back to the routes file."""
    generated = detect(path, encoding=encoding)
    if generated is None:
        return None
    original = generated.map_line(line)
    if original is None:
        return None
    return SourcePosition(source=generated.source, line=original)


def _read_lines(path: Path, encoding: str) -> Tuple[str, ...]:
    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError:
        # routesc writes and reads with the same encoding, so undecodable
        # bytes mean some other tool produced this file.
        _LOGGER.debug("%s is not valid %s; treating as foreign file", path, encoding)
        return ()
    except FileNotFoundError:
        return ()
    except OSError as exc:
        _LOGGER.debug("Cannot read %s (%s); treating as foreign file", path, exc)
        return ()
    # CR, LF and CRLF only, so line numbers match what editors report.
    return tuple(split_lines(text))


__all__ = ["GeneratedSource", "SourcePosition", "detect", "remap_position"]
