"""Input/output glue: line reading, stream opening and the main loop."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from configfileform.render.base import LineRenderer

logger = logging.getLogger(__name__)


class StreamOpenError(Exception):
    """Raised when the input or output file cannot be opened."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"open {self.path}: {reason}")


# Same text codec settings for files and the standard streams
STREAM_OPTIONS: dict[str, str] = {
    "encoding": "utf-8",
    "errors": "surrogateescape",
    "newline": "",
}


def _open(path: Path | str, mode: str) -> TextIO:
    try:
        return open(path, mode, **STREAM_OPTIONS)
    except OSError as e:
        raise StreamOpenError(path, e.strerror or str(e)) from e


def _standard(stream: TextIO) -> TextIO:
    """Switch a standard stream to STREAM_OPTIONS where it supports it."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(**STREAM_OPTIONS)
    return stream


def open_input(path: Path | str | None) -> TextIO:
    """Open ``path`` for reading, or return stdin when it is None."""
    if path is None:
        return _standard(sys.stdin)
    return _open(path, "r")


def open_output(path: Path | str | None) -> TextIO:
    """Create or truncate ``path`` for writing, or return stdout when None."""
    if path is None:
        return _standard(sys.stdout)
    return _open(path, "w")


def read_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield lines from ``stream`` with the trailing ``\\n`` or ``\\r\\n`` removed."""
    for line in stream:
        if line.endswith("\r\n"):
            yield line[:-2]
        elif line.endswith("\n"):
            yield line[:-1]
        else:
            yield line


def run(lines: Iterable[str], renderer: LineRenderer, out: TextIO) -> int:
    """Feed every line through ``renderer`` and write the result to ``out``.

    Returns the number of lines processed.
    """
    count = 0
    for text in lines:
        out.write(renderer.feed_text(text))
        count += 1
    out.write(renderer.finish())
    out.flush()
    logger.debug("Processed %d lines", count)
    return count
