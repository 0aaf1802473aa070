"""Line classification and the abstract renderer interface.

Both rendering modes consume the same stream of classified lines, so
the driver in :mod:`configfileform.stream` does not need to know which
mode is active.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from configfileform.domain.models import ConfigLine, LineKind


def classify_line(text: str) -> ConfigLine:
    """Classify a line that has had its trailing newline removed.

    A leading ``#`` makes a comment even when the line also contains
    ``=``. Otherwise the first ``=`` splits an assignment into key and
    value. Everything else is a blank (separator) line.
    """
    if text.startswith("#"):
        return ConfigLine(text=text, kind=LineKind.COMMENT)
    key, sep, value = text.partition("=")
    if sep:
        return ConfigLine(text=text, kind=LineKind.ASSIGNMENT, key=key, value=value)
    return ConfigLine(text=text, kind=LineKind.BLANK)


class LineRenderer(ABC):
    """Abstract interface for turning configuration lines into output.

    Implementations return the output produced by each line as a string
    (possibly empty) and may hold back output until :meth:`finish`.

    Example usage::

        renderer = FormRenderer()
        for text in ("# Port to listen on", "port=8080"):
            out.write(renderer.feed(classify_line(text)))
        out.write(renderer.finish())
    """

    @abstractmethod
    def feed(self, line: ConfigLine) -> str:
        """Consume one classified line and return the output it produces."""
        ...

    def feed_text(self, text: str) -> str:
        """Classify ``text`` and feed it."""
        return self.feed(classify_line(text))

    def finish(self) -> str:
        """Return any output held back until the end of input."""
        return ""
