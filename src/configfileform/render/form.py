"""Render mode: configuration file to HTML form fragment.

Comment text is collected until the next assignment or separator line
and rendered as the paragraph introducing it. Each ``key=value`` line
becomes a labelled input whose initial value is the shell-decoded,
HTML-encoded config value.
"""

from __future__ import annotations

import logging

from configfileform.codecs.html import html_encode
from configfileform.codecs.shell import shell_decode
from configfileform.config.settings import FormConfig
from configfileform.domain.models import ConfigLine, LineKind
from configfileform.render.base import LineRenderer

logger = logging.getLogger(__name__)


class CommentAccumulator:
    """Ordered comment fragments collected since the last flush."""

    def __init__(self) -> None:
        self._fragments: list[str] = []

    def __bool__(self) -> bool:
        return bool(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)

    def append(self, fragment: str) -> None:
        self._fragments.append(fragment)

    @property
    def text(self) -> str:
        return " ".join(self._fragments)

    def flush(self) -> str:
        """Return the joined text and empty the accumulator."""
        text = self.text
        self._fragments.clear()
        return text


class FormRenderer(LineRenderer):
    """Render a configuration file as an HTML form fragment.

    Args:
        config: Markup settings. Defaults reproduce the classic output,
            e.g. ``<input type='input' ...>``.
    """

    def __init__(self, config: FormConfig | None = None) -> None:
        self._config = config or FormConfig()
        self._comments = CommentAccumulator()

    @property
    def comments(self) -> CommentAccumulator:
        return self._comments

    def feed(self, line: ConfigLine) -> str:
        if line.kind == LineKind.COMMENT:
            self._add_comment(line.text)
            return ""
        if line.kind == LineKind.ASSIGNMENT:
            return self._render_field(line.key or "", line.value or "")
        if self._comments:
            # separator, close the pending paragraph
            return f"<p>{self._comments.flush()}</p>\n"
        return ""

    def finish(self) -> str:
        return self.feed_text("")

    def _add_comment(self, text: str) -> None:
        fragment = text[1:].lstrip(" ")
        if not fragment:
            fragment = f"{self._config.line_break}\n"
        self._comments.append(fragment)

    def _render_field(self, key: str, value: str) -> str:
        cfg = self._config
        label = html_encode(key)
        logger.debug("field %s", key)
        return (
            f"<p>{self._comments.flush()}\n"
            f"{cfg.line_break}{label}{cfg.label_separator}"
            f"<input type='{html_encode(cfg.input_type)}' name='{label}'"
            f" value='{html_encode(shell_decode(value))}'></p>\n"
        )
