"""HTML entity encoding for attribute values and labels."""

from __future__ import annotations

# Character -> named entity reference
HTML_ESCAPES: dict[str, str] = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    '"': "&quot;",
    "'": "&apos;",
}

_TRANSLATION = str.maketrans(HTML_ESCAPES)


def html_encode(text: str | None) -> str:
    """Replace ``<>&"'`` with their named entities.

    ``None`` is treated as an empty string. All other characters pass
    through unchanged.
    """
    if not text:
        return ""
    return text.translate(_TRANSLATION)
