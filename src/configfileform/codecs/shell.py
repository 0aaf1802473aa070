"""Shell-style quoting for configuration values.

Values in ``key=value`` lines may be wrapped in a single pair of quotes
and use backslash escapes, the way a shell would read them. Decoding is
best effort: one outer quote pair is stripped and each backslash makes
the following character literal. Nested or unbalanced quoting is passed
through rather than rejected.
"""

from __future__ import annotations

QUOTE_CHARS = "'\""

# Characters that force a value into single quotes
SPECIAL_CHARS = frozenset("\\'\"&<>")

# Characters escaped with a backslash inside the quoted form
ESCAPED_CHARS = frozenset("\\'\"")


def _needs_quoting(value: str) -> bool:
    return any(ch.isspace() or ch in SPECIAL_CHARS for ch in value)


def shell_decode(value: str) -> str:
    """Strip one matching outer quote pair and resolve backslash escapes.

    Example:
        >>> shell_decode("'it\\\\'s here'")
        "it's here"
    """
    if len(value) >= 2 and value[0] in QUOTE_CHARS and value[-1] == value[0]:
        value = value[1:-1]
    if "\\" not in value:
        return value

    out: list[str] = []
    chars = iter(value)
    for ch in chars:
        if ch == "\\":
            # trailing backslash has nothing to escape, keep it
            ch = next(chars, "\\")
        out.append(ch)
    return "".join(out)


def shell_encode(value: str) -> str:
    """Return ``value`` in a form :func:`shell_decode` reads back unchanged.

    Plain values are returned as they are. Values containing whitespace,
    quotes, backslashes or ``&<>`` are wrapped in single quotes with the
    embedded quotes and backslashes escaped.
    """
    if not _needs_quoting(value):
        return value
    escaped = "".join("\\" + ch if ch in ESCAPED_CHARS else ch for ch in value)
    return f"'{escaped}'"
