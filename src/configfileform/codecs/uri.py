"""Decoding of CGI-style query strings.

A request has the form ``k1=v1&k2=v2&...`` where keys and values are
percent-encoded and ``+`` stands for a space. Decoding never fails:
an invalid or missing hex digit after ``%`` counts as zero.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from configfileform.domain.models import RequestParameters

logger = logging.getLogger(__name__)


def _hex_value(ch: str) -> int:
    """Value of a single hex digit, 0 for anything else."""
    if ch and ch in "0123456789abcdefABCDEF":
        return int(ch, 16)
    return 0


def percent_decode(text: str) -> str:
    """Decode ``%XX`` escapes and ``+`` in a single key or value.

    Escaped bytes are collected and the result decoded as UTF-8, with
    undecodable sequences replaced.
    """
    out = bytearray()
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "%":
            high = text[i + 1] if i + 1 < n else ""
            low = text[i + 2] if i + 2 < n else ""
            out.append((_hex_value(high) << 4) | _hex_value(low))
            i += 1 + len(high) + len(low)
            continue
        if ch == "+":
            out.append(0x20)
        else:
            out.extend(ch.encode("utf-8"))
        i += 1
    return out.decode("utf-8", errors="replace")


def iter_request_pairs(query: str) -> Iterator[tuple[str, str]]:
    """Yield decoded ``(key, value)`` pairs in request order.

    Empty segments are skipped. A segment without ``=`` yields an empty
    value.
    """
    for segment in query.split("&"):
        if not segment:
            continue
        key, _, value = segment.partition("=")
        yield percent_decode(key), percent_decode(value)


def parse_request(query: str) -> RequestParameters:
    """Parse a query string into :class:`RequestParameters`.

    Later occurrences of a key override earlier ones.
    """
    logger.debug("cgi: %s", query)
    params: dict[str, str] = {}
    for key, value in iter_request_pairs(query):
        logger.debug("cgi: %s=%s", key, value)
        params[key] = value
    return RequestParameters(params=params)
