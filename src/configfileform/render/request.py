"""Request mode: apply decoded request parameters to a config file.

Every line is echoed except assignments, whose value is replaced by the
matching request parameter when one exists. Written values are shell
quoted so the file stays readable by a shell.
"""

from __future__ import annotations

import logging

from configfileform.codecs.html import html_encode
from configfileform.codecs.shell import shell_decode, shell_encode
from configfileform.domain.models import ConfigLine, LineKind, RequestParameters
from configfileform.render.base import LineRenderer

logger = logging.getLogger(__name__)


class RequestRenderer(LineRenderer):
    """Rewrite ``key=value`` lines using request parameters.

    Args:
        params: Decoded request parameters. Keys missing from the request
            keep their value from the configuration file.
    """

    def __init__(self, params: RequestParameters) -> None:
        self._params = params

    @property
    def params(self) -> RequestParameters:
        return self._params

    def feed(self, line: ConfigLine) -> str:
        if line.kind != LineKind.ASSIGNMENT:
            return f"{line.text}\n"

        key = line.key or ""
        if key in self._params:
            value = self._params[key]
            action = "changing"
        else:
            value = shell_decode(line.value or "")
            action = "writing"
        logger.info("%s %s=%s", action, key, html_encode(value))
        return f"{key}={shell_encode(value)}\n"
