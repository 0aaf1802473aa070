"""String encoders and decoders used by the renderers.

Every function here is a pure transform returning a fresh string.
"""

from configfileform.codecs.html import html_encode
from configfileform.codecs.shell import shell_decode, shell_encode
from configfileform.codecs.uri import parse_request, percent_decode

__all__ = [
    "html_encode",
    "parse_request",
    "percent_decode",
    "shell_decode",
    "shell_encode",
]
