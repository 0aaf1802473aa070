"""Core domain models for configfileform.

These models represent the data flowing through the transducer: classified
configuration lines, the rendering mode selected at startup, and the decoded
request parameters consulted in request mode.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class LineKind(str, enum.Enum):
    """Classification of a single configuration line."""

    COMMENT = "comment"  # Starts with '#'
    ASSIGNMENT = "assignment"  # Contains '='
    BLANK = "blank"  # Anything else, acts as a separator


class RenderMode(str, enum.Enum):
    """Output mode, fixed for the whole run."""

    FORM = "form"  # HTML form fragment
    REQUEST = "request"  # Rewritten config file with request overrides


# ---------------------------------------------------------------------------
# Line Models
# ---------------------------------------------------------------------------


class ConfigLine(BaseModel):
    """A single input line with its trailing newline removed.

    ``key`` and ``value`` are only set for assignments, split on the
    first ``=``.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Raw line text without the trailing newline")
    kind: LineKind = Field(description="How the line was classified")
    key: str | None = Field(default=None, description="Assignment key")
    value: str | None = Field(default=None, description="Raw assignment value")

    @property
    def is_comment(self) -> bool:
        return self.kind == LineKind.COMMENT

    @property
    def is_assignment(self) -> bool:
        return self.kind == LineKind.ASSIGNMENT


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------


class RequestParameters(BaseModel):
    """Decoded CGI request parameters, built once before rendering.

    Behaves like a read-only mapping from parameter name to decoded value.
    """

    model_config = ConfigDict(frozen=True)

    params: dict[str, str] = Field(
        default_factory=dict, description="Parameter name -> decoded value"
    )

    def __contains__(self, name: object) -> bool:
        return name in self.params

    def __getitem__(self, name: str) -> str:
        return self.params[name]

    def __len__(self) -> int:
        return len(self.params)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.params)

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.params.get(name, default)

    def lookup(self, name: str) -> str:
        """Return the decoded value of ``name``, or an empty string."""
        return self.params.get(name, "")
