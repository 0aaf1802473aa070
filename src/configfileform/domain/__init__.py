"""Domain models for configfileform.

All models use Pydantic v2 for validation and immutability.
"""

from configfileform.domain.models import (
    ConfigLine,
    LineKind,
    RenderMode,
    RequestParameters,
)

__all__ = [
    "ConfigLine",
    "LineKind",
    "RenderMode",
    "RequestParameters",
]
