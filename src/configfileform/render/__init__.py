"""Line renderers for the two output modes."""

from configfileform.render.base import LineRenderer, classify_line
from configfileform.render.form import CommentAccumulator, FormRenderer
from configfileform.render.request import RequestRenderer

__all__ = [
    "CommentAccumulator",
    "FormRenderer",
    "LineRenderer",
    "RequestRenderer",
    "classify_line",
]
