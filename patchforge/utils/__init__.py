# patchforge/utils/__init__.py
from .text import (
    blank_out_reasoning,
    leading_ws,
    line_number,
    line_spans,
    normalize_ws,
    reindent_relative,
    snippet,
)

__all__ = [
    "blank_out_reasoning",
    "leading_ws",
    "line_number",
    "line_spans",
    "normalize_ws",
    "reindent_relative",
    "snippet",
]
