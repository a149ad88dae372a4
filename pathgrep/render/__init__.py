"""Name/text renderers and the style sink.

Renderers return role-tagged segments or ``None`` for dropped entries.
The style sink maps those roles to theme escape codes.
"""

from __future__ import annotations

from .name import render_name
from .style import format_line, line_segments, paint
from .text import RenderedLine, render_text, split_lines

__all__ = [
    "RenderedLine",
    "format_line",
    "line_segments",
    "paint",
    "render_name",
    "render_text",
    "split_lines",
]
