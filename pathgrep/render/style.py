"""Style sink: turn role-tagged segments into terminal text."""

from __future__ import annotations

from collections.abc import Iterable

from ..matching.types import Segment, SpanRole
from ..theme import MatchTheme
from .text import RenderedLine


def paint(segments: Iterable[Segment], theme: MatchTheme) -> str:
    """Join ``segments``, wrapping each styled role in its theme code and reset."""
    out: list[str] = []
    for segment in segments:
        code = theme.code_for(segment.role)
        if code:
            out.append(f"{code}{segment.text}{theme.reset}")
        else:
            out.append(segment.text)
    return "".join(out)


def line_segments(line: RenderedLine) -> tuple[Segment, ...]:
    """Prefix a rendered line with its tab-indented ``N: `` label."""
    return (
        Segment("\t", SpanRole.CONTEXT),
        Segment(f"{line.line_number}: ", SpanRole.LABEL),
    ) + line.segments


def format_line(line: RenderedLine, theme: MatchTheme) -> str:
    return paint(line_segments(line), theme)


__all__ = ["format_line", "line_segments", "paint"]
