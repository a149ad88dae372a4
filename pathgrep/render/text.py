"""Per-line text matching for file entries.

Reads the whole file, decodes it strictly as UTF-8, and keeps only the lines
where the text pattern matches. Unreadable or undecodable files are skipped
with a warning.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..entries.types import Entry
from ..matching.patterns import PatternSet, partition
from ..matching.types import Segment, SpanRole

logger = logging.getLogger(__name__)

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class RenderedLine:
    line_number: int  # 1-based
    segments: tuple[Segment, ...]


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n``, ``\\r\\n`` and ``\\r``.

    A trailing newline does not produce a final empty line.
    """
    if not text:
        return []
    lines = _NEWLINE_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def _read_text(entry: Entry, warn: Callable[[str], None]) -> str | None:
    if entry.is_special:
        # FIFOs and devices may block or never end.
        warn(f'Could not read "{entry.display}"')
        return None
    try:
        data = entry.path.read_bytes()
    except OSError:
        warn(f'Could not read "{entry.display}"')
        return None
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        warn(f'Could not decode "{entry.display}"')
        return None


def render_text(
    entry: Entry,
    patterns: PatternSet,
    warn: Callable[[str], None] | None = None,
) -> tuple[RenderedLine, ...] | None:
    """Render every line of ``entry`` that matches the text pattern.

    Returns an empty tuple when no text pattern is configured. ``None`` drops
    the entry: directories, unreadable or undecodable files, and files where
    no line matched. Skip reasons go to ``warn``, which defaults to this
    module's logger.
    """
    if not patterns.has_text:
        return ()
    if entry.is_dir:
        return None

    text = _read_text(entry, warn or logger.warning)
    if text is None:
        return None

    rendered: list[RenderedLine] = []
    for line_number, line in enumerate(split_lines(text), start=1):
        spans = patterns.match_text_line(line)
        if not spans:
            continue
        rendered.append(RenderedLine(line_number, partition(line, spans, SpanRole.LOW_EMPHASIS)))

    if not rendered:
        return None
    return tuple(rendered)


__all__ = ["RenderedLine", "render_text", "split_lines"]
