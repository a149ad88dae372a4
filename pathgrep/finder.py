"""Finder loop: classify, render, and accumulate every walked entry.

Each entry is fully processed before the next one is requested. Dropped
entries produce no output at all.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TextIO

from .entries import Classification, Entry, classify, iter_entries
from .matching import PatternSet, Segment
from .options import Options
from .output import ResultAccumulator
from .render import RenderedLine, format_line, paint, render_name, render_text
from .theme import MatchTheme, resolve_theme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedEntry:
    display: tuple[Segment, ...]
    lines: tuple[RenderedLine, ...] = ()


def _ignore_warning(_message: str) -> None:
    return None


def warning_sink(options: Options) -> Callable[[str], None]:
    """Return the per-entry warning callback honoring ``show_warnings``."""
    return logger.warning if options.show_warnings else _ignore_warning


def render_entry(
    entry: Entry,
    options: Options,
    patterns: PatternSet,
    warn: Callable[[str], None] | None = None,
) -> RenderedEntry | None:
    """Run one entry through the classifier and both renderers.

    Returns ``None`` when the entry is excluded or dropped by a renderer.
    ``warn`` defaults to the sink chosen by ``options.show_warnings``.
    """
    if warn is None:
        warn = warning_sink(options)
    if classify(entry, options) is Classification.EXCLUDE:
        return None
    display = render_name(entry, patterns, warn)
    if display is None:
        return None
    lines = render_text(entry, patterns, warn)
    if lines is None:
        return None
    return RenderedEntry(display=display, lines=lines)


def find_entries(
    options: Options,
    entries: Iterable[Entry] | None = None,
) -> Iterable[RenderedEntry]:
    """Yield rendered results for every matching entry.

    ``entries`` defaults to walking ``options.origin``. Raises ``ConfigError``
    before yielding anything when the patterns cannot be prepared.
    """
    patterns = PatternSet.build(options.name_pattern, options.text_pattern, options.ignore_case)
    if entries is None:
        entries = iter_entries(
            options.origin,
            options.recursive,
            skip_hidden=options.skip_hidden,
            working_dir=options.working_dir,
        )

    warn = warning_sink(options)

    def generate() -> Iterable[RenderedEntry]:
        for entry in entries:
            rendered = render_entry(entry, options, patterns, warn)
            if rendered is not None:
                yield rendered

    return generate()


def run(
    options: Options,
    out: TextIO,
    entries: Iterable[Entry] | None = None,
    theme: MatchTheme | None = None,
) -> int:
    """Write all matches for ``options`` to ``out`` and return the match count."""
    if theme is None:
        theme = resolve_theme(options.theme, no_color=options.no_color)
    results = find_entries(options, entries)
    accumulator = ResultAccumulator(out, list_mode=options.list_mode)

    matched = 0
    for result in results:
        accumulator.record(
            paint(result.display, theme),
            [format_line(line, theme) for line in result.lines],
        )
        matched += 1
    accumulator.flush()
    logger.debug("matched %d entries under %s", matched, options.origin)
    return matched


__all__ = ["RenderedEntry", "find_entries", "render_entry", "run", "warning_sink"]
