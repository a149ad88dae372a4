"""Entry base-name matching and display-path assembly."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable

from ..entries.types import Entry
from ..matching.patterns import PatternSet, partition
from ..matching.types import Segment, SpanRole

logger = logging.getLogger(__name__)


def _decodable_name(entry: Entry, warn: Callable[[str], None]) -> str | None:
    """Return the base name of ``entry`` or ``None`` when it is not valid text.

    Names read from undecodable bytes carry surrogate escapes and fail the
    strict UTF-8 round trip.
    """
    name = entry.name
    if not name:
        warn(f'Could not retrieve name "{entry.display}"')
        return None
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        warn(f'Could not interpret name "{entry.display}"')
        return None
    return name


def _parent_prefix(display: str) -> str:
    head, _tail = os.path.split(display)
    if not head or head.endswith(os.sep):
        return head
    return head + os.sep


def render_name(
    entry: Entry,
    patterns: PatternSet,
    warn: Callable[[str], None] | None = None,
) -> tuple[Segment, ...] | None:
    """Render the display path of ``entry`` with name matches highlighted.

    Without a name pattern the display path is returned unchanged. With one,
    ``None`` means the entry is dropped: either its name is not valid text or
    the pattern found no match in it. Skip reasons go to ``warn``, which
    defaults to this module's logger.
    """
    if not patterns.has_name:
        return (Segment(entry.display, SpanRole.CONTEXT),)

    name = _decodable_name(entry, warn or logger.warning)
    if name is None:
        return None

    spans = patterns.match_name(name)
    if not spans:
        return None

    segments: list[Segment] = []
    prefix = _parent_prefix(entry.display)
    if prefix:
        segments.append(Segment(prefix, SpanRole.CONTEXT))
    segments.extend(partition(name, spans, SpanRole.CONTEXT))
    return tuple(segments)


__all__ = ["render_name"]
