"""Name and text matchers with uniform case handling.

``PatternSet`` owns the optional name/text regexes. Matching is iterative:
every leftmost non-overlapping match is collected, left to right.
``partition`` turns those spans back into segments covering the whole input.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from ..errors import ConfigError
from .types import Segment, Span, SpanRole


def _insensitive(pattern: re.Pattern[str], kind: str) -> re.Pattern[str]:
    """Recompile ``pattern`` with ``re.IGNORECASE`` added to its flags."""
    try:
        return re.compile(pattern.pattern, pattern.flags | re.IGNORECASE)
    except (re.error, ValueError) as exc:
        raise ConfigError(f"Could not make {kind} pattern case-insensitive: {exc}") from exc


def find_spans(pattern: re.Pattern[str] | None, text: str) -> list[Span]:
    """Return every match of ``pattern`` in ``text`` as highlighted spans.

    Zero-width matches are kept; they still count as a match even though they
    contribute no highlighted characters.
    """
    if pattern is None:
        return []
    return [Span(match.start(), match.end()) for match in pattern.finditer(text)]


@dataclass(frozen=True)
class PatternSet:
    """Optional name/text matchers sharing one case-sensitivity policy."""

    name: re.Pattern[str] | None = None
    text: re.Pattern[str] | None = None
    ignore_case: bool = False

    @classmethod
    def build(
        cls,
        name: re.Pattern[str] | None,
        text: re.Pattern[str] | None,
        ignore_case: bool = False,
    ) -> "PatternSet":
        """Build a pattern set, recompiling both patterns when ``ignore_case``.

        Raises ``ConfigError`` when a pattern cannot be recompiled.
        """
        if ignore_case:
            if name is not None:
                name = _insensitive(name, "name")
            if text is not None:
                text = _insensitive(text, "text")
        return cls(name=name, text=text, ignore_case=ignore_case)

    @property
    def has_name(self) -> bool:
        return self.name is not None

    @property
    def has_text(self) -> bool:
        return self.text is not None

    def match_name(self, text: str) -> list[Span]:
        return find_spans(self.name, text)

    def match_text_line(self, text: str) -> list[Span]:
        return find_spans(self.text, text)


def partition(text: str, spans: Iterable[Span], context_role: SpanRole) -> tuple[Segment, ...]:
    """Split ``text`` into segments around ``spans``.

    Matched ranges keep the span role; everything between them gets
    ``context_role``. Empty pieces are omitted, so joining the segment texts
    always reproduces ``text`` exactly.
    """
    segments: list[Segment] = []
    last = 0
    for span in spans:
        if span.start > last:
            segments.append(Segment(text[last : span.start], context_role))
        if span.end > span.start:
            segments.append(Segment(text[span.start : span.end], span.role))
        last = max(last, span.end)
    if last < len(text):
        segments.append(Segment(text[last:], context_role))
    return tuple(segments)


def segments_text(segments: Iterable[Segment]) -> str:
    """Return the plain text of ``segments`` without any styling."""
    return "".join(segment.text for segment in segments)


__all__ = [
    "PatternSet",
    "find_spans",
    "partition",
    "segments_text",
]
