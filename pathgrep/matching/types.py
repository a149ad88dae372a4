"""Span and segment datatypes shared by matchers and renderers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SpanRole(Enum):
    """Display role of one piece of rendered text."""

    HIGHLIGHTED = "highlighted"
    CONTEXT = "context"
    LOW_EMPHASIS = "low-emphasis-context"
    LABEL = "label"


@dataclass(frozen=True)
class Span:
    """One match range inside a name or line (string indices, end exclusive)."""

    start: int
    end: int
    role: SpanRole = SpanRole.HIGHLIGHTED


@dataclass(frozen=True)
class Segment:
    """Contiguous rendered text tagged with a role."""

    text: str
    role: SpanRole


__all__ = [
    "SpanRole",
    "Span",
    "Segment",
]
