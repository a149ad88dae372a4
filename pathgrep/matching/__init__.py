"""Pattern matching and span partitioning.

Exposes the ``PatternSet`` matcher pair and the span/segment datatypes
consumed by the name and text renderers.
"""

from __future__ import annotations

from .patterns import PatternSet, find_spans, partition, segments_text
from .types import Segment, Span, SpanRole

__all__ = [
    "PatternSet",
    "Segment",
    "Span",
    "SpanRole",
    "find_spans",
    "partition",
    "segments_text",
]
