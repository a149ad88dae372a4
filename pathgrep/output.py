"""Result output in streaming or deferred list mode."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO


class ResultAccumulator:
    """Write matched entries to ``out``.

    Streaming mode writes each display path as soon as it is recorded. List
    mode buffers display paths and writes them space-joined on ``flush``;
    rendered text lines are never deferred.
    """

    def __init__(self, out: TextIO, list_mode: bool = False) -> None:
        self.out = out
        self.list_mode = list_mode
        self.entries: list[str] = []

    def _emit(self, text: str) -> None:
        self.out.write(f"{text}\n")

    def record(self, display: str, lines: Iterable[str] = ()) -> None:
        if self.list_mode:
            self.entries.append(display)
        else:
            self._emit(display)
        for line in lines:
            self._emit(line)

    def flush(self) -> None:
        if self.entries:
            self._emit(" ".join(self.entries))
            self.entries = []
        self.out.flush()


__all__ = ["ResultAccumulator"]
