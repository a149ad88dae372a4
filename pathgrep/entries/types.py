"""Domain datatypes for walked filesystem entries."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """One filesystem object yielded by the entry stream.

    ``display`` is always valid text: undecodable path bytes are replaced.
    ``is_special`` marks objects that are neither a regular file nor a
    directory (broken symlinks, sockets, FIFOs, devices).
    """

    path: Path
    is_dir: bool
    display: str
    is_special: bool = False

    @property
    def name(self) -> str:
        return self.path.name


__all__ = ["Entry"]
