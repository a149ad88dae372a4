"""Type filtering and origin exclusion for walked entries."""

from __future__ import annotations

from enum import Enum

from ..options import Options
from .types import Entry


class Classification(Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"


def classify(entry: Entry, options: Options) -> Classification:
    """Decide whether ``entry`` passes the origin and type filters.

    The origin directory itself is never listed. Without a type flag both
    files and directories pass; otherwise only the flagged type does.
    Special entries (broken symlinks, sockets, FIFOs) are neither, so no
    type flag excludes them.
    """
    if entry.path == options.origin and entry.is_dir:
        return Classification.EXCLUDE
    if not options.files_only and not options.directories_only:
        return Classification.INCLUDE
    if entry.is_special:
        return Classification.INCLUDE
    if entry.is_dir:
        return Classification.INCLUDE if options.directories_only else Classification.EXCLUDE
    return Classification.INCLUDE if options.files_only else Classification.EXCLUDE


__all__ = ["Classification", "classify"]
