"""Filesystem walk producing the entry stream.

Yields the origin first, then its children in name order, depth first.
Depth limiting and hidden-entry visibility are applied here, not by the
finder.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .types import Entry


@dataclass(frozen=True)
class DirectoryChild:
    """One visible directory child plus the metadata the walk needs."""

    name: str
    path: Path
    is_dir: bool
    descend: bool
    is_special: bool = False


def lossy_text(path: Path | str) -> str:
    """Return ``path`` as text, replacing undecodable bytes with U+FFFD."""
    return os.fsencode(path).decode("utf-8", "replace")


def _is_special(path: Path, is_dir: bool) -> bool:
    if is_dir:
        return False
    try:
        return not path.is_file()
    except OSError:
        return True


def display_path(path: Path, working_dir: bool = False) -> str:
    """Return the text shown for ``path``.

    Bytes that are not valid UTF-8 become U+FFFD, so the result can always be
    written to a text stream. With ``working_dir``, relative paths gain a
    leading ``./`` unless they already start with a ``.`` or ``..`` component.
    """
    text = lossy_text(path)
    if not working_dir or path.is_absolute():
        return text
    if path.parts and path.parts[0] in {".", ".."}:
        return text
    if text == ".":
        return text
    return f".{os.sep}{text}"


def list_directory_children(directory: Path, skip_hidden: bool) -> tuple[list[DirectoryChild], OSError | None]:
    """List children of ``directory`` sorted by name.

    Returns ``(children, scan_error)``; ``scan_error`` is set when the
    directory cannot be scanned. Symlinked directories report ``is_dir`` but
    are never marked for descent.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if skip_hidden and name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir()
                    descend = child.is_dir(follow_symlinks=False)
                    is_special = not is_dir and not child.is_file()
                except OSError:
                    is_dir = False
                    descend = False
                    is_special = True
                children.append(
                    DirectoryChild(
                        name=name,
                        path=directory / name,
                        is_dir=is_dir,
                        descend=descend,
                        is_special=is_special,
                    )
                )
    except OSError as exc:
        return [], exc

    children.sort(key=lambda item: item.name)
    return children, None


def iter_entries(
    origin: Path,
    recursive: bool,
    skip_hidden: bool = False,
    working_dir: bool = False,
) -> Iterator[Entry]:
    """Walk ``origin`` and yield one ``Entry`` per visible filesystem object.

    Non-recursive walks stop after the origin's direct children. Directories
    that cannot be scanned contribute no children.
    """
    origin_is_dir = origin.is_dir()
    yield Entry(
        path=origin,
        is_dir=origin_is_dir,
        display=display_path(origin, working_dir),
        is_special=_is_special(origin, origin_is_dir),
    )
    if not origin_is_dir:
        return

    def walk(directory: Path) -> Iterator[Entry]:
        children, scan_error = list_directory_children(directory, skip_hidden)
        if scan_error is not None:
            return
        for child in children:
            yield Entry(
                path=child.path,
                is_dir=child.is_dir,
                display=display_path(child.path, working_dir),
                is_special=child.is_special,
            )
            if recursive and child.descend:
                yield from walk(child.path)

    yield from walk(origin)


__all__ = [
    "DirectoryChild",
    "display_path",
    "lossy_text",
    "list_directory_children",
    "iter_entries",
]
