"""Resolved run options and origin-path validation.

``Options`` is the single structure the finder consumes. ``resolve_origin``
performs the fatal checks on the origin before any entry is walked.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError


@dataclass(frozen=True)
class Options:
    """Resolved command-line options for one finder run."""

    origin: Path
    recursive: bool = False
    canonicalize: bool = False
    files_only: bool = False
    directories_only: bool = False
    ignore_case: bool = False
    name_pattern: re.Pattern[str] | None = None
    text_pattern: re.Pattern[str] | None = None
    list_mode: bool = False
    show_warnings: bool = False
    working_dir: bool = False
    skip_hidden: bool = False
    no_color: bool = False
    theme: str | None = None

    def __post_init__(self) -> None:
        if self.files_only and self.directories_only:
            raise ConfigError("Cannot combine files-only with directories-only.")
        if self.directories_only and self.text_pattern is not None:
            raise ConfigError("Directories have no text; cannot combine directories-only with a text pattern.")
        if self.list_mode and self.text_pattern is not None:
            raise ConfigError("Text lines need line breaks; cannot combine list display with a text pattern.")


def resolve_origin(origin: Path, canonicalize: bool) -> Path:
    """Validate ``origin`` and optionally canonicalize it.

    Raises ``ConfigError`` when the path does not exist or cannot be resolved.
    """
    if not origin.exists():
        raise ConfigError(f'"{origin}" does not exist')
    if not canonicalize:
        return origin
    try:
        return origin.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise ConfigError(f'Could not canonicalize "{origin}"') from exc


__all__ = ["Options", "resolve_origin"]
