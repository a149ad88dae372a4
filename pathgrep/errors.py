"""Error types raised by pathgrep."""

from __future__ import annotations


class ConfigError(Exception):
    """Fatal configuration problem; the CLI reports it once and exits nonzero."""


__all__ = ["ConfigError"]
