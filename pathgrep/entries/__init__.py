"""Entry stream and entry classification.

Defines ``Entry``, the directory walk that yields entries, and the
classifier deciding which entries reach the renderers.
"""

from __future__ import annotations

from .classify import Classification, classify
from .types import Entry
from .walk import DirectoryChild, display_path, iter_entries, list_directory_children, lossy_text

__all__ = [
    "Classification",
    "DirectoryChild",
    "Entry",
    "classify",
    "display_path",
    "iter_entries",
    "list_directory_children",
    "lossy_text",
]
