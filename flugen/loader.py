"""Find, read and write Dart source units."""

from __future__ import annotations

import glob
import os

from .errors import PatternError
from .naming import EXCLUDED_SUFFIXES, is_generated_file


def discover_sources(
    pattern: str, excluded_suffixes: tuple[str, ...] = EXCLUDED_SUFFIXES
) -> list[str]:
    """Expand a recursive glob into sorted source paths, skipping generated files."""
    if not pattern or not pattern.strip():
        raise PatternError("Source pattern must not be empty")
    paths = glob.glob(pattern, recursive=True)
    return sorted(
        p for p in paths if os.path.isfile(p) and not is_generated_file(p, excluded_suffixes)
    )


def read_source(path: str) -> str:
    """Read a source unit from disk."""
    with open(path, encoding="utf-8") as f:
        return f.read()


def write_generated(path: str, text: str) -> None:
    """Write a generated unit, replacing any previous content."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
