"""Map source units to their generated companion units.

  lib/models/user.dart        -> lib/models/user.flu.dart
  part of directive           -> part of 'user.dart';

Pure string transforms; nothing here touches the filesystem.
"""

from __future__ import annotations

from pathlib import PurePath

SOURCE_SUFFIX = ".dart"
GENERATED_SUFFIX = ".flu.dart"

# Outputs of flugen and of other Dart generators; never treated as sources
EXCLUDED_SUFFIXES: tuple[str, ...] = (GENERATED_SUFFIX, ".g.dart", ".freezed.dart")


def generated_path(path: str) -> str:
    """Return the generated unit's path for a source unit path."""
    if path.endswith(SOURCE_SUFFIX):
        return path[: -len(SOURCE_SUFFIX)] + GENERATED_SUFFIX
    return path + GENERATED_SUFFIX


def part_of_name(path: str) -> str:
    """File name referenced by the generated `part of` directive."""
    return PurePath(path).name


def is_generated_file(path: str, suffixes: tuple[str, ...] = EXCLUDED_SUFFIXES) -> bool:
    """Check if a path is the output of a code generator."""
    return path.endswith(suffixes)
