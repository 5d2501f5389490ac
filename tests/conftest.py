"""Shared fixtures for flugen tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import pytest


# ---------------------------------------------------------------------------
# Dart sources
# ---------------------------------------------------------------------------

USER_SOURCE = """\
import 'package:meta/meta.dart';

part 'user.flu.dart';

// @flu
abstract class _User {
  String get name;
  int? get age;
}
"""

PLAIN_SOURCE = """\
class Plain {
  final int x;
  Plain(this.x);
}
"""


@pytest.fixture
def user_source() -> str:
    return USER_SOURCE


@pytest.fixture
def plain_source() -> str:
    return PLAIN_SOURCE


@pytest.fixture
def write_dart(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a Dart unit below tmp_path/lib and return its path."""
    def _write(relative: str, content: str) -> Path:
        path = tmp_path / "lib" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return _write


# ---------------------------------------------------------------------------
# Logging: configure_logging() detaches the flugen logger from the root
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def reset_flugen_logger():
    yield
    logger = logging.getLogger("flugen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
