"""Driver-level errors. Parsing and rendering never raise these."""

from __future__ import annotations


class FlugenError(Exception):
    """Base class for flugen errors."""


class ConfigError(FlugenError):
    """Raised when the configuration cannot be parsed."""


class PatternError(FlugenError):
    """Raised for an unusable source glob pattern."""
