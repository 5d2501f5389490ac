"""Configuration loading for flugen (`[tool.flugen]` in pyproject.toml)."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict

from .errors import ConfigError
from .naming import EXCLUDED_SUFFIXES

DEFAULT_PATTERN = "lib/**/*.dart"
DEFAULT_CONFIG_FILE = "pyproject.toml"


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for one generator run."""

    pattern: str = DEFAULT_PATTERN
    workers: int | None = None
    excluded_suffixes: tuple[str, ...] = field(default=EXCLUDED_SUFFIXES)
    dry_run: bool = False

    def override(self, **values: Any) -> "GeneratorConfig":
        """Return a copy with every non-None value applied."""
        return replace(self, **{k: v for k, v in values.items() if v is not None})


def load_config(config_path: Path | None = None) -> GeneratorConfig:
    """Load configuration from disk; a missing file yields defaults."""
    config_file = config_path or Path(DEFAULT_CONFIG_FILE)
    if not config_file.exists():
        return GeneratorConfig()

    try:
        with open(config_file, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to read {config_file}: {exc}") from exc

    section = data.get("tool", {}).get("flugen", {})
    if not isinstance(section, dict):
        raise ConfigError("[tool.flugen] must be a table")
    return _config_from_mapping(section)


def _config_from_mapping(data: Dict[str, Any]) -> GeneratorConfig:
    config = GeneratorConfig()

    pattern = data.get("path", config.pattern)
    if not isinstance(pattern, str):
        raise ConfigError("tool.flugen.path must be a string")

    workers = data.get("workers")
    if workers is not None and (
        isinstance(workers, bool) or not isinstance(workers, int) or workers < 1
    ):
        raise ConfigError("tool.flugen.workers must be a positive integer")

    excluded = data.get("exclude-suffixes")
    if excluded is None:
        suffixes = config.excluded_suffixes
    elif isinstance(excluded, list) and all(isinstance(s, str) for s in excluded):
        suffixes = tuple(excluded)
    else:
        raise ConfigError("tool.flugen.exclude-suffixes must be a list of strings")

    return GeneratorConfig(pattern=pattern, workers=workers, excluded_suffixes=suffixes)
