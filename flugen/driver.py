"""Run the generator over every source unit matched by the configuration.

Units are independent: each is read, parsed, rendered and written on its
own, so they are spread over a bounded thread pool. Results come back in
input order.
"""

from __future__ import annotations

import concurrent.futures
from dataclasses import dataclass, field
from enum import Enum

from .class_parser import parse_classes
from .codegen import render
from .config import GeneratorConfig
from .loader import discover_sources, read_source, write_generated
from .logging import get_logger
from .naming import generated_path, part_of_name

logger = get_logger("driver")


class UnitStatus(str, Enum):
    GENERATED = "generated"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class UnitResult:
    path: str
    status: UnitStatus
    output_path: str | None = None
    class_count: int = 0
    error: str | None = None


@dataclass
class RunReport:
    results: list[UnitResult] = field(default_factory=list)

    def count(self, status: UnitStatus) -> int:
        return sum(1 for r in self.results if r.status is status)

    @property
    def generated(self) -> int:
        return self.count(UnitStatus.GENERATED)

    @property
    def skipped(self) -> int:
        return self.count(UnitStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self.count(UnitStatus.FAILED)


def process_unit(path: str, dry_run: bool = False) -> UnitResult:
    """Generate the companion unit for one source file.

    A unit that cannot be read or written is reported as failed; no
    exception escapes for I/O problems.
    """
    try:
        text = read_source(path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Skipping unreadable %s: %s", path, exc)
        return UnitResult(path, UnitStatus.FAILED, error=str(exc))

    classes = parse_classes(text, path)
    output = render(classes, part_of_name(path))
    if output is None:
        logger.debug("No annotated classes in %s", path)
        return UnitResult(path, UnitStatus.SKIPPED)

    output_path = generated_path(path)
    if not dry_run:
        try:
            write_generated(output_path, output)
        except OSError as exc:
            logger.warning("Unable to write %s: %s", output_path, exc)
            return UnitResult(path, UnitStatus.FAILED, output_path, len(classes), str(exc))

    logger.info("Generated %s (%d classes)", output_path, len(classes))
    return UnitResult(path, UnitStatus.GENERATED, output_path, len(classes))


def run(config: GeneratorConfig) -> RunReport:
    """Process every unit matched by `config.pattern`."""
    paths = discover_sources(config.pattern, config.excluded_suffixes)
    logger.debug("Found %d source units for %s", len(paths), config.pattern)
    if not paths:
        return RunReport()

    with concurrent.futures.ThreadPoolExecutor(max_workers=config.workers) as pool:
        results = list(pool.map(lambda p: process_unit(p, config.dry_run), paths))
    return RunReport(results)
