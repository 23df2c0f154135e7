# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 Headstamp
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, see <https://www.gnu.org/licenses/>.
#  */
# -----------------------------------------------------------------------------

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from headstamp.constants import DEFAULT_WORKERS
from headstamp.core.catalog.license_catalog import LicenseIdentifier
from headstamp.core.exceptions import (
    AggregatedError,
    ConfigurationError,
    HeadstampError,
)


@dataclass(frozen=True)
class FileResult:
    path: Path
    license: LicenseIdentifier | None = None
    error: HeadstampError | None = None
    changed: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class BatchReport:
    """One result per input path, in input order."""

    results: list[FileResult]

    @property
    def errors(self) -> list[HeadstampError]:
        return [r.error for r in self.results if r.error is not None]

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def changed(self) -> list[FileResult]:
        return [r for r in self.results if r.changed]

    def raise_for_errors(self) -> None:
        errors = self.errors
        if errors:
            raise AggregatedError(errors)


class BatchRunner:
    """
    Runs one task per file on a bounded thread pool.

    Each task writes only its own pre-allocated result slot. A HeadstampError
    raised by a task becomes that file's error and never stops its siblings;
    any other exception is re-raised once every task has finished.
    """

    def __init__(self, max_workers: int = DEFAULT_WORKERS):
        if max_workers < 1:
            raise ConfigurationError(
                f"Worker count must be at least 1, got {max_workers}"
            )
        self.max_workers = max_workers

    def run(
        self, paths: Sequence[Path], task: Callable[[Path], FileResult]
    ) -> BatchReport:
        if not paths:
            return BatchReport([])

        slots: list[FileResult | None] = [None] * len(paths)

        def run_one(index: int, path: Path) -> None:
            try:
                slots[index] = task(path)
            except HeadstampError as e:
                logger.debug(f"Task failed for {path}: {e.message}")
                slots[index] = FileResult(path, error=e)

        workers = min(self.max_workers, len(paths))
        logger.debug(f"Running {len(paths)} file task(s) on {workers} worker(s)")

        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [
                pool.submit(run_one, index, path) for index, path in enumerate(paths)
            ]

        # the pool has drained, surface programming errors now
        for future in futures:
            future.result()

        return BatchReport(slots)
