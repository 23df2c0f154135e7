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

from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from headstamp.context import GlobalContext, TransformRequest
from headstamp.core.batch.batch_runner import BatchReport, BatchRunner, FileResult
from headstamp.core.catalog.license_catalog import LicenseCatalog, LicenseIdentifier
from headstamp.core.detect.detector import LicenseDetector
from headstamp.core.exceptions import ValidationError, unknown_license
from headstamp.core.logging.utils import time_block
from headstamp.core.transform.header_engine import HeaderEngine, validate_comment_style
from headstamp.core.transform.source_file import file_mode, read_source, write_source


class LicensePipeline:
    """
    The user level license operations, one batch task per file.

    ``set_license`` detects first and skips files that already carry a known
    license unless ``replace`` is requested, in which case the detected header
    is removed before the new one is inserted.
    """

    def __init__(
        self,
        catalog: LicenseCatalog,
        engine: HeaderEngine,
        detector: LicenseDetector,
        runner: BatchRunner,
    ):
        self.catalog = catalog
        self.engine = engine
        self.detector = detector
        self.runner = runner

    @classmethod
    def from_context(cls, global_context: GlobalContext) -> "LicensePipeline":
        return cls(
            global_context.catalog,
            global_context.engine,
            global_context.detector,
            global_context.runner,
        )

    def _check_license(self, license: LicenseIdentifier) -> None:
        if license is LicenseIdentifier.UNKNOWN or license not in self.catalog:
            raise unknown_license(license.value)

    def set_license(
        self,
        paths: Sequence[Path],
        license: LicenseIdentifier,
        owner: str,
        comment_style: str,
        replace: bool = False,
    ) -> BatchReport:
        self._check_license(license)
        validate_comment_style(comment_style)
        if not owner or not owner.strip():
            raise ValidationError("Copyright owner must not be empty")

        def task(path: Path) -> FileResult:
            return self._set_one(
                TransformRequest(path, license, owner, comment_style, replace)
            )

        with time_block(f"set {license.value} on {len(paths)} file(s)"):
            return self.runner.run(paths, task)

    def _set_one(self, request: TransformRequest) -> FileResult:
        path = request.path
        original = read_source(path)
        mode = file_mode(path)

        content = original
        detected = self.detector.classify_source(original, (request.comment_style,))
        if detected is not LicenseIdentifier.UNKNOWN:
            if not request.replace:
                logger.warning(
                    f"{path} already has a {detected.value} header, skipping (use --replace to overwrite)"
                )
                return FileResult(path, license=detected)

            logger.debug(f"{path}: replacing {detected.value} with {request.license.value}")
            content = self.engine.remove(content, detected, request.comment_style)
            if content == original:
                logger.warning(
                    f"{path}: the {detected.value} header was not written with "
                    f"'{request.comment_style}' comments and stays in place, "
                    f"the {request.license.value} header is added above it"
                )

        updated = self.engine.insert(
            content, request.license, request.owner, request.comment_style
        )
        if updated == original:
            return FileResult(path, license=request.license)

        write_source(path, updated, mode)
        logger.debug(f"{path}: set {request.license.value}")
        return FileResult(path, license=request.license, changed=True)

    def unset_license(
        self,
        paths: Sequence[Path],
        license: LicenseIdentifier,
        comment_style: str,
    ) -> BatchReport:
        self._check_license(license)
        validate_comment_style(comment_style)

        def task(path: Path) -> FileResult:
            original = read_source(path)
            mode = file_mode(path)

            updated = self.engine.remove(original, license, comment_style)
            if updated == original:
                return FileResult(path)

            write_source(path, updated, mode)
            logger.debug(f"{path}: removed {license.value}")
            return FileResult(path, license=license, changed=True)

        with time_block(f"unset {license.value} on {len(paths)} file(s)"):
            return self.runner.run(paths, task)

    def detect(
        self, paths: Sequence[Path], extra_markers: Sequence[str] = ()
    ) -> BatchReport:
        def task(path: Path) -> FileResult:
            content = read_source(path)
            return FileResult(
                path, license=self.detector.classify_source(content, extra_markers)
            )

        with time_block(f"detect on {len(paths)} file(s)"):
            return self.runner.run(paths, task)

    def dump(self, license: LicenseIdentifier, owner: str) -> str:
        self._check_license(license)
        return self.engine.render_license(license, owner)

    def list_licenses(self) -> list[LicenseIdentifier]:
        return self.catalog.identifiers()
