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

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, Literal

import typer
from pydantic import Field

from headstamp.constants import DEFAULT_DETECTION_THRESHOLD, DEFAULT_WORKERS
from headstamp.core.batch.batch_runner import BatchRunner
from headstamp.core.catalog.asset_provider import ResourceAssetProvider
from headstamp.core.catalog.license_catalog import LicenseCatalog, LicenseIdentifier
from headstamp.core.config.type_constraints import (
    BoolConstraint,
    LiteralTypeConstraint,
    OptionalConstraint,
    RangeTypeConstraint,
)
from headstamp.core.detect.detector import LicenseDetector
from headstamp.core.transform.header_engine import HeaderEngine
from headstamp.core.ui.theme import THEME_NAMES


@dataclass
class GlobalConfig:
    workers: Annotated[int, Field(ge=1)] = DEFAULT_WORKERS
    detection_threshold: Annotated[float, Field(ge=0.0, le=1.0)] = (
        DEFAULT_DETECTION_THRESHOLD
    )
    year: Annotated[int, Field(ge=1)] | None = None
    verbose: bool = False
    silent: bool = False
    theme: Literal["classic", "ocean", "mono"] = "classic"

    constraints = {
        "workers": RangeTypeConstraint(min_value=1, is_int=True),
        "detection_threshold": RangeTypeConstraint(min_value=0.0, max_value=1.0),
        "year": OptionalConstraint(RangeTypeConstraint(min_value=1, is_int=True)),
        "verbose": BoolConstraint(),
        "silent": BoolConstraint(),
        "theme": LiteralTypeConstraint(allowed=THEME_NAMES),
    }

    descriptions = {
        "workers": "Maximum number of files processed concurrently",
        "detection_threshold": "Minimum similarity (0.0-1.0) for a header to count as a known license",
        "year": "Year written into copyright notices (defaults to the current year)",
        "verbose": "Enable verbose logging output",
        "silent": "Do not output any log text to the console",
        "theme": "Color theme for terminal output",
    }

    # command line flags of the global callback, name -> (type, flags)
    cli_options = {
        "workers": (int, ("--workers",)),
        "detection_threshold": (float, ("--threshold",)),
        "year": (int, ("--year",)),
        "verbose": (bool, ("--verbose", "-v")),
        "silent": (bool, ("--silent", "-s")),
        "theme": (str, ("--theme",)),
    }

    @classmethod
    def get_cli_params(cls) -> dict[str, tuple[Any, Any]]:
        """Typer parameters for every config field, all defaulting to None (unset)."""
        params = {}
        for name, (param_type, flags) in cls.cli_options.items():
            params[name] = (
                param_type | None,
                typer.Option(None, *flags, help=cls.descriptions[name]),
            )
        return params


@dataclass(frozen=True)
class GlobalContext:
    config: GlobalConfig
    catalog: LicenseCatalog
    engine: HeaderEngine
    detector: LicenseDetector
    runner: BatchRunner

    @classmethod
    def from_global_config(
        cls, config: GlobalConfig, catalog: LicenseCatalog | None = None
    ):
        if catalog is None:
            catalog = LicenseCatalog.load(ResourceAssetProvider.packaged())

        engine = HeaderEngine(catalog, year=config.year)
        detector = LicenseDetector(catalog, threshold=config.detection_threshold)
        runner = BatchRunner(max_workers=config.workers)

        return GlobalContext(config, catalog, engine, detector, runner)


@dataclass(frozen=True)
class TransformRequest:
    path: Path
    license: LicenseIdentifier
    owner: str
    comment_style: str
    replace: bool = False
