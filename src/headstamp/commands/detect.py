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

import typer
from loguru import logger

from headstamp.context import GlobalContext
from headstamp.core.batch.batch_runner import BatchReport
from headstamp.core.catalog.license_catalog import LicenseIdentifier
from headstamp.core.exceptions import ValidationError, handle_headstamp_exception
from headstamp.core.files.resolver import expand_patterns
from headstamp.core.ui.theme import themed
from headstamp.pipelines.license_pipeline import LicensePipeline


def print_report(report: BatchReport) -> None:
    for result in report.results:
        if result.error is not None:
            continue

        if result.license is LicenseIdentifier.UNKNOWN:
            label = themed("license_unknown", result.license.value)
        else:
            label = themed("license", result.license.value)
        print(f"{themed('path', str(result.path))}: {label}")


def run_detect(
    global_context: GlobalContext,
    files: list[str],
    comment_style: list[str] | None,
) -> bool:
    paths = expand_patterns(files)
    if not paths:
        raise ValidationError("No files to process")

    pipeline = LicensePipeline.from_context(global_context)
    report = pipeline.detect(paths, extra_markers=tuple(comment_style or ()))

    print_report(report)

    known = sum(
        1
        for r in report.results
        if r.license is not None and r.license is not LicenseIdentifier.UNKNOWN
    )
    logger.debug(f"Detected a known license in {known} of {len(paths)} file(s)")

    report.raise_for_errors()
    return True


def main(
    ctx: typer.Context,
    files: list[str] = typer.Argument(
        ..., help="Files, directories or glob patterns to inspect."
    ),
    comment_style: list[str] | None = typer.Option(
        None,
        "--comment-style",
        help="Additional line comment marker to recognise (repeatable).",
    ),
) -> None:
    """
    Report which license each file's leading comment block carries.

    Prints one "path: license" line per file; files whose header matches
    no catalog license are reported as unknown.

    Examples:
        headstamp detect src

        headstamp detect "**/*.bas" --comment-style "'"
    """
    with handle_headstamp_exception():
        global_context: GlobalContext = ctx.obj
        run_detect(global_context, files, comment_style)
