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
from headstamp.core.catalog.license_catalog import LicenseIdentifier
from headstamp.core.exceptions import ValidationError, handle_headstamp_exception
from headstamp.core.files.resolver import expand_patterns
from headstamp.pipelines.license_pipeline import LicensePipeline


def run_set(
    global_context: GlobalContext,
    license_type: str,
    owner: str,
    comment_style: str,
    files: list[str],
    replace: bool,
) -> bool:
    license = LicenseIdentifier.parse(license_type)
    paths = expand_patterns(files)
    if not paths:
        raise ValidationError("No files to process")

    logger.debug(
        "Set command started: license={license} files={count} replace={replace}",
        license=license.value,
        count=len(paths),
        replace=replace,
    )

    pipeline = LicensePipeline.from_context(global_context)
    report = pipeline.set_license(paths, license, owner, comment_style, replace=replace)

    changed = len(report.changed)
    skipped = len(report.results) - changed - len(report.errors)
    logger.success(
        f"{license.value} header set on {changed} file(s), {skipped} unchanged"
    )

    report.raise_for_errors()
    return True


def main(
    ctx: typer.Context,
    license_type: str = typer.Argument(..., help="License type, see 'headstamp list'."),
    owner: str = typer.Argument(..., help="Copyright owner written into the notice."),
    comment_style: str = typer.Argument(
        ..., help="End-of-line comment marker of the files, e.g. '//' or '#'."
    ),
    files: list[str] = typer.Argument(
        ..., help="Files, directories or glob patterns to update."
    ),
    replace: bool = typer.Option(
        False,
        "--replace",
        help="Replace a license header that is already present instead of skipping the file.",
    ),
) -> None:
    """
    Insert a copyright notice and license header at the top of files.

    Files that already carry a recognised license header are skipped unless
    --replace is given.

    Examples:
        # Add the MPL 2.0 header to every Go file
        headstamp set mpl2 "Jane Doe" // "**/*.go"

        # Switch a Python project from GPLv2 to Apache 2.0
        headstamp set apache2 "ACME Corp" "#" src --replace
    """
    with handle_headstamp_exception():
        global_context: GlobalContext = ctx.obj
        run_set(global_context, license_type, owner, comment_style, files, replace)
