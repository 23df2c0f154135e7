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


def run_unset(
    global_context: GlobalContext,
    license_type: str,
    comment_style: str,
    files: list[str],
) -> bool:
    license = LicenseIdentifier.parse(license_type)
    paths = expand_patterns(files)
    if not paths:
        raise ValidationError("No files to process")

    pipeline = LicensePipeline.from_context(global_context)
    report = pipeline.unset_license(paths, license, comment_style)

    logger.success(f"{license.value} header removed from {len(report.changed)} file(s)")

    report.raise_for_errors()
    return True


def main(
    ctx: typer.Context,
    license_type: str = typer.Argument(..., help="License type, see 'headstamp list'."),
    owner: str = typer.Argument(
        ..., help="Copyright owner (accepted for symmetry with 'set', not used)."
    ),
    comment_style: str = typer.Argument(
        ..., help="End-of-line comment marker the header was written with."
    ),
    files: list[str] = typer.Argument(
        ..., help="Files, directories or glob patterns to update."
    ),
) -> None:
    """
    Remove a previously inserted license header from files.

    Any line starting with the comment marker followed by "Copyright" is
    dropped, then the exact header block of the license is stripped.

    Examples:
        headstamp unset mpl2 "Jane Doe" // "**/*.go"
    """
    with handle_headstamp_exception():
        global_context: GlobalContext = ctx.obj
        logger.debug(f"Unset requested by owner={owner}")
        run_unset(global_context, license_type, comment_style, files)
