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

from headstamp.context import GlobalContext
from headstamp.core.catalog.license_catalog import LicenseIdentifier
from headstamp.core.exceptions import handle_headstamp_exception
from headstamp.pipelines.license_pipeline import LicensePipeline


def main(
    ctx: typer.Context,
    license_type: str = typer.Argument(..., help="License type, see 'headstamp list'."),
    owner: str = typer.Argument(..., help="Copyright owner written into the notice."),
) -> None:
    """
    Print the full license text with the copyright notice filled in.

    Examples:
        headstamp dump apache2 "ACME Corp" > LICENSE
    """
    with handle_headstamp_exception():
        global_context: GlobalContext = ctx.obj
        license = LicenseIdentifier.parse(license_type)
        text = LicensePipeline.from_context(global_context).dump(license, owner)
        print(text, end="" if text.endswith("\n") else "\n")
