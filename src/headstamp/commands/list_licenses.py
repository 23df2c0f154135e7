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
from headstamp.core.exceptions import handle_headstamp_exception
from headstamp.core.ui.theme import themed
from headstamp.pipelines.license_pipeline import LicensePipeline


def main(ctx: typer.Context) -> None:
    """List the license types that can be set, one per line."""
    with handle_headstamp_exception():
        global_context: GlobalContext = ctx.obj
        pipeline = LicensePipeline.from_context(global_context)
        for identifier in pipeline.list_licenses():
            print(themed("license", identifier.value))
