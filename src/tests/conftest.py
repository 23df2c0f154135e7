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

import pytest

from headstamp.core.catalog.asset_provider import ResourceAssetProvider
from headstamp.core.catalog.license_catalog import LicenseCatalog
from headstamp.core.detect.detector import LicenseDetector
from headstamp.core.transform.header_engine import HeaderEngine

# -----------------------------------------------------------------------------
# Shared fixtures
# -----------------------------------------------------------------------------


@pytest.fixture(scope="session")
def catalog():
    return LicenseCatalog.load(ResourceAssetProvider.packaged())


@pytest.fixture
def engine(catalog):
    return HeaderEngine(catalog, year=2024)


@pytest.fixture(scope="session")
def detector(catalog):
    return LicenseDetector(catalog)


@pytest.fixture
def write_asset_dir(tmp_path):
    """Build an on-disk asset root from a {name: text} mapping under licenses/."""

    def _write(assets: dict[str, str]):
        root = tmp_path / "assets"
        licenses = root / "licenses"
        licenses.mkdir(parents=True)
        for name, text in assets.items():
            (licenses / name).write_text(text, encoding="utf-8")
        return root

    return _write
