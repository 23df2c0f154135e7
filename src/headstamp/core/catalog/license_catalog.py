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

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from loguru import logger

from headstamp.constants import COPYRIGHT_SUFFIX, HEADER_SUFFIX, LICENSE_ASSET_DIR
from headstamp.core.catalog.asset_provider import AssetProvider
from headstamp.core.exceptions import (
    AssetNotFoundError,
    CatalogError,
    asset_not_found,
    unknown_license,
)


class LicenseIdentifier(StrEnum):
    APACHE2 = "apache2"
    CDDL = "cddl"
    EPL = "epl"
    FREEBSD = "freebsd"
    GPL2 = "gpl2"
    GPL3 = "gpl3"
    LGPL2 = "lgpl2"
    LGPL3 = "lgpl3"
    MIT = "mit"
    MPL2 = "mpl2"
    NEWBSD = "newbsd"
    UNLICENSE = "unlicense"
    # classification result when nothing matched
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, text: str) -> "LicenseIdentifier":
        """Map user input (short name or SPDX id, any case) to a known license."""
        normalized = text.strip().lower()
        try:
            identifier = cls(normalized)
        except ValueError:
            identifier = cls.from_spdx(normalized)

        if identifier is None or identifier is cls.UNKNOWN:
            raise unknown_license(text)
        return identifier

    @classmethod
    def from_spdx(cls, spdx_id: str) -> "LicenseIdentifier | None":
        return _SPDX_INDEX.get(spdx_id.strip().lower())

    @property
    def spdx_ids(self) -> tuple[str, ...]:
        return SPDX_IDS.get(self, ())


SPDX_IDS: dict[LicenseIdentifier, tuple[str, ...]] = {
    LicenseIdentifier.APACHE2: ("Apache-2.0",),
    LicenseIdentifier.CDDL: ("CDDL-1.0",),
    LicenseIdentifier.EPL: ("EPL-1.0",),
    LicenseIdentifier.FREEBSD: ("BSD-2-Clause", "BSD-2-Clause-FreeBSD"),
    LicenseIdentifier.GPL2: ("GPL-2.0", "GPL-2.0-only", "GPL-2.0-or-later", "GPL-2.0+"),
    LicenseIdentifier.GPL3: ("GPL-3.0", "GPL-3.0-only", "GPL-3.0-or-later", "GPL-3.0+"),
    LicenseIdentifier.LGPL2: (
        "LGPL-2.1",
        "LGPL-2.1-only",
        "LGPL-2.1-or-later",
        "LGPL-2.1+",
    ),
    LicenseIdentifier.LGPL3: (
        "LGPL-3.0",
        "LGPL-3.0-only",
        "LGPL-3.0-or-later",
        "LGPL-3.0+",
    ),
    LicenseIdentifier.MIT: ("MIT",),
    LicenseIdentifier.MPL2: ("MPL-2.0",),
    LicenseIdentifier.NEWBSD: ("BSD-3-Clause",),
    LicenseIdentifier.UNLICENSE: ("Unlicense",),
}

_SPDX_INDEX = {
    spdx_id.lower(): identifier
    for identifier, spdx_ids in SPDX_IDS.items()
    for spdx_id in spdx_ids
}


@dataclass(frozen=True)
class LicenseDefinition:
    identifier: LicenseIdentifier
    full_text: str | None = None
    copyright_template: str | None = None
    header_template: str | None = None

    @property
    def requires_header(self) -> bool:
        return self.header_template is not None


def _is_sub_asset(name: str) -> bool:
    return name.endswith(HEADER_SUFFIX) or name.endswith(COPYRIGHT_SUFFIX)


class LicenseCatalog:
    """
    Immutable registry of license texts and their copyright/header templates.

    Built once per process through :meth:`load` and shared read-only by the
    engine, the detector and the pipeline.
    """

    def __init__(self, definitions: Iterable[LicenseDefinition]):
        ordered = sorted(definitions, key=lambda d: d.identifier.value)
        self._definitions: Mapping[LicenseIdentifier, LicenseDefinition] = (
            MappingProxyType({d.identifier: d for d in ordered})
        )

    @classmethod
    def load(cls, provider: AssetProvider) -> "LicenseCatalog":
        try:
            names = provider.list_dir(LICENSE_ASSET_DIR)
        except AssetNotFoundError as e:
            raise CatalogError(
                "Unable to load the license catalog", e.details or e.message
            ) from e

        definitions = []
        for name in names:
            if _is_sub_asset(name):
                continue

            try:
                identifier = LicenseIdentifier(name)
            except ValueError:
                logger.warning(f"Skipping unrecognized license asset: {name}")
                continue

            if identifier is LicenseIdentifier.UNKNOWN:
                logger.warning(f"Skipping reserved license asset name: {name}")
                continue

            definitions.append(
                LicenseDefinition(
                    identifier=identifier,
                    full_text=_read_text(provider, name),
                    copyright_template=_read_template(provider, name + COPYRIGHT_SUFFIX),
                    header_template=_read_template(provider, name + HEADER_SUFFIX),
                )
            )

        logger.debug(f"Loaded {len(definitions)} licenses into the catalog")
        return cls(definitions)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def lookup(self, identifier: LicenseIdentifier) -> LicenseDefinition:
        definition = self._definitions.get(identifier)
        if definition is None:
            raise asset_not_found(f"{LICENSE_ASSET_DIR}/{identifier.value}")
        return definition

    def identifiers(self) -> list[LicenseIdentifier]:
        return list(self._definitions.keys())

    def definitions(self) -> list[LicenseDefinition]:
        return list(self._definitions.values())

    def copyright_template(self, identifier: LicenseIdentifier) -> str | None:
        return self.lookup(identifier).copyright_template

    def header_template(self, identifier: LicenseIdentifier) -> str | None:
        return self.lookup(identifier).header_template

    def full_text(self, identifier: LicenseIdentifier) -> str:
        full_text = self.lookup(identifier).full_text
        if full_text is None:
            raise asset_not_found(f"{LICENSE_ASSET_DIR}/{identifier.value}")
        return full_text


def _read_text(provider: AssetProvider, name: str) -> str | None:
    try:
        data = provider.get(f"{LICENSE_ASSET_DIR}/{name}")
    except AssetNotFoundError:
        return None
    return data.decode("utf-8")


def _read_template(provider: AssetProvider, name: str) -> str | None:
    text = _read_text(provider, name)
    if text is None:
        return None
    # templates are rendered line by line, a trailing newline would add an empty comment line
    return text.rstrip("\r\n")
