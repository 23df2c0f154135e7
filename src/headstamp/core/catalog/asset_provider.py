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

from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Protocol

from headstamp.core.exceptions import asset_not_found


class AssetProvider(Protocol):
    """Read-only access to packaged assets addressed by slash separated keys."""

    def get(self, key: str) -> bytes:
        """Return the raw bytes of an asset or raise AssetNotFoundError."""
        ...

    def list_dir(self, key: str) -> list[str]:
        """Return the entry names directly under a directory key."""
        ...


class ResourceAssetProvider:
    """
    AssetProvider over an importlib.resources traversable or a plain directory.

    Keys are relative to ``root``, e.g. ``licenses/mpl2.header``.
    """

    def __init__(self, root: Traversable | Path):
        self.root = root

    @classmethod
    def packaged(cls) -> "ResourceAssetProvider":
        return cls(files("headstamp") / "resources")

    def _resolve(self, key: str) -> Traversable | Path:
        node = self.root
        for part in key.split("/"):
            if part:
                node = node / part
        return node

    def get(self, key: str) -> bytes:
        node = self._resolve(key)
        if not node.is_file():
            raise asset_not_found(key)
        try:
            return node.read_bytes()
        except OSError as e:
            raise asset_not_found(key) from e

    def list_dir(self, key: str) -> list[str]:
        node = self._resolve(key)
        if not node.is_dir():
            raise asset_not_found(key)
        return sorted(child.name for child in node.iterdir())
