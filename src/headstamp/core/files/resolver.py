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

import glob
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

_GLOB_CHARS = frozenset("*?[")

# version control metadata is never a license target
_SKIPPED_DIRS = frozenset({".git", ".hg", ".svn"})


def _is_glob(pattern: str) -> bool:
    return any(c in _GLOB_CHARS for c in pattern)


def _files_under(directory: Path) -> list[Path]:
    return sorted(
        path
        for path in directory.rglob("*")
        if path.is_file()
        and not _SKIPPED_DIRS.intersection(path.relative_to(directory).parts)
    )


def _expand(pattern: str) -> list[Path]:
    if _is_glob(pattern):
        matches = sorted(glob.glob(pattern, recursive=True))
        if not matches:
            logger.warning(f"No files matched {pattern}")
            return [Path(pattern)]
    else:
        matches = [pattern]

    expanded = []
    for match in matches:
        path = Path(match)
        if path.is_dir():
            expanded.extend(_files_under(path))
        else:
            expanded.append(path)
    return expanded


def expand_patterns(patterns: Iterable[str]) -> list[Path]:
    """
    Turn command line file arguments into a flat, de-duplicated file list.

    Globs are expanded (``**`` included), directories contribute every file
    beneath them and a pattern that matches nothing is kept as a literal
    path so it fails on its own later. First occurrence order is kept.
    """
    seen = set()
    files = []
    for pattern in patterns:
        for path in _expand(pattern):
            key = path.resolve(strict=False)
            if key in seen:
                continue
            seen.add(key)
            files.append(path)
    return files
