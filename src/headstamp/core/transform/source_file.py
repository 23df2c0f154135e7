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

import os
import stat
from pathlib import Path

from loguru import logger

from headstamp.constants import DEFAULT_FILE_MODE
from headstamp.core.exceptions import file_io_error, scan_error


def read_source(path: Path) -> str:
    """Read a whole file as UTF-8, keeping its newline style untouched."""
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise scan_error(str(path), f"not valid UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise file_io_error(str(path), e) from e


def file_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except OSError as e:
        logger.debug(f"Could not read mode of {path}, using default: {e}")
        return DEFAULT_FILE_MODE


def write_source(path: Path, text: str, mode: int | None = None) -> None:
    """
    Overwrite ``path`` with ``text`` and reapply its permission bits.

    The mode is captured before writing when not given.
    """
    if mode is None:
        mode = file_mode(path)

    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.chmod(path, mode)
    except OSError as e:
        raise file_io_error(str(path), e) from e
