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

"""
Exception hierarchy for the headstamp CLI application.

Every error carries a short user facing ``message`` and optional technical
``details``. Commands run inside :func:`handle_headstamp_exception`, which turns
these into stderr output and a non-zero exit code.
"""

import contextlib
import sys
from collections.abc import Sequence

import typer
from loguru import logger


class HeadstampError(Exception):
    """
    Base exception for all headstamp related errors.

    All headstamp specific exceptions should inherit from this class
    to enable consistent error handling throughout the application.
    """

    def __init__(self, message: str, details: str | None = None):
        """
        Initialize a HeadstampError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(HeadstampError):
    """
    Input validation errors.

    Raised when user input fails validation checks, such as an unknown
    license type or an empty comment style.
    """

    pass


class ConfigurationError(HeadstampError):
    """
    Configuration-related errors.

    Raised when configuration files are invalid or contain values
    outside the allowed range.
    """

    pass


class CatalogError(HeadstampError):
    """Raised when the license catalog cannot be loaded at all."""

    pass


class AssetNotFoundError(HeadstampError):
    """Raised when a license text or one of its templates is missing."""

    pass


class FileIOError(HeadstampError):
    """
    Errors reading, writing or inspecting a target file.

    Always scoped to a single file of a batch.
    """

    pass


class ScanError(HeadstampError):
    """Raised when a file cannot be decoded or scanned for a header."""

    pass


class AggregatedError(HeadstampError):
    """
    All per-file errors of one batch, in input order.

    Renders as one ``! <message>`` line per error.
    """

    def __init__(self, errors: Sequence[HeadstampError]):
        self.errors = list(errors)
        super().__init__(
            "\n".join(f"! {error.message}" for error in self.errors),
            f"{len(self.errors)} file(s) failed",
        )

    def __len__(self) -> int:
        return len(self.errors)

    def __str__(self) -> str:
        return self.message


# Convenience functions for creating common errors
def unknown_license(name: str) -> ValidationError:
    """Create a ValidationError for a license type that is not in the catalog."""
    return ValidationError(
        f"Unknown license type: {name}",
        "Run 'headstamp list' to see the available license types",
    )


def asset_not_found(key: str) -> AssetNotFoundError:
    """Create an AssetNotFoundError for a missing catalog asset."""
    return AssetNotFoundError(
        f"License asset not found: {key}",
        "The packaged license resources may be incomplete",
    )


def file_io_error(path: str, error: OSError) -> FileIOError:
    """Create a FileIOError wrapping the underlying OS error."""
    reason = error.strerror or str(error)
    return FileIOError(f"{path}: {reason}", repr(error))


def scan_error(path: str, reason: str) -> ScanError:
    """Create a ScanError for a file that could not be scanned."""
    return ScanError(f"{path}: {reason}", "Only UTF-8 encoded text files are supported")


@contextlib.contextmanager
def handle_headstamp_exception(exit_on_fail: bool = True):
    """
    Report headstamp errors to the user and exit with the right status code.

    Aggregated batch failures print one ``! `` line per file on stderr.
    Other headstamp errors print their message, with details at debug level.
    Ctrl+C exits with status 130.
    """
    try:
        yield
    except AggregatedError as e:
        logger.debug(f"Batch failed: {e.details}")
        print(str(e), file=sys.stderr)
        if exit_on_fail:
            raise typer.Exit(1)
    except HeadstampError as e:
        if e.details:
            logger.debug(f"{type(e).__name__} details: {e.details}")
        print(f"Error: {e.message}", file=sys.stderr)
        if exit_on_fail:
            raise typer.Exit(1)
    except KeyboardInterrupt:
        print("Operation cancelled by user", file=sys.stderr)
        raise typer.Exit(130)
