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
import typer

from headstamp.core.exceptions import (
    AggregatedError,
    FileIOError,
    HeadstampError,
    ScanError,
    ValidationError,
    file_io_error,
    handle_headstamp_exception,
    scan_error,
    unknown_license,
)

# -----------------------------------------------------------------------------
# Error construction
# -----------------------------------------------------------------------------


def test_errors_carry_message_and_details():
    error = unknown_license("wtfpl")

    assert isinstance(error, ValidationError)
    assert isinstance(error, HeadstampError)
    assert error.message == "Unknown license type: wtfpl"
    assert "headstamp list" in error.details


def test_file_io_error_uses_strerror():
    error = file_io_error("a.go", FileNotFoundError(2, "No such file or directory"))

    assert isinstance(error, FileIOError)
    assert error.message == "a.go: No such file or directory"


def test_aggregated_error_lists_every_message_in_order():
    errors = [
        scan_error("b.go", "not valid UTF-8"),
        FileIOError("a.go: Permission denied"),
    ]
    aggregated = AggregatedError(errors)

    assert len(aggregated) == 2
    assert str(aggregated) == "! b.go: not valid UTF-8\n! a.go: Permission denied"
    assert isinstance(aggregated.errors[0], ScanError)


# -----------------------------------------------------------------------------
# Command error handling
# -----------------------------------------------------------------------------


def test_handler_passes_through_success():
    with handle_headstamp_exception():
        value = 1

    assert value == 1


def test_handler_prints_error_and_exits(capsys):
    with pytest.raises(typer.Exit) as exc_info:
        with handle_headstamp_exception():
            raise unknown_license("wtfpl")

    assert exc_info.value.exit_code == 1
    assert "Error: Unknown license type: wtfpl" in capsys.readouterr().err


def test_handler_prints_aggregated_lines(capsys):
    with pytest.raises(typer.Exit) as exc_info:
        with handle_headstamp_exception():
            raise AggregatedError([FileIOError("x.go: boom")])

    assert exc_info.value.exit_code == 1
    assert capsys.readouterr().err.strip() == "! x.go: boom"


def test_handler_without_exit(capsys):
    with handle_headstamp_exception(exit_on_fail=False):
        raise ValidationError("bad input")

    assert "Error: bad input" in capsys.readouterr().err


def test_handler_keyboard_interrupt():
    with pytest.raises(typer.Exit) as exc_info:
        with handle_headstamp_exception():
            raise KeyboardInterrupt

    assert exc_info.value.exit_code == 130


def test_handler_lets_unexpected_errors_through():
    with pytest.raises(RuntimeError):
        with handle_headstamp_exception():
            raise RuntimeError("bug")
