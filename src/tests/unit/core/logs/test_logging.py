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
from loguru import logger

from headstamp.core.logging import logging as headstamp_logging
from headstamp.core.logging.utils import time_block


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    target = tmp_path / "logs"
    monkeypatch.setattr(headstamp_logging, "LOG_DIR", target)
    yield target
    logger.remove()


def test_setup_logger_creates_logfile(log_dir):
    logfile = headstamp_logging.setup_logger("detect")

    logger.debug("written to file only")
    logger.remove()

    assert logfile.parent == log_dir
    assert logfile.name.startswith("detect_")
    assert "written to file only" in logfile.read_text()


def test_console_sink_prefixes_warnings(log_dir, capsys):
    headstamp_logging.setup_logger("set")

    logger.info("stamped a.go")
    logger.warning("b.go already licensed")
    logger.debug("hidden")

    err = capsys.readouterr().err
    assert "stamped a.go" in err
    assert "Warning: b.go already licensed" in err
    assert "hidden" not in err


def test_silent_logger_writes_nothing_to_console(log_dir, capsys):
    logfile = headstamp_logging.setup_logger("set", silent=True)

    logger.info("quiet")
    logger.remove()

    assert capsys.readouterr().err == ""
    assert "quiet" in logfile.read_text()


def test_time_block_logs_start_and_finish():
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    try:
        with time_block("scan"):
            pass
    finally:
        logger.remove(handler_id)

    assert messages[0] == "Starting scan"
    assert messages[-1].startswith("Finished scan. Timing(ms)=")


def test_time_block_logs_even_on_error():
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    try:
        with pytest.raises(ValueError):
            with time_block("scan"):
                raise ValueError
    finally:
        logger.remove(handler_id)

    assert any(m.startswith("Finished scan") for m in messages)
