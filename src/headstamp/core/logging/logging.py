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
Logging configuration for the headstamp CLI application.

Console output goes through a rich console on stderr so that command output
on stdout stays pipeable; everything at debug level also lands in a rotating
log file under the user log directory.
"""

from datetime import datetime
from pathlib import Path

from loguru import logger
from rich.console import Console

from headstamp.constants import LOG_DIR


class StructuredLogger:
    """Structured logging helper for consistent log formatting."""

    def __init__(self, command_name: str, debug: bool = False, silent: bool = False):
        self.command_name = command_name
        self.debug = debug
        self.silent = silent
        self.console = Console(stderr=True, highlight=False)
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Set up loguru with proper formatting and sinks."""
        # Clear existing sinks to avoid duplicates
        logger.remove()

        console_level = "DEBUG" if self.debug else "INFO"

        def console_sink(message):
            text = message.record["message"].rstrip("\n")
            level = message.record["level"].name
            if level in ("WARNING", "ERROR", "CRITICAL"):
                text = f"{level.capitalize()}: {text}"
            self.console.print(text, markup=False)

        if not self.silent:
            logger.add(console_sink, level=console_level, format="{message}", catch=True)

        LOG_DIR.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        logfile = LOG_DIR / f"{self.command_name}_{timestamp}.log"

        logger.add(
            logfile,
            level="DEBUG",
            format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>",
            rotation="10 MB",
            retention="14 days",
            compression="gz",
            catch=True,
        )

        logger.debug(f"Initialized logger for {self.command_name} -> {logfile}")
        self.logfile = logfile

    def get_logfile(self) -> Path:
        """Get the current log file path."""
        return self.logfile


def setup_logger(command_name: str, debug: bool = False, silent: bool = False) -> Path:
    """
    Set up logging for a command.

    Args:
        command_name: Name of the command being executed
        debug: Enable debug output on the console
        silent: Suppress console output entirely (the log file is still written)

    Returns:
        Path to the log file
    """
    structured_logger = StructuredLogger(command_name, debug=debug, silent=silent)
    return structured_logger.get_logfile()
