# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
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
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

"""
Logging configuration for the seqcommit CLI application.

User-facing messages go to a rich console sink; everything down to DEBUG
is also written to a rotating file in the user log directory.
"""

import os
from datetime import datetime
from pathlib import Path

from loguru import logger
from rich.console import Console

from seqcommit.constants import ENV_APP_PREFIX, LOG_DIR

LOG_LEVEL_ENV = ENV_APP_PREFIX + "LOG_LEVEL"


def _console_level(debug: bool, silent: bool) -> str:
    if silent:
        return "ERROR"
    if debug:
        return "DEBUG"
    return os.getenv(LOG_LEVEL_ENV, "INFO").upper()


def setup_logger(command_name: str, debug: bool = False, silent: bool = False) -> Path:
    """
    Set up logging for a command.

    Args:
        command_name: Name of the command being executed
        debug: Enable debug output on the console
        silent: Only errors reach the console

    Returns:
        Path to the log file
    """
    # Clear existing sinks to avoid duplicates
    logger.remove()

    console = Console()

    def console_sink(message):
        text = message.record["message"].rstrip("\n")
        console.print(text)

    logger.add(
        console_sink,
        level=_console_level(debug, silent),
        format="{message}",
        catch=True,
    )

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    logfile = LOG_DIR / f"{command_name}_{timestamp}.log"

    logger.add(
        logfile,
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | "
        "{level: <8} | "
        "{name}:{function}:{line} | "
        "{message}",
        rotation="10 MB",
        retention="14 days",
        compression="gz",
        catch=True,
    )

    logger.bind(command=command_name, logfile=str(logfile)).debug("Logger initialized")
    logger.debug(f"Log File Created At: {logfile}")
    return logfile


def get_log_directory() -> Path:
    """Get the directory where log files are stored."""
    return LOG_DIR
