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

import re

from loguru import logger

from seqcommit.core.exceptions import StateQueryError
from seqcommit.core.git_commands.backend import RepositoryBackend

# optional plus sign followed by ASCII digits
_NUMBER_RE = re.compile(r"\+?[0-9]+")


def parse_commit_number(message: str) -> int | None:
    """Return the message as an integer when the whole trimmed text is one, else None."""
    text = message.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    return int(text)


def count_commit_lines(log_output: str) -> int:
    """
    Count commits in one-line-per-commit log output.

    Blank output comes back as a single empty line, which means no commits.
    """
    lines = log_output.strip().split("\n")
    if lines[0] == "":
        return 0
    return len(lines)


def determine_next_commit_number(backend: RepositoryBackend) -> int:
    last = backend.last_commit_message()
    if not last.ok:
        raise StateQueryError("failed to get last commit message", last.diagnostics)

    number = parse_commit_number(last.stdout)
    if number is not None:
        logger.debug(f"Last commit message is number {number}")
        return number + 1

    history = backend.non_merge_history()
    if not history.ok:
        raise StateQueryError("failed to get git log", history.diagnostics)

    count = count_commit_lines(history.stdout)
    logger.debug(f"Last commit message is not a number, counted {count} non-merge commits")
    return count + 1


def format_commit_message(number: int, user_message: str | None = None) -> str:
    if not user_message:
        return str(number)
    return f"{number}: {user_message}"
