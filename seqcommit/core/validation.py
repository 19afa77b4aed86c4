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

"""Validation of values coming straight from the command line."""

from pathlib import Path

from seqcommit.core.exceptions import path_not_found


def validate_repo_path(value: str | Path) -> Path:
    """Validate that the repository path exists and is a directory."""
    path = Path(value)

    if not path.is_dir():
        raise path_not_found(str(value))

    return path


def normalize_user_message(value: str | None) -> str | None:
    """
    Clean up the free-text commit message suffix.

    Null bytes break subprocess arguments, so they are dropped along with
    surrounding whitespace. A blank message counts as no message.
    """
    if value is None:
        return None

    result = value.replace("\x00", "").strip()
    return result or None
