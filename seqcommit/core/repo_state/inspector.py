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

from loguru import logger
from rich.markup import escape

from seqcommit.core.exceptions import StateQueryError
from seqcommit.core.git_commands.backend import RepositoryBackend


class RepositoryInspector:
    """Read-only questions about the repository, answered through the backend."""

    def __init__(self, backend: RepositoryBackend):
        self.backend = backend

    def is_repository(self) -> bool:
        return self.backend.resolve_git_dir().ok

    def is_empty(self) -> bool:
        """
        True when HEAD cannot be resolved.

        Any resolution failure counts as an empty repository. A broken
        repository is reported by git again when the first commit is made.
        """
        result = self.backend.resolve_head()
        if not result.ok:
            logger.debug(
                f"HEAD did not resolve, treating repository as empty: {escape(result.diagnostics)}"
            )
            return True
        return False

    def has_uncommitted_changes(self) -> bool:
        result = self.backend.status_porcelain()
        if not result.ok:
            raise StateQueryError("failed to check for changes", result.diagnostics)
        return bool(result.stdout.strip())

    def has_remote(self, name: str) -> bool:
        result = self.backend.list_remotes()
        if not result.ok:
            raise StateQueryError(f"failed to check {name} remote", result.diagnostics)

        remotes = result.stdout.strip().splitlines()
        if not remotes:
            logger.info("no remotes found")
            return False

        if name in (remote.strip() for remote in remotes):
            return True

        logger.info(f"no {escape(name)} remote found")
        return False
