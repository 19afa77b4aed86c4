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
Remote synchronisation performed before numbering a new commit.

A missing remote or a failed fetch only means the run continues offline.
A failed pull after a successful fetch aborts, because the working tree
may now be half merged.
"""

from enum import Enum

from loguru import logger
from rich.markup import escape

from seqcommit.core.exceptions import SyncError
from seqcommit.core.git_commands.backend import RepositoryBackend
from seqcommit.core.repo_state.inspector import RepositoryInspector


class SyncOutcome(Enum):
    DISABLED = "disabled"
    NO_REMOTE = "no_remote"
    FETCH_FAILED = "fetch_failed"
    PULLED = "pulled"


class RemoteSync:
    def __init__(
        self,
        backend: RepositoryBackend,
        inspector: RepositoryInspector,
        remote_name: str,
    ):
        self.backend = backend
        self.inspector = inspector
        self.remote_name = remote_name

    def run(self, enabled: bool) -> SyncOutcome:
        if not enabled:
            logger.debug("Remote sync disabled")
            return SyncOutcome.DISABLED

        if not self.inspector.has_remote(self.remote_name):
            return SyncOutcome.NO_REMOTE

        fetch = self.backend.fetch(self.remote_name)
        if not fetch.ok:
            logger.info("No remote found or fetch failed, continuing with local operations")
            logger.debug(f"fetch output: {escape(fetch.diagnostics)}")
            return SyncOutcome.FETCH_FAILED

        pull = self.backend.pull()
        if not pull.ok:
            raise SyncError("failed to pull changes", pull.diagnostics)

        logger.debug(f"Pulled changes from {escape(self.remote_name)}")
        return SyncOutcome.PULLED
