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
The commit flow of a single seqcommit run.

Stages run strictly in order and never go back:

    VERIFY_REPO -> CHECK_EMPTY -> CHECK_DIRTY -> REMOTE_SYNC
    -> COMPOSE_MESSAGE -> FINALIZE

An empty repository short-circuits at CHECK_EMPTY with a root commit
named "1"; a clean tree stops at CHECK_DIRTY without committing.
"""

from dataclasses import dataclass
from enum import Enum

from loguru import logger
from rich.markup import escape

from seqcommit.constants import FIRST_COMMIT_MESSAGE
from seqcommit.context import RunConfiguration
from seqcommit.core.exceptions import MutationError, not_git_repository
from seqcommit.core.git_commands.backend import RepositoryBackend
from seqcommit.core.logging.utils import time_block
from seqcommit.core.numbering.commit_number import (
    determine_next_commit_number,
    format_commit_message,
)
from seqcommit.core.repo_state.inspector import RepositoryInspector
from seqcommit.core.sync.remote_sync import RemoteSync


class Stage(Enum):
    VERIFY_REPO = "verify_repo"
    CHECK_EMPTY = "check_empty"
    CHECK_DIRTY = "check_dirty"
    REMOTE_SYNC = "remote_sync"
    COMPOSE_MESSAGE = "compose_message"
    FINALIZE = "finalize"


class CommitStatus(Enum):
    FIRST_COMMIT = "first_commit"
    NOTHING_TO_COMMIT = "nothing_to_commit"
    DRY_RUN = "dry_run"
    COMMITTED = "committed"


@dataclass(frozen=True)
class CommitResult:
    status: CommitStatus
    message: str | None
    stage: Stage


class CommitPipeline:
    def __init__(
        self,
        backend: RepositoryBackend,
        config: RunConfiguration,
        repo_label: str = ".",
    ):
        self.backend = backend
        self.config = config
        self.repo_label = repo_label
        self.inspector = RepositoryInspector(backend)
        self.remote_sync = RemoteSync(backend, self.inspector, config.remote_name)
        self.stage = Stage.VERIFY_REPO

    def _enter(self, stage: Stage) -> None:
        logger.debug(f"Entering stage {stage.value}")
        self.stage = stage

    def run(self) -> CommitResult:
        with time_block("Commit pipeline"):
            return self._run()

    def _run(self) -> CommitResult:
        self._enter(Stage.VERIFY_REPO)
        if not self.inspector.is_repository():
            raise not_git_repository(self.repo_label)

        self._enter(Stage.CHECK_EMPTY)
        if self.inspector.is_empty():
            self._create_first_commit()
            logger.info(
                f"[green]Created first commit {FIRST_COMMIT_MESSAGE}[/green]"
            )
            return CommitResult(CommitStatus.FIRST_COMMIT, FIRST_COMMIT_MESSAGE, self.stage)

        self._enter(Stage.CHECK_DIRTY)
        if not self.inspector.has_uncommitted_changes():
            logger.info("No changes to commit")
            return CommitResult(CommitStatus.NOTHING_TO_COMMIT, None, self.stage)

        self._enter(Stage.REMOTE_SYNC)
        outcome = self.remote_sync.run(self.config.enable_remote_sync)
        logger.debug(f"Remote sync outcome: {outcome.value}")

        self._enter(Stage.COMPOSE_MESSAGE)
        number = determine_next_commit_number(self.backend)
        message = format_commit_message(number, self.config.user_message)

        self._enter(Stage.FINALIZE)
        if self.config.dry_run:
            logger.info(
                f"[yellow]Dry-run:[/yellow] Would create commit with message: {escape(message)}"
            )
            return CommitResult(CommitStatus.DRY_RUN, message, self.stage)

        self._stage_and_commit(message)
        logger.info(f"[green]Successfully created commit {escape(message)}[/green]")
        return CommitResult(CommitStatus.COMMITTED, message, self.stage)

    def _create_first_commit(self) -> None:
        staged = self.backend.stage_all()
        if not staged.ok:
            raise MutationError("failed to stage files", staged.diagnostics)

        committed = self.backend.commit(FIRST_COMMIT_MESSAGE)
        if not committed.ok:
            raise MutationError("failed to create first commit", committed.diagnostics)

    def _stage_and_commit(self, message: str) -> None:
        staged = self.backend.stage_all()
        if not staged.ok:
            raise MutationError("failed to stage changes", staged.diagnostics)

        committed = self.backend.commit(message)
        if not committed.ok:
            raise MutationError("failed to create commit", committed.diagnostics)
