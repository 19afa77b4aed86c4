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

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field

from seqcommit.constants import DEFAULT_REMOTE
from seqcommit.core.git_commands.git_commands import GitCommands
from seqcommit.core.git_interface.SubprocessGitInterface import (
    SubprocessGitInterface,
)


class GlobalConfig(BaseModel):
    check_remote: bool = Field(
        default=False,
        description="Fetch and pull from the remote before numbering a new commit",
    )
    remote_name: str = Field(
        default=DEFAULT_REMOTE,
        min_length=1,
        description="Remote that must exist for fetch/pull to be attempted",
    )
    verbose: bool = Field(default=False, description="Enable verbose logging output")
    silent: bool = Field(
        default=False, description="Do not output any text except errors"
    )


@dataclass(frozen=True)
class RunConfiguration:
    enable_remote_sync: bool = False
    user_message: str | None = None
    dry_run: bool = False
    remote_name: str = DEFAULT_REMOTE

    @classmethod
    def from_global_config(
        cls, config: GlobalConfig, user_message: str | None, dry_run: bool
    ):
        return RunConfiguration(
            enable_remote_sync=config.check_remote,
            user_message=user_message,
            dry_run=dry_run,
            remote_name=config.remote_name,
        )


@dataclass(frozen=True)
class GlobalContext:
    repo_path: Path
    git_commands: GitCommands

    @classmethod
    def from_repo_path(cls, repo_path: Path):
        git_commands = GitCommands(SubprocessGitInterface(repo_path))

        return GlobalContext(repo_path, git_commands)
