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


from typing import Protocol

from seqcommit.core.git_interface.interface import GitResult


class RepositoryBackend(Protocol):
    """
    Every repository query and mutation a seqcommit run needs.

    Each call is attempted exactly once and reports failure through
    GitResult.ok instead of raising, so callers decide what is fatal.
    """

    def resolve_git_dir(self) -> GitResult:
        """Resolve the git metadata directory of the working directory."""
        ...

    def resolve_head(self) -> GitResult:
        """Resolve HEAD to a commit. Fails on a repository with no commits."""
        ...

    def status_porcelain(self) -> GitResult:
        """Machine-readable working tree status."""
        ...

    def list_remotes(self) -> GitResult:
        """Names of configured remotes, one per line."""
        ...

    def fetch(self, remote: str) -> GitResult: ...

    def pull(self) -> GitResult: ...

    def stage_all(self) -> GitResult:
        """Stage every change in the working tree, including untracked files and deletions."""
        ...

    def commit(self, message: str) -> GitResult: ...

    def last_commit_message(self) -> GitResult:
        """Full message of the commit at HEAD."""
        ...

    def non_merge_history(self) -> GitResult:
        """One line per commit reachable from HEAD, merge commits excluded."""
        ...
