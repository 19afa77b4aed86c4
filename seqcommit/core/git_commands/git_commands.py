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

from seqcommit.core.git_interface.interface import GitInterface, GitResult


class GitCommands:
    """RepositoryBackend implemented with the git CLI."""

    def __init__(self, git: GitInterface):
        self.git = git

    # -------------------------------
    # Queries
    # -------------------------------

    def resolve_git_dir(self) -> GitResult:
        return self.git.run_git_text(["rev-parse", "--git-dir"])

    def resolve_head(self) -> GitResult:
        return self.git.run_git_text(["rev-parse", "--verify", "HEAD"])

    def status_porcelain(self) -> GitResult:
        return self.git.run_git_text(["status", "--porcelain"])

    def list_remotes(self) -> GitResult:
        return self.git.run_git_text(["remote"])

    def last_commit_message(self) -> GitResult:
        return self.git.run_git_text(["log", "-1", "--pretty=%B"])

    def non_merge_history(self) -> GitResult:
        return self.git.run_git_text(["log", "--no-merges", "--oneline"])

    # -------------------------------
    # Mutations
    # -------------------------------

    def fetch(self, remote: str) -> GitResult:
        return self.git.run_git_text(["fetch", remote])

    def pull(self) -> GitResult:
        return self.git.run_git_text(["pull"])

    def stage_all(self) -> GitResult:
        # -A covers the whole tree even when repo_path is a subdirectory
        return self.git.run_git_text(["add", "-A"])

    def commit(self, message: str) -> GitResult:
        return self.git.run_git_text(["commit", "-m", message])
