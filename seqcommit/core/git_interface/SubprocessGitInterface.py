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

import subprocess
from pathlib import Path

from loguru import logger
from rich.markup import escape

from seqcommit.constants import GIT_LOG_TRUNCATE
from seqcommit.core.exceptions import git_not_found

from .interface import GitInterface, GitResult


def _truncate(text: str) -> str:
    return text[:GIT_LOG_TRUNCATE] + (
        "...(truncated)" if len(text) > GIT_LOG_TRUNCATE else ""
    )


class SubprocessGitInterface(GitInterface):
    def __init__(self, repo_path: str | Path | None = None) -> None:
        # Ensure repo_path is a Path object for consistency
        if isinstance(repo_path, Path):
            self.repo_path = repo_path
        else:
            self.repo_path = Path(repo_path or ".")

    def run_git_text(
        self,
        args: list[str],
        input_text: str | None = None,
        env: dict | None = None,
        cwd: str | Path | None = None,
    ) -> GitResult:
        effective_cwd = str(cwd) if cwd is not None else str(self.repo_path)
        cmd = ["git"] + args
        logger.debug(
            escape(f"Running git text command: {' '.join(cmd)} cwd={effective_cwd}")
        )
        try:
            completed = subprocess.run(
                cmd,
                input=input_text,
                text=True,
                encoding="utf-8",
                errors="replace",
                capture_output=True,
                check=False,
                env=env,
                cwd=effective_cwd,
            )
        except OSError as e:
            logger.error(escape(f"Failed to execute git: {e}"))
            raise git_not_found() from e

        if completed.stdout:
            logger.debug(f"git stdout (text): {escape(_truncate(completed.stdout))}")
        if completed.stderr:
            logger.debug(f"git stderr (text): {escape(_truncate(completed.stderr))}")
        logger.debug(f"git returncode: {completed.returncode}")

        if completed.returncode != 0:
            logger.debug(
                escape(f"Git text command failed: {' '.join(cmd)} code={completed.returncode}")
            )

        return GitResult(
            args=tuple(args),
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            returncode=completed.returncode,
        )
