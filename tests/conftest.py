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

import os
import shutil
import subprocess
from pathlib import Path

import pytest
from loguru import logger

from seqcommit.core.git_interface.interface import GitResult


def ok(stdout: str = "", args: tuple[str, ...] = ()) -> GitResult:
    return GitResult(args=args, stdout=stdout, stderr="", returncode=0)


def fail(stderr: str = "fatal: error", stdout: str = "", code: int = 1) -> GitResult:
    return GitResult(args=(), stdout=stdout, stderr=stderr, returncode=code)


class FakeBackend:
    """
    In-memory RepositoryBackend.

    Defaults describe a non-empty, dirty repository with one "origin"
    remote whose last commit is "3". Override per test through results.
    """

    def __init__(self, **results: GitResult):
        self.results = {
            "resolve_git_dir": ok(".git\n"),
            "resolve_head": ok("a" * 40 + "\n"),
            "status_porcelain": ok(" M foo.py\n"),
            "list_remotes": ok("origin\n"),
            "fetch": ok(),
            "pull": ok("Already up to date.\n"),
            "stage_all": ok(),
            "commit": ok(),
            "last_commit_message": ok("3\n\n"),
            "non_merge_history": ok("ccc 3\nbbb 2\naaa 1\n"),
        }
        self.results.update(results)
        self.calls: list[tuple] = []

    def _record(self, name: str, *args) -> GitResult:
        self.calls.append((name, *args))
        return self.results[name]

    def called(self, name: str) -> bool:
        return any(call[0] == name for call in self.calls)

    def resolve_git_dir(self):
        return self._record("resolve_git_dir")

    def resolve_head(self):
        return self._record("resolve_head")

    def status_porcelain(self):
        return self._record("status_porcelain")

    def list_remotes(self):
        return self._record("list_remotes")

    def fetch(self, remote):
        return self._record("fetch", remote)

    def pull(self):
        return self._record("pull")

    def stage_all(self):
        return self._record("stage_all")

    def commit(self, message):
        return self._record("commit", message)

    def last_commit_message(self):
        return self._record("last_commit_message")

    def non_merge_history(self):
        return self._record("non_merge_history")


@pytest.fixture
def fake_backend():
    return FakeBackend


@pytest.fixture
def git_ok():
    return ok


@pytest.fixture
def git_fail():
    return fail


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path, monkeypatch):
    """Keep logs, global config and SEQCOMMIT_* variables out of the user's machine."""
    monkeypatch.setattr(
        "seqcommit.core.logging.logging.LOG_DIR", tmp_path / "logs"
    )
    # an empty global file stands in for the user's config
    global_config = tmp_path / "global" / "seqcommit.toml"
    global_config.parent.mkdir()
    global_config.write_text("")
    monkeypatch.setattr("seqcommit.commands.commit.GLOBAL_CONFIG_FILE", global_config)
    for key in list(os.environ):
        if key.upper().startswith("SEQCOMMIT_"):
            monkeypatch.delenv(key)
    yield
    logger.remove()


# -----------------------------------------------------------------------------
# Real repositories
# -{77}


class TempRepo:
    def __init__(self, path: Path):
        self.path = path

    def git(self, *args: str, check: bool = True) -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            ["git", *args],
            cwd=self.path,
            text=True,
            capture_output=True,
            check=check,
        )

    def apply_changes(self, files: dict[str, str]) -> None:
        for name, content in files.items():
            target = self.path / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)

    def stage_all(self) -> None:
        self.git("add", "-A")

    def commit(self, message: str) -> None:
        self.git("commit", "-m", message)

    def messages(self) -> list[str]:
        out = self.git("log", "--pretty=%s", check=False).stdout
        return [line for line in out.splitlines() if line]

    def status(self) -> str:
        return self.git("status", "--porcelain").stdout


@pytest.fixture
def repo_factory(tmp_path):
    if shutil.which("git") is None:
        pytest.skip("git not installed")

    def create(name: str = "repo") -> TempRepo:
        path = tmp_path / name
        path.mkdir()
        repo = TempRepo(path)
        repo.git("init", "-b", "main")
        repo.git("config", "user.name", "seqcommit")
        repo.git("config", "user.email", "seqcommit@example.com")
        repo.git("config", "commit.gpgsign", "false")
        return repo

    return create
