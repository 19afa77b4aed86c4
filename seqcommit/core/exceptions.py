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
Custom exception hierarchy for the seqcommit CLI application.

Every fatal condition of a run is raised as a subclass of SeqCommitError.
The message carries a short prefix naming the phase that failed, while
details keeps the raw git output so users can recover by hand.
"""

import sys
from contextlib import contextmanager

import typer
from colorama import Fore, Style
from loguru import logger
from rich.markup import escape


class SeqCommitError(Exception):
    """
    Base exception for all seqcommit-related errors.

    All seqcommit-specific exceptions should inherit from this class
    to enable consistent error handling throughout the application.
    """

    def __init__(self, message: str, details: str | None = None):
        """
        Initialize a SeqCommitError.

        Args:
            message: Main error message for the user
            details: Raw diagnostic output or a hint, shown verbatim
        """
        self.message = message
        self.details = details
        super().__init__(message)


class PreconditionError(SeqCommitError):
    """
    A precondition for running is not met.

    Raised when the working directory is not inside a git repository
    or the repository path given on the command line is unusable.
    """

    pass


class ConfigurationError(PreconditionError):
    """
    Configuration-related errors.

    Raised when configuration files are missing, malformed,
    or contain values of the wrong type.
    """

    pass


class GitError(SeqCommitError):
    """
    Errors related to git operations.

    Raised directly when git itself cannot be executed.
    """

    pass


class StateQueryError(GitError):
    """Raised when a status, log or remote query fails."""

    pass


class SyncError(GitError):
    """
    Raised when pulling from the remote fails after a successful fetch.

    The working tree may be left mid-merge, so nothing else is attempted.
    """

    pass


class MutationError(GitError):
    """Raised when staging or committing fails."""

    pass


# Convenience functions for creating common errors
def git_not_found() -> GitError:
    """Create a GitError for when git is not available."""
    return GitError(
        "Git is not installed or not in PATH",
        "Please install git and ensure it's available in your PATH environment variable",
    )


def not_git_repository(path: str = ".") -> PreconditionError:
    """Create a PreconditionError for when not in a git repository."""
    return PreconditionError(
        f"not in a git repository: {path}",
        "Run 'git init' to initialize a git repository or navigate to an existing repository",
    )


def path_not_found(path: str) -> PreconditionError:
    """Create a PreconditionError for a repository path that does not exist."""
    return PreconditionError(
        f"Path not found: {path}",
        "Please check that the path exists and is a directory",
    )


def config_not_found(path: str) -> ConfigurationError:
    """Create a ConfigurationError for an explicitly requested config file that is missing."""
    return ConfigurationError(
        f"failed to load config: {path} does not exist",
        "Pass an existing TOML file to --config or omit the option",
    )


def no_config_found(*paths) -> ConfigurationError:
    """Create a ConfigurationError for a run where no config file exists at all."""
    return ConfigurationError(
        "failed to load config: no configuration file found",
        "Create one of "
        + ", ".join(str(p) for p in paths)
        + " or pass an existing TOML file to --config",
    )


@contextmanager
def handle_seqcommit_exception(exit_on_fail: bool = True):
    """
    Report seqcommit errors on stderr and turn them into exit status 1.

    typer.Exit passes through untouched so callbacks can still end the run.
    """
    try:
        yield
    except typer.Exit:
        raise
    except SeqCommitError as e:
        logger.debug(escape(f"{type(e).__name__}: {e.message} details={e.details!r}"))
        print(f"{Fore.RED}Error:{Style.RESET_ALL} {e.message}", file=sys.stderr)
        if e.details:
            print(e.details.rstrip("\n"), file=sys.stderr)
        if exit_on_fail:
            raise typer.Exit(1) from e
        raise
