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

from pathlib import Path

import typer
from loguru import logger
from rich.markup import escape

from seqcommit.constants import CONFIG_FILENAME, ENV_APP_PREFIX, GLOBAL_CONFIG_FILE
from seqcommit.context import GlobalConfig, GlobalContext, RunConfiguration
from seqcommit.core.config.config_loader import ConfigLoader
from seqcommit.core.exceptions import handle_seqcommit_exception
from seqcommit.core.logging.logging import setup_logger
from seqcommit.core.validation import normalize_user_message, validate_repo_path
from seqcommit.pipelines.commit_pipeline import CommitPipeline
from seqcommit.runtimeutil import get_log_dir_callback, version_callback


def load_global_config(repo_path: Path, custom_config_path: str | None, **input_args):
    # input args are the "runtime overrides" for configs
    config_args = {}

    for key, item in input_args.items():
        if item is not None:
            config_args[key] = item

    return ConfigLoader.get_full_config(
        GlobalConfig,
        config_args,
        repo_path / CONFIG_FILENAME,
        ENV_APP_PREFIX,
        GLOBAL_CONFIG_FILE,
        Path(custom_config_path) if custom_config_path is not None else None,
    )


def main(
    message: str | None = typer.Argument(
        None, help="Text appended to the commit number, as '<n>: <message>'."
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Print the commit message that would be used without committing.",
    ),
    repo_path: str = typer.Option(
        ".",
        "--repo",
        help="Path to the git repository to operate on.",
    ),
    custom_config: str | None = typer.Option(
        None,
        "--config",
        help="Path to a TOML config file. Must exist when given.",
    ),
    check_remote: bool | None = typer.Option(
        None,
        "--check-remote/--no-check-remote",
        help="Fetch and pull from the remote before committing.",
    ),
    remote_name: str | None = typer.Option(
        None,
        "--remote",
        help="Remote that must exist for fetch/pull to run (default: origin).",
    ),
    verbose: bool | None = typer.Option(
        None,
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
    silent: bool | None = typer.Option(
        None,
        "--silent",
        "-s",
        help="Do not output any text to the console, except for errors.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_path: bool = typer.Option(
        False,
        "--log-dir",
        callback=get_log_dir_callback,
        is_eager=True,
        help="Show log path (where logs for seqcommit live) and exit",
    ),
) -> None:
    """
    Stage every change and commit it with the next sequence number.

    Examples:
        # Commit as "<n>"
        seqcommit

        # Commit as "<n>: fix typo"
        seqcommit "fix typo"

        # Show the message without committing
        seqcommit --dry-run
    """
    with handle_seqcommit_exception(exit_on_fail=True):
        # initial setup of logger, will be updated once config is loaded
        setup_logger("commit", debug=verbose or False, silent=silent or False)

        repo = validate_repo_path(repo_path)
        config, used_config_sources, _ = load_global_config(
            repo,
            custom_config,
            check_remote=check_remote,
            remote_name=remote_name,
            verbose=verbose,
            silent=silent,
        )

        setup_logger("commit", debug=config.verbose, silent=config.silent)
        logger.debug(f"Used {used_config_sources} to build global context.")

        global_context = GlobalContext.from_repo_path(repo)
        run_config = RunConfiguration.from_global_config(
            config, normalize_user_message(message), dry_run
        )
        logger.debug(escape(f"{run_config=}"))

        CommitPipeline(
            global_context.git_commands, run_config, str(global_context.repo_path)
        ).run()
