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

import typer
from colorama import init
from dotenv import find_dotenv, load_dotenv

from seqcommit.commands import commit
from seqcommit.constants import APP_NAME
from seqcommit.runtimeutil import ensure_utf8_output, setup_signal_handlers

app = typer.Typer(
    help=f"{APP_NAME}: commit every change as the next number in sequence",
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    add_completion=False,
)

# a single command, so typer runs it without a subcommand name
app.command(name="commit")(commit.main)


def run_app():
    """Run the application with global exception handling."""
    # Initialize colorama for cross-platform colored output
    init(autoreset=True)
    # force stdout to be utf8
    ensure_utf8_output()
    setup_signal_handlers()
    # load any .env files (config values possibly set through env)
    load_dotenv(find_dotenv(usecwd=True))
    app(prog_name=APP_NAME)


if __name__ == "__main__":
    run_app()
