# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from ganttfmt.console import configure_logging
from ganttfmt.terminal import configuration
from ganttfmt.terminal.custom_typer import DefaultCommandTyperGroup
from ganttfmt.terminal.format import format_command
from ganttfmt.terminal.version import version

app = typer.Typer(
    cls=DefaultCommandTyperGroup,
    help="ganttfmt - Align the columns of Mermaid gantt diagrams",
    no_args_is_help=True,
)
app.command(name="format, f")(format_command)
app.add_typer(configuration.app, name="config, c", help="View or change settings")
app.command(name="version, ve")(version)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log parsing details to stderr"),
    ] = False,
) -> None:
    """
    ganttfmt - Align the columns of Mermaid gantt diagrams

    Global options that apply to all commands.
    """
    configure_logging(verbose)


def run() -> None:
    app()
