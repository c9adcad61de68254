# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.table import Table

from ganttfmt import configuration
from ganttfmt.console import console
from ganttfmt.repository.configuration import CONFIGURATION_REPO
from ganttfmt.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("column_gap", str(config["column_gap"]))
    table.add_row("section_indent", str(config["section_indent"]))
    table.add_row("task_indent", str(config["task_indent"]))
    table.add_row("collapse_empty_columns", _enabled(config["collapse_empty_columns"]))
    table.add_row(
        "blank_line_before_first_section",
        _enabled(config["blank_line_before_first_section"]),
    )
    table.add_row("strict", _enabled(config["strict"]))
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set_config(
    column_gap: Annotated[
        Optional[int],
        typer.Option("--column-gap", min=0, help="Spaces between metadata columns"),
    ] = None,
    section_indent: Annotated[
        Optional[int],
        typer.Option(
            "--section-indent",
            min=0,
            help="Indent of directives, section headers and passthrough lines",
        ),
    ] = None,
    task_indent: Annotated[
        Optional[int],
        typer.Option("--task-indent", min=0, help="Indent of task lines"),
    ] = None,
    collapse_empty_columns: Annotated[
        Optional[bool],
        typer.Option(
            "--collapse-empty-columns/--keep-empty-columns",
            help="Elide columns that no task uses",
            show_default=False,
        ),
    ] = None,
    blank_line_before_first_section: Annotated[
        Optional[bool],
        typer.Option(
            "--blank-line-before-first-section/--no-blank-line-before-first-section",
            help="Separate the first section from the directives with a blank line",
            show_default=False,
        ),
    ] = None,
    strict: Annotated[
        Optional[bool],
        typer.Option(
            "--strict/--no-strict",
            help="Reject lines without a colon instead of passing them through",
            show_default=False,
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        column_gap=column_gap,
        section_indent=section_indent,
        task_indent=task_indent,
        collapse_empty_columns=collapse_empty_columns,
        blank_line_before_first_section=blank_line_before_first_section,
        strict=strict,
    )
    console.print("[green]Configuration updated[/green]")
