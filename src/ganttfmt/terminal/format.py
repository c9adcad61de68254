# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from ganttfmt.console import console, err_console
from ganttfmt.model.options import FormatOptions, options_from_config
from ganttfmt.repository.configuration import CONFIGURATION_REPO
from ganttfmt.service.file import read_text, write_text_atomic
from ganttfmt.service.format import format_text
from ganttfmt.service.parse import GanttParseError

logger = logging.getLogger(__name__)

STDOUT_PATH = "-"


def format_command(
    input_path: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Gantt diagram to format",
        ),
    ],
    output_path: Annotated[
        Optional[str],
        typer.Argument(
            help="Destination file, '-' for stdout. Formats in place when omitted",
            show_default=False,
        ),
    ] = None,
    check: Annotated[
        bool,
        typer.Option(
            "--check",
            help="Write nothing; exit with 1 if the file is not already formatted",
        ),
    ] = False,
    gap: Annotated[
        Optional[int],
        typer.Option("--gap", "-g", min=0, help="Spaces between metadata columns"),
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
    """
    Align the task columns of a Mermaid gantt diagram.
    """
    config = CONFIGURATION_REPO.get_config()
    if gap is not None:
        config["column_gap"] = gap
    if strict is not None:
        config["strict"] = strict

    try:
        options: FormatOptions = options_from_config(config)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] invalid configuration: {e}")
        raise typer.Exit(1)

    try:
        original = read_text(input_path)
    except UnicodeDecodeError as e:
        err_console.print(
            f"[red]Error:[/red] {escape(str(input_path))} is not UTF-8: {e}"
        )
        raise typer.Exit(1)

    try:
        formatted = format_text(original, options)
    except GanttParseError as e:
        err_console.print(
            f"[red]Error:[/red] {escape(str(input_path))}: {escape(str(e))}",
            highlight=False,
            soft_wrap=True,
        )
        raise typer.Exit(1)

    if check:
        if formatted != original:
            console.print(
                f"would reformat {escape(str(input_path))}",
                highlight=False,
                soft_wrap=True,
            )
            raise typer.Exit(1)
        return

    if output_path == STDOUT_PATH:
        typer.echo(formatted, nl=False)
        return

    destination = input_path if output_path is None else Path(output_path)
    if destination == input_path and formatted == original:
        logger.debug("%s already formatted", input_path)
        return

    write_text_atomic(destination, formatted)
    logger.debug("wrote %s", destination)
