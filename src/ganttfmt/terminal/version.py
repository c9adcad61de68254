# SPDX-License-Identifier: MIT

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

import typer

from ganttfmt.configuration import APP_NAME


def version() -> None:
    """Show the installed version."""
    try:
        typer.echo(package_version(APP_NAME))
    except PackageNotFoundError:
        typer.echo("unknown")
        raise typer.Exit(1)
