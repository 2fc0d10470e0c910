"""Command 'version' of studyplan-cli"""

import typer

from studyplan_cli import __version__
from studyplan_cli.utils.ui.console import get_console

app = typer.Typer()
console = get_console(highlight=False)


@app.command()
def version() -> None:
    """Show version information"""
    console.print(__version__)
