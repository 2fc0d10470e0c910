"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from rich.markup import escape
from typer.core import TyperGroup

from studyplan_cli.utils.ui.console import get_console


class SuggestingGroup(TyperGroup):
    """Command group answering a mistyped command with close matches.

    ``studyplan plna`` prints "Did you mean this? plan" and exits with 1;
    input with no close match falls through to the usual usage error.
    """

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            suggestions = get_close_matches(args[0], self.commands, n=3) if args else []
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f'[red]Error:[/red] unknown command "{escape(args[0])}" for "{ctx.info_name}"\n'
            )
            heading = "Did you mean this?" if len(suggestions) == 1 else "Did you mean one of these?"
            console.print(f"[yellow]{heading}[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {suggestion}")
            raise typer.Exit(1) from e
