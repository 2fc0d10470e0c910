"""Main entry point for StudyPlan CLI."""

import typer

from studyplan_cli.commands import (
    add_command,
    config_command,
    delete_command,
    edit_command,
    import_command,
    list_command,
    menu_command,
    plan_command,
    save_command,
    toggle_command,
    version_command,
)
from studyplan_cli.utils.typer_helpers import SuggestingGroup

# Create main app with custom group class
app = typer.Typer(
    name="studyplan",
    cls=SuggestingGroup,
    help="Track study tasks and plan what fits into today",
    no_args_is_help=True,
)

# Task commands
app.command("list")(list_command.list_tasks)
app.command("add")(add_command.add_task)
app.command("edit")(edit_command.edit_task)
app.command("delete")(delete_command.delete_task)
app.command("toggle")(toggle_command.toggle_task)
app.command("plan")(plan_command.plan_day)
app.command("import-sample")(import_command.import_sample)
app.command("save")(save_command.save_tasks)
app.command("menu")(menu_command.menu)
app.command("version")(version_command.version)

app.add_typer(config_command.app, name="config", help="Configuration management")


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
