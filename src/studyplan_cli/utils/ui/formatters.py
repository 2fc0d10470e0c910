"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from studyplan_cli.utils.ui.console import get_console

console = get_console()

# Priority colors; values outside 1-3 are clamped
PRIORITY_COLORS = {
    1: "bold red",
    2: "bold yellow",
    3: "green",
}

STATUS_ICONS = {
    "open": "⬜",
    "completed": "☑️",
}


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_table(data)
    else:
        format_pretty(data)


def format_table(data: Any) -> None:
    """Format data as a table."""
    if isinstance(data, dict) and "tasks" in data:
        format_dict_table(data["tasks"])
    elif isinstance(data, list):
        format_dict_table(data)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    columns = list(items[0].keys())
    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())

    for item in items:
        row = []
        for col in columns:
            value = item.get(col, "")
            if isinstance(value, bool):
                value = "✓" if value else "✗"
            elif value is None or value == "":
                value = "-"
            else:
                value = str(value)
            row.append(escape(value))
        table.add_row(*row)

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        if isinstance(value, bool):
            formatted_value = "✓" if value else "✗"
        elif value is None:
            formatted_value = "-"
        else:
            formatted_value = str(value)
        table.add_row(key.replace("_", " ").title(), escape(formatted_value))

    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_warning(message: str, console: Console = console) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {escape(message)}")


# ============================================================================
# Pretty Format Implementation
# ============================================================================


def task_line(task: dict) -> str:
    """Render a task as a single plain-text line.

    ``[X] ID:3 | Revise Networking notes | Subject: Networking | 45m | Pri:1 | Due: 2025-11-19``
    """
    mark = "X" if task.get("completed") else " "
    return (
        f"[{mark}] ID:{task['id']} | {task.get('title', '')}"
        f" | Subject: {task.get('subject', '')}"
        f" | {task.get('duration_minutes', 0)}m"
        f" | Pri:{task.get('priority', '')}"
        f" | Due: {task.get('due_date', '')}"
    )


def format_task_item(task: dict, indent: str = "") -> None:
    """Format a single task item with colors."""
    completed = task.get("completed", False)
    icon = STATUS_ICONS["completed"] if completed else STATUS_ICONS["open"]
    priority = task.get("priority", 1)
    color = PRIORITY_COLORS[min(max(priority, 1), 3)]

    line = Text(f"{indent}{icon} ")
    line.append(f"#{task['id']} ", style="dim")
    line.append(task.get("title", "") or "Untitled", style="dim" if completed else "")
    if task.get("subject"):
        line.append(f" [{task['subject']}]", style="blue")
    line.append(f" • {task.get('duration_minutes', 0)}m", style="cyan")
    line.append(f" • P{priority}", style="dim" if completed else color)
    if task.get("due_date"):
        line.append(f" • 📅 {task['due_date']}", style="cyan")
    console.print(line)


def format_tasks_pretty(tasks: list[dict]) -> None:
    """Format tasks in pretty format, keeping the order given."""
    if not tasks:
        console.print("No tasks yet.")
        return

    active = [t for t in tasks if not t.get("completed")]
    header = Text()
    header.append("📋 Tasks ", style="bold cyan")
    header.append(f"({len(active)} active, {len(tasks) - len(active)} completed)", style="dim")
    console.print(header)
    console.print()

    for task in tasks:
        format_task_item(task, indent="  ")


def format_pretty(data: Any) -> None:
    """Format data in pretty format with colors and icons."""
    if isinstance(data, dict) and "plan" in data:
        format_plan_pretty(data["plan"])
    elif isinstance(data, dict) and "tasks" in data:
        format_tasks_pretty(data["tasks"])
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


PLAN_MESSAGES = {
    "no_tasks": "No incomplete tasks.",
    "nothing_fits": (
        "No single task fits into the available time. "
        "Consider breaking tasks into smaller chunks."
    ),
}


def plan_summary(plan: dict) -> str:
    """One-line summary of a plan, or the reason it is empty."""
    if plan["outcome"] in PLAN_MESSAGES:
        return PLAN_MESSAGES[plan["outcome"]]
    return (
        f"Total scheduled: {plan['total_minutes']}m. "
        f"Free time left: {plan['time_left']}m."
    )


def format_plan_pretty(plan: dict) -> None:
    """Format a daily plan."""
    if plan["outcome"] == "no_tasks":
        console.print(f"[yellow]{plan_summary(plan)}[/yellow]")
        return

    console.print()
    console.print("--- Suggested Plan for Today ---", style="bold cyan")
    if plan["outcome"] == "nothing_fits":
        console.print(f"[yellow]{plan_summary(plan)}[/yellow]")
    else:
        for task in plan["tasks"]:
            format_task_item(task)
        console.print(f"[bold]{plan_summary(plan)}[/bold]")
    console.print("--------------------------------", style="bold cyan")
