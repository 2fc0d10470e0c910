"""Typer commands of studyplan-cli."""
