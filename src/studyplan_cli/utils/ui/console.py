"""Console utilities for StudyPlan CLI."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=4)
def get_console(highlight: bool = True, stderr: bool = False) -> Console:
    """Shared Rich console; ``stderr=True`` keeps notices out of piped output."""
    return Console(highlight=highlight, stderr=stderr)
