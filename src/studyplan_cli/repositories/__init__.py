"""Repository interfaces for the StudyPlan CLI.

Implementations (Adapters) are in:
- studyplan_cli.adapters.flatfile (pipe-delimited record file)
"""

from .repository import TaskRepository

__all__ = ["TaskRepository"]
