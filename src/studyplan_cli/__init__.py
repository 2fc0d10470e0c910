"""StudyPlan CLI - track study tasks and plan your day."""

__version__ = "0.1.0"
