"""Built-in sample dataset for trying the planner."""

from studyplan_cli.models import TaskCreate

SAMPLE_TASKS: tuple[TaskCreate, ...] = (
    TaskCreate(
        title="Read OS: Paging",
        subject="Operating Systems",
        duration_minutes=60,
        priority=1,
        due_date="2025-11-20",
    ),
    TaskCreate(
        title="Practice DB SQL queries",
        subject="Database Systems",
        duration_minutes=90,
        priority=2,
        due_date="2025-11-25",
    ),
    TaskCreate(
        title="Revise Networking notes",
        subject="Networking",
        duration_minutes=45,
        priority=1,
        due_date="2025-11-19",
    ),
    TaskCreate(
        title="Implement C++ assignment",
        subject="Programming",
        duration_minutes=120,
        priority=3,
        due_date="2025-11-30",
    ),
)
