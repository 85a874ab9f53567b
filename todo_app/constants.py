"""Application-wide constants"""


class TaskStatus:
    """Task status constants

    Centralizes all task status values to avoid magic strings throughout the codebase.
    """
    NOT_STARTED = "NotStarted"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"

    @classmethod
    def all(cls):
        """Return list of all valid status values"""
        return [cls.NOT_STARTED, cls.IN_PROGRESS, cls.COMPLETED]

    @classmethod
    def is_valid(cls, status):
        """Check if a status value is valid"""
        return status in cls.all()


NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100

PRIORITY_HIGHEST = 1
PRIORITY_LOWEST = 10

# Demonstration data added by TaskStore.seed()
DEMO_TASKS = [
    {"name": "Design API", "priority": 1, "status": TaskStatus.COMPLETED},
    {"name": "Implement Services", "priority": 2, "status": TaskStatus.IN_PROGRESS},
    {"name": "Write Unit Tests", "priority": 3, "status": TaskStatus.NOT_STARTED},
]
