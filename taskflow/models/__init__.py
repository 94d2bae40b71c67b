# taskflow/models/__init__.py

from sqlalchemy.orm import declarative_base


Base = declarative_base()


from .user import User  # noqa: E402
from .task import Task, TaskStatus, TASK_STATUSES  # noqa: E402

__all__ = ["Base", "User", "Task", "TaskStatus", "TASK_STATUSES"]
