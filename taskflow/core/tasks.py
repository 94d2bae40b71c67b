# taskflow/core/tasks.py

import logging
from sqlalchemy.orm import Session

from taskflow.errors import ForbiddenError, NotFoundError, ValidationError
from taskflow.models import Task, TaskStatus, TASK_STATUSES
from taskflow.models.task import utcnow


logger = logging.getLogger(__name__)

# Fields a caller may change on an existing task
UPDATABLE_FIELDS = ("title", "description", "status")


def _require_text(name: str, value) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} is required")
    return value


def _check_status(value) -> str:
    if value not in TASK_STATUSES:
        allowed = ", ".join(f'"{s}"' for s in TASK_STATUSES)
        raise ValidationError(f"Invalid status {value!r}; expected one of {allowed}")
    return value


def _load_owned(db: Session, caller_id: str, task_id: str, hide_foreign: bool) -> Task:
    """
    Loads a task and checks it belongs to the caller.
    With hide_foreign, tasks of other users are reported as missing.
    """
    task = db.get(Task, task_id)
    if task is None:
        raise NotFoundError("Task not found")
    if str(task.owner_id) != str(caller_id):
        logger.warning("User %s denied access to task %s", caller_id, task_id)
        if hide_foreign:
            raise NotFoundError("Task not found")
        raise ForbiddenError("Forbidden")
    return task


# -------------------------------
# Task Operations
# -------------------------------

def add_task(db: Session, caller_id: str, title: str | None, description: str | None,
             status: str | None = None) -> Task:
    task = Task(
        title=_require_text("title", title),
        description=_require_text("description", description),
        status=TaskStatus.TODO.value if status is None else _check_status(status),
        owner_id=caller_id,
        created_at=utcnow(),
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info("User %s added task %s", caller_id, task.id)
    return task


def list_tasks(db: Session, caller_id: str) -> list[Task]:
    return (
        db.query(Task)
        .filter(Task.owner_id == caller_id)
        .order_by(Task.created_at.desc())
        .all()
    )


def get_task(db: Session, caller_id: str, task_id: str, hide_foreign: bool = False) -> Task:
    return _load_owned(db, caller_id, task_id, hide_foreign)


def update_task(db: Session, caller_id: str, task_id: str, fields: dict,
                hide_foreign: bool = False) -> Task:
    """
    Merges title, description and/or status onto a task.
    Any other key is rejected, so identity and ownership columns stay fixed.
    """
    unknown = sorted(set(fields) - set(UPDATABLE_FIELDS))
    if unknown:
        raise ValidationError(f"Unknown fields: {', '.join(unknown)}")

    task = _load_owned(db, caller_id, task_id, hide_foreign)

    changes = {}
    for name, value in fields.items():
        changes[name] = _check_status(value) if name == "status" else _require_text(name, value)

    for name, value in changes.items():
        setattr(task, name, value)
    db.commit()
    db.refresh(task)
    return task


def update_status(db: Session, caller_id: str, task_id: str, status: str | None = None,
                  hide_foreign: bool = False) -> Task:
    task = _load_owned(db, caller_id, task_id, hide_foreign)
    if status is not None:
        task.status = _check_status(status)
        db.commit()
        db.refresh(task)
    return task


def delete_task(db: Session, caller_id: str, task_id: str, hide_foreign: bool = False) -> None:
    task = _load_owned(db, caller_id, task_id, hide_foreign)
    db.delete(task)
    db.commit()
    logger.info("User %s deleted task %s", caller_id, task_id)
