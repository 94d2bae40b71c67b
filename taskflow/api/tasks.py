# taskflow/api/tasks.py

from datetime import datetime
from pydantic import BaseModel, ConfigDict
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from taskflow.api.deps import get_current_user_id, get_settings
from taskflow.config import Settings
from taskflow.core import tasks as task_service
from taskflow.database import get_db


router = APIRouter()


class TaskCreateRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    status: str | None = None


class TaskUpdateRequest(BaseModel):
    """
    Only these fields may be changed; anything else is rejected.
    """
    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    description: str | None = None
    status: str | None = None


class StatusUpdateRequest(BaseModel):
    status: str | None = None


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    status: str
    owner_id: str
    created_at: datetime


class TaskEnvelope(BaseModel):
    message: str
    task: TaskOut


class MessageResponse(BaseModel):
    message: str


@router.post("/addTask", response_model=TaskEnvelope, status_code=status.HTTP_201_CREATED)
def add_task(req: TaskCreateRequest,
             current_user: str = Depends(get_current_user_id),
             db: Session = Depends(get_db)):
    task = task_service.add_task(db, current_user, req.title, req.description, req.status)
    return {"message": "Task added", "task": task}


@router.get("/getTask", response_model=list[TaskOut])
def list_tasks(current_user: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return task_service.list_tasks(db, current_user)


@router.get("/getSingleTask/{task_id}", response_model=TaskOut)
def get_task(task_id: str,
             current_user: str = Depends(get_current_user_id),
             db: Session = Depends(get_db),
             settings: Settings = Depends(get_settings)):
    return task_service.get_task(db, current_user, task_id, settings.hide_foreign_tasks)


@router.put("/updateTask/{task_id}", response_model=TaskEnvelope)
def update_task(task_id: str,
                req: TaskUpdateRequest,
                current_user: str = Depends(get_current_user_id),
                db: Session = Depends(get_db),
                settings: Settings = Depends(get_settings)):
    task = task_service.update_task(
        db, current_user, task_id,
        req.model_dump(exclude_unset=True),
        settings.hide_foreign_tasks,
    )
    return {"message": "Task updated", "task": task}


@router.put("/updateStatus/{task_id}", response_model=TaskEnvelope)
def update_status(task_id: str,
                  req: StatusUpdateRequest | None = Body(default=None),
                  current_user: str = Depends(get_current_user_id),
                  db: Session = Depends(get_db),
                  settings: Settings = Depends(get_settings)):
    new_status = req.status if req is not None else None
    task = task_service.update_status(db, current_user, task_id, new_status, settings.hide_foreign_tasks)
    return {"message": "Status updated", "task": task}


@router.delete("/deleteTask/{task_id}", response_model=MessageResponse)
def delete_task(task_id: str,
                current_user: str = Depends(get_current_user_id),
                db: Session = Depends(get_db),
                settings: Settings = Depends(get_settings)):
    task_service.delete_task(db, current_user, task_id, settings.hide_foreign_tasks)
    return {"message": "Task deleted"}
