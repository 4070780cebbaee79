from datetime import datetime
from typing import List, Optional

from sqlmodel import Session, select

from ..errors import TaskNotFound, ValidationError
from ..models import Task, TaskStatus, utcnow

_UPDATABLE = ("title", "description", "due_date", "status")


def _clean_title(title: Optional[str]) -> str:
    title = (title or "").strip()
    if not title:
        raise ValidationError("Title is required")
    return title


def list_tasks(session: Session, user_id: int) -> List[Task]:
    statement = (
        select(Task)
        .where(Task.user_id == user_id)
        .order_by(Task.created_at.desc(), Task.id.desc())
    )
    return list(session.exec(statement).all())


def get_task(session: Session, user_id: int, task_id: int) -> Task:
    task = session.get(Task, task_id)
    if not task or task.user_id != user_id:
        raise TaskNotFound()
    return task


def create_task(
    session: Session,
    user_id: int,
    title: str,
    description: Optional[str] = None,
    due_date: Optional[datetime] = None,
) -> Task:
    task = Task(
        user_id=user_id,
        title=_clean_title(title),
        description=description,
        due_date=due_date,
    )
    session.add(task)
    session.commit()
    session.refresh(task)
    return task


def update_task(session: Session, user_id: int, task_id: int, changes: dict) -> Task:
    """Apply the supplied fields only; ``None`` clears description/due_date."""
    changes = {key: value for key, value in changes.items() if key in _UPDATABLE}
    if "title" in changes:
        changes["title"] = _clean_title(changes["title"])
    if "status" in changes:
        if changes["status"] is None:
            raise ValidationError("status must not be null")
        changes["status"] = TaskStatus(changes["status"])

    task = get_task(session, user_id, task_id)
    if not changes:
        return task

    for key, value in changes.items():
        setattr(task, key, value)
    task.updated_at = utcnow()
    session.add(task)
    session.commit()
    session.refresh(task)
    return task


def delete_task(session: Session, user_id: int, task_id: int) -> None:
    task = get_task(session, user_id, task_id)
    session.delete(task)
    session.commit()
