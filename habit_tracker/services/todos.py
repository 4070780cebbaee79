import logging
from typing import List

from sqlmodel import Session, select

from ..errors import TodoNotFound, ValidationError
from ..models import Todo

logger = logging.getLogger(__name__)


def _clean_title(title: str) -> str:
    title = (title or "").strip()
    if not title:
        raise ValidationError("Title is required")
    return title


def _get_owned_todo(session: Session, user_id: int, todo_id: int) -> Todo:
    todo = session.get(Todo, todo_id)
    if not todo or todo.user_id != user_id:
        raise TodoNotFound()
    return todo


def list_todos(session: Session, user_id: int) -> List[Todo]:
    statement = (
        select(Todo)
        .where(Todo.user_id == user_id)
        .order_by(Todo.created_at.desc(), Todo.id.desc())
    )
    return list(session.exec(statement).all())


def create_todo(session: Session, user_id: int, title: str) -> Todo:
    todo = Todo(user_id=user_id, title=_clean_title(title))
    session.add(todo)
    session.commit()
    session.refresh(todo)
    return todo


def update_todo(session: Session, user_id: int, todo_id: int, title: str) -> Todo:
    title = _clean_title(title)
    todo = _get_owned_todo(session, user_id, todo_id)
    todo.title = title
    session.add(todo)
    session.commit()
    session.refresh(todo)
    return todo


def delete_todo(session: Session, user_id: int, todo_id: int) -> None:
    todo = _get_owned_todo(session, user_id, todo_id)
    session.delete(todo)
    session.commit()
    logger.debug("Deleted todo %s for user %s", todo_id, user_id)
