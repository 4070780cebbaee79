from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from ..deps import get_current_user, get_session
from ..schemas import TodoEnvelope, TodoList, TodoWrite
from ..security import CurrentUser
from ..services import todos as todo_service

router = APIRouter(prefix="/todos", tags=["todos"])


@router.get("", response_model=TodoList)
def list_todos(
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return {"todos": todo_service.list_todos(session, current_user.id)}


@router.post("", response_model=TodoEnvelope, status_code=status.HTTP_201_CREATED)
def create_todo(
    payload: TodoWrite,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return {"todo": todo_service.create_todo(session, current_user.id, payload.title)}


@router.put("/{todo_id}", response_model=TodoEnvelope)
def update_todo(
    todo_id: int,
    payload: TodoWrite,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return {"todo": todo_service.update_todo(session, current_user.id, todo_id, payload.title)}


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_todo(
    todo_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    todo_service.delete_todo(session, current_user.id, todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
