from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from ..deps import get_current_user, get_session
from ..schemas import TaskCreate, TaskEnvelope, TaskList, TaskUpdate
from ..security import CurrentUser
from ..services import tasks as task_service

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=TaskList)
def list_tasks(
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return {"tasks": task_service.list_tasks(session, current_user.id)}


@router.post("", response_model=TaskEnvelope, status_code=status.HTTP_201_CREATED)
def create_task(
    payload: TaskCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    task = task_service.create_task(
        session, current_user.id, payload.title, payload.description, payload.due_date
    )
    return {"task": task}


@router.get("/{task_id}", response_model=TaskEnvelope)
def get_task(
    task_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return {"task": task_service.get_task(session, current_user.id, task_id)}


@router.put("/{task_id}", response_model=TaskEnvelope)
def update_task(
    task_id: int,
    payload: TaskUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    changes = payload.model_dump(exclude_unset=True)
    return {"task": task_service.update_task(session, current_user.id, task_id, changes)}


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    task_service.delete_task(session, current_user.id, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
