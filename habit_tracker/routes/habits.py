from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from ..deps import get_current_user, get_session
from ..schemas import CheckinRequest, HabitCreate, HabitEnvelope, HabitList, HabitUpdate
from ..security import CurrentUser
from ..services import habits as habit_service

router = APIRouter(prefix="/habits", tags=["habits"])


@router.get("", response_model=HabitList)
def list_habits(
    start: Optional[str] = None,
    end: Optional[str] = None,
    days: Optional[int] = None,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    habits = habit_service.list_habits_with_entries(
        session, current_user.id, start=start, end=end, days=days
    )
    return {"habits": habits}


@router.post("", response_model=HabitEnvelope, status_code=status.HTTP_201_CREATED)
def create_habit(
    payload: HabitCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    habit = habit_service.create_habit(session, current_user.id, payload.name, payload.description)
    return {"habit": habit}


@router.put("/{habit_id}", response_model=HabitEnvelope)
def update_habit(
    habit_id: int,
    payload: HabitUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    changes = payload.model_dump(exclude_unset=True)
    return {"habit": habit_service.update_habit(session, current_user.id, habit_id, changes)}


@router.delete("/{habit_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_habit(
    habit_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    habit_service.delete_habit(session, current_user.id, habit_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{habit_id}/checkins", status_code=status.HTTP_204_NO_CONTENT)
def mark_habit(
    habit_id: int,
    payload: Optional[CheckinRequest] = None,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    payload = payload or CheckinRequest()
    habit_service.mark_habit_completion(
        session, habit_id, current_user.id, entry_date=payload.date, completed=payload.completed
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{habit_id}/checkins/{entry_date}", status_code=status.HTTP_204_NO_CONTENT)
def clear_habit(
    habit_id: int,
    entry_date: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    habit_service.clear_habit_completion(session, habit_id, current_user.id, entry_date)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
