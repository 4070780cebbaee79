"""Habits and their per-day check-ins.

A check-in is one ``HabitEntry`` row per (habit, date). Marking is an
upsert against that uniqueness constraint, so repeating a mark converges on
the same single row; clearing deletes the row and 404s if there was none.
"""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlmodel import Session, select

from ..dates import resolve_range, to_iso, today_local, validate_iso_date
from ..errors import CheckinNotFound, HabitNotFound, ValidationError
from ..models import Habit, HabitEntry, utcnow

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}


def _clean_name(name: Optional[str]) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Name is required")
    return name


def _clean_description(description: Optional[str]) -> Optional[str]:
    if description is None:
        return None
    description = description.strip()
    return description or None


def get_owned_habit(session: Session, user_id: int, habit_id: int) -> Habit:
    habit = session.get(Habit, habit_id)
    # same error for "missing" and "someone else's"
    if not habit or habit.user_id != user_id:
        raise HabitNotFound()
    return habit


def list_habits(session: Session, user_id: int) -> List[Habit]:
    statement = (
        select(Habit)
        .where(Habit.user_id == user_id)
        .order_by(Habit.created_at.desc(), Habit.id.desc())
    )
    return list(session.exec(statement).all())


def create_habit(
    session: Session, user_id: int, name: str, description: Optional[str] = None
) -> Habit:
    habit = Habit(
        user_id=user_id,
        name=_clean_name(name),
        description=_clean_description(description),
    )
    session.add(habit)
    session.commit()
    session.refresh(habit)
    return habit


def update_habit(session: Session, user_id: int, habit_id: int, changes: dict) -> Habit:
    values = {}
    if "name" in changes:
        values["name"] = _clean_name(changes["name"])
    if "description" in changes:
        values["description"] = _clean_description(changes["description"])

    habit = get_owned_habit(session, user_id, habit_id)
    if not values:
        return habit

    for key, value in values.items():
        setattr(habit, key, value)
    session.add(habit)
    session.commit()
    session.refresh(habit)
    return habit


def delete_habit(session: Session, user_id: int, habit_id: int) -> None:
    habit = get_owned_habit(session, user_id, habit_id)
    # entries go with it (ON DELETE CASCADE)
    session.delete(habit)
    session.commit()
    logger.info("Deleted habit %s for user %s", habit_id, user_id)


def list_entries_in_range(
    session: Session, habit_id: int, start: date, end: date
) -> List[HabitEntry]:
    statement = select(HabitEntry).where(
        HabitEntry.habit_id == habit_id,
        HabitEntry.entry_date >= start,
        HabitEntry.entry_date <= end,
    )
    return list(session.exec(statement).all())


def list_habits_with_entries(
    session: Session,
    user_id: int,
    start: Optional[str] = None,
    end: Optional[str] = None,
    days: Optional[int] = None,
    today: Optional[date] = None,
) -> List[dict]:
    range_start, range_end = resolve_range(start, end, days, today=today)

    results = []
    for habit in list_habits(session, user_id):
        entries = [
            {"date": to_iso(entry.entry_date), "completed": entry.completed}
            for entry in list_entries_in_range(session, habit.id, range_start, range_end)
        ]
        entries.sort(key=lambda entry: entry["date"], reverse=True)
        results.append(
            {
                "id": habit.id,
                "user_id": habit.user_id,
                "name": habit.name,
                "description": habit.description,
                "created_at": habit.created_at,
                "entries": entries,
            }
        )
    return results


def upsert_entry(session: Session, habit_id: int, entry_date: date, completed: bool) -> None:
    insert = _UPSERT_INSERTS[session.get_bind().dialect.name]

    statement = insert(HabitEntry.__table__).values(
        habit_id=habit_id,
        entry_date=entry_date,
        completed=completed,
        created_at=utcnow(),
    )
    statement = statement.on_conflict_do_update(
        index_elements=["habit_id", "entry_date"],
        set_={
            "completed": statement.excluded.completed,
            "created_at": statement.excluded.created_at,
        },
    )
    session.connection().execute(statement)
    session.commit()


def mark_habit_completion(
    session: Session,
    habit_id: int,
    user_id: int,
    entry_date: Optional[str] = None,
    completed: Optional[bool] = None,
) -> None:
    get_owned_habit(session, user_id, habit_id)
    day = validate_iso_date(entry_date if entry_date is not None else today_local())
    upsert_entry(session, habit_id, day, True if completed is None else completed)


def clear_habit_completion(session: Session, habit_id: int, user_id: int, entry_date: str) -> None:
    get_owned_habit(session, user_id, habit_id)
    day = validate_iso_date(entry_date)
    entry = session.exec(
        select(HabitEntry).where(HabitEntry.habit_id == habit_id, HabitEntry.entry_date == day)
    ).first()
    if entry is None:
        raise CheckinNotFound()
    session.delete(entry)
    session.commit()
