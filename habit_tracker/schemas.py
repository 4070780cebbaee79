from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictBool, field_validator

from .models import TaskStatus


class ORMModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# ----- Auth -----
class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8)
    name: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value.strip()


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class UserRead(ORMModel):
    id: int
    email: str
    name: str


class AuthResponse(BaseModel):
    token: str
    user: UserRead


# ----- Todos -----
class TodoWrite(BaseModel):
    title: str


class TodoRead(ORMModel):
    id: int
    user_id: int
    title: str
    created_at: datetime


class TodoEnvelope(BaseModel):
    todo: TodoRead


class TodoList(BaseModel):
    todos: List[TodoRead]


# ----- Tasks -----
class TaskCreate(BaseModel):
    title: str
    description: Optional[str] = Field(default=None, max_length=1000)
    due_date: Optional[datetime] = None


class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=1000)
    due_date: Optional[datetime] = None
    status: Optional[TaskStatus] = None


class TaskRead(ORMModel):
    id: int
    user_id: int
    title: str
    description: Optional[str]
    due_date: Optional[datetime]
    status: TaskStatus
    created_at: datetime
    updated_at: datetime


class TaskEnvelope(BaseModel):
    task: TaskRead


class TaskList(BaseModel):
    tasks: List[TaskRead]


# ----- Habits -----
class HabitCreate(BaseModel):
    name: str
    description: Optional[str] = Field(default=None, max_length=300)


class HabitUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=300)


class HabitRead(ORMModel):
    id: int
    user_id: int
    name: str
    description: Optional[str]
    created_at: datetime


class HabitEnvelope(BaseModel):
    habit: HabitRead


class EntryRead(BaseModel):
    date: str
    completed: bool


class HabitWithEntries(HabitRead):
    entries: List[EntryRead]


class HabitList(BaseModel):
    habits: List[HabitWithEntries]


class CheckinRequest(BaseModel):
    date: Optional[str] = None
    completed: Optional[StrictBool] = None
