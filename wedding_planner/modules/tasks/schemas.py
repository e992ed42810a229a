from pydantic import BaseModel
from typing import Literal, Optional
import datetime as dt

TaskPriority = Literal["low", "medium", "high"]


class TaskCreate(BaseModel):
    event_id: str
    title: str
    description: Optional[str] = None
    due_date: Optional[dt.date] = None
    assignee: Optional[str] = None
    priority: TaskPriority = "medium"
    category: Optional[str] = None
    completed: bool = False


class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[dt.date] = None
    assignee: Optional[str] = None
    priority: Optional[TaskPriority] = None
    category: Optional[str] = None
    completed: Optional[bool] = None


class TaskResponse(BaseModel):
    id: str
    event_id: str
    title: str
    description: Optional[str] = None
    due_date: Optional[dt.date] = None
    assignee: Optional[str] = None
    completed: bool = False
    completed_at: Optional[dt.datetime] = None
    priority: Optional[str] = "medium"
    category: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    events: Optional[dict] = None  # Embedded parent event on cross-event listings

    class Config:
        from_attributes = True


class TaskStats(BaseModel):
    total: int
    completed: int
    pending: int
    completionRate: int
