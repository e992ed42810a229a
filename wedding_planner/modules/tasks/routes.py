from fastapi import APIRouter, Depends
from wedding_planner.database.supabase_client import get_supabase
from wedding_planner.modules.tasks.schemas import TaskCreate, TaskUpdate, TaskResponse, TaskStats
from wedding_planner.modules.tasks.service import TaskService
from wedding_planner.modules.events.service import EventService
from wedding_planner.core.dependencies import get_session, check_event_access, check_record_event_access
from wedding_planner.core.session import SessionContext
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_task_service(supabase: Client = Depends(get_supabase)) -> TaskService:
    return TaskService(supabase)


def get_event_service(supabase: Client = Depends(get_supabase)) -> EventService:
    return EventService(supabase)


@router.get("", response_model=List[TaskResponse])
async def list_my_tasks(
    session: SessionContext = Depends(get_session),
    service: TaskService = Depends(get_task_service)
):
    """Tasks across all of the caller's events"""
    return service.get_user_tasks(session.user_id)


@router.get("/overdue", response_model=List[TaskResponse])
async def list_overdue_tasks(
    event_id: Optional[str] = None,
    session: SessionContext = Depends(get_session),
    service: TaskService = Depends(get_task_service)
):
    return service.get_overdue_tasks(session.user_id, event_id)


@router.get("/upcoming", response_model=List[TaskResponse])
async def list_upcoming_tasks(
    event_id: Optional[str] = None,
    session: SessionContext = Depends(get_session),
    service: TaskService = Depends(get_task_service)
):
    return service.get_upcoming_tasks(session.user_id, event_id)


@router.get("/stats", response_model=TaskStats)
async def get_task_stats(
    event_id: Optional[str] = None,
    session: SessionContext = Depends(get_session),
    service: TaskService = Depends(get_task_service)
):
    return service.get_task_stats(session.user_id, event_id)


@router.get("/event/{event_id}", response_model=List[TaskResponse])
async def list_event_tasks(
    event_id: str,
    session: SessionContext = Depends(get_session),
    service: TaskService = Depends(get_task_service),
    supabase: Client = Depends(get_supabase)
):
    """Tasks of one event (owner or admin)"""
    check_event_access(event_id, session, supabase)
    return service.get_event_tasks(event_id)


@router.post("", response_model=TaskResponse, status_code=201)
async def create_task(
    task_data: TaskCreate,
    session: SessionContext = Depends(get_session),
    service: TaskService = Depends(get_task_service),
    event_service: EventService = Depends(get_event_service),
    supabase: Client = Depends(get_supabase)
):
    """Create a task and refresh the event's progress"""
    check_event_access(task_data.event_id, session, supabase)
    task = service.create_task(task_data)
    event_service.update_event_progress(task.event_id)
    return task


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    task_data: TaskUpdate,
    session: SessionContext = Depends(get_session),
    service: TaskService = Depends(get_task_service),
    event_service: EventService = Depends(get_event_service),
    supabase: Client = Depends(get_supabase)
):
    check_record_event_access("tasks", task_id, session, supabase)
    task = service.update_task(task_id, task_data)
    event_service.update_event_progress(task.event_id)
    return task


@router.post("/{task_id}/complete", response_model=TaskResponse)
async def complete_task(
    task_id: str,
    session: SessionContext = Depends(get_session),
    service: TaskService = Depends(get_task_service),
    event_service: EventService = Depends(get_event_service),
    supabase: Client = Depends(get_supabase)
):
    """Mark a task complete and refresh the event's progress"""
    check_record_event_access("tasks", task_id, session, supabase)
    task = service.complete_task(task_id)
    event_service.update_event_progress(task.event_id)
    return task


@router.delete("/{task_id}", status_code=204)
async def delete_task(
    task_id: str,
    session: SessionContext = Depends(get_session),
    service: TaskService = Depends(get_task_service),
    event_service: EventService = Depends(get_event_service),
    supabase: Client = Depends(get_supabase)
):
    record = check_record_event_access("tasks", task_id, session, supabase)
    service.delete_task(task_id)
    event_service.update_event_progress(record["event_id"])
    return None
