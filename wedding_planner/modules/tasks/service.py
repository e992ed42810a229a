from supabase import Client
from wedding_planner.config import settings
from wedding_planner.core.math_utils import percentage
from wedding_planner.core.session import ensure_authenticated
from wedding_planner.modules.tasks.schemas import TaskCreate, TaskUpdate, TaskResponse, TaskStats
from typing import Any, Dict, Iterable, List, Optional
from fastapi import HTTPException
from datetime import date, datetime, timedelta, timezone
import logging

logger = logging.getLogger(__name__)


def compute_task_stats(tasks: Iterable[Dict[str, Any]]) -> TaskStats:
    tasks = list(tasks)
    total = len(tasks)
    completed = len([task for task in tasks if task.get("completed")])
    return TaskStats(
        total=total,
        completed=completed,
        pending=total - completed,
        completionRate=percentage(completed, total)
    )


class TaskService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_event_tasks(self, event_id: str) -> List[TaskResponse]:
        """Tasks of one event ordered by due date"""
        try:
            result = self.supabase.table("tasks")\
                .select("*")\
                .eq("event_id", event_id)\
                .order("due_date", desc=False)\
                .execute()
            return [TaskResponse(**task) for task in result.data]
        except Exception as e:
            logger.error(f"Error fetching tasks: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_user_tasks(self, user_id: Optional[str]) -> List[TaskResponse]:
        """Tasks across all events created by the user, with the parent event embedded"""
        user_id = ensure_authenticated(user_id)
        try:
            result = self.supabase.table("tasks")\
                .select("*, events!inner(title, date, venue)")\
                .eq("events.created_by", user_id)\
                .order("due_date", desc=False)\
                .execute()
            return [TaskResponse(**task) for task in result.data]
        except Exception as e:
            logger.error(f"Error fetching user tasks: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_task_by_id(self, task_id: str) -> TaskResponse:
        """Get task by ID"""
        try:
            result = self.supabase.table("tasks")\
                .select("*")\
                .eq("id", task_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Task not found")

            return TaskResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def create_task(self, task_data: TaskCreate) -> TaskResponse:
        """Create a new task"""
        try:
            insert_data = task_data.model_dump(mode="json")
            if task_data.completed:
                insert_data["completed_at"] = datetime.now(timezone.utc).isoformat()

            result = self.supabase.table("tasks").insert(insert_data).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create task")

            return TaskResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error creating task: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def update_task(self, task_id: str, task_data: TaskUpdate) -> TaskResponse:
        """Partial update of a task; toggling completed keeps completed_at in step"""
        try:
            update_data = task_data.model_dump(mode="json", exclude_unset=True)
            if not update_data:
                return self.get_task_by_id(task_id)

            if "completed" in update_data:
                update_data["completed_at"] = datetime.now(timezone.utc).isoformat() if update_data["completed"] else None

            result = self.supabase.table("tasks")\
                .update(update_data)\
                .eq("id", task_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Task not found")

            return TaskResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating task: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def delete_task(self, task_id: str) -> bool:
        """Delete task"""
        try:
            self.supabase.table("tasks")\
                .delete()\
                .eq("id", task_id)\
                .execute()
            return True
        except Exception as e:
            logger.error(f"Error deleting task: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def complete_task(self, task_id: str) -> TaskResponse:
        """Mark task as completed"""
        return self.update_task(task_id, TaskUpdate(completed=True))

    def get_overdue_tasks(
        self,
        user_id: Optional[str],
        event_id: Optional[str] = None,
        today: Optional[date] = None
    ) -> List[TaskResponse]:
        """Incomplete tasks whose due date has passed"""
        user_id = ensure_authenticated(user_id)
        today = today or date.today()
        try:
            query = self.supabase.table("tasks")\
                .select("*, events!inner(title, created_by)")\
                .eq("events.created_by", user_id)\
                .eq("completed", False)\
                .lt("due_date", today.isoformat())
            if event_id:
                query = query.eq("event_id", event_id)
            result = query.order("due_date", desc=False).execute()
            return [TaskResponse(**task) for task in result.data]
        except Exception as e:
            logger.error(f"Error fetching overdue tasks: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_upcoming_tasks(
        self,
        user_id: Optional[str],
        event_id: Optional[str] = None,
        today: Optional[date] = None
    ) -> List[TaskResponse]:
        """Incomplete tasks due between today and the end of the upcoming window"""
        user_id = ensure_authenticated(user_id)
        today = today or date.today()
        window_end = today + timedelta(days=settings.upcoming_task_window_days)
        try:
            query = self.supabase.table("tasks")\
                .select("*, events!inner(title, created_by)")\
                .eq("events.created_by", user_id)\
                .eq("completed", False)\
                .gte("due_date", today.isoformat())\
                .lte("due_date", window_end.isoformat())
            if event_id:
                query = query.eq("event_id", event_id)
            result = query.order("due_date", desc=False).execute()
            return [TaskResponse(**task) for task in result.data]
        except Exception as e:
            logger.error(f"Error fetching upcoming tasks: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_task_stats(self, user_id: Optional[str], event_id: Optional[str] = None) -> TaskStats:
        """Completion statistics across the user's events, or one event"""
        user_id = ensure_authenticated(user_id)
        try:
            query = self.supabase.table("tasks")\
                .select("completed, events!inner(created_by)")\
                .eq("events.created_by", user_id)
            if event_id:
                query = query.eq("event_id", event_id)
            result = query.execute()
        except Exception as e:
            logger.error(f"Error fetching task stats: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        return compute_task_stats(result.data or [])
