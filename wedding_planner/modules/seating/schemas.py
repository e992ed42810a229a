from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from datetime import datetime

PlanLayout = Literal["round", "rectangular", "mixed"]


class TablePosition(BaseModel):
    x: float = 0
    y: float = 0


class SeatingTable(BaseModel):
    number: int = Field(ge=1)
    seats: int = Field(default=8, ge=1)
    shape: Literal["round", "rectangular"] = "round"
    position: TablePosition = TablePosition()


class SeatingPlanCreate(BaseModel):
    event_id: str
    name: str
    layout: PlanLayout = "round"
    tables: List[SeatingTable] = []


class SeatingPlanUpdate(BaseModel):
    name: Optional[str] = None
    layout: Optional[PlanLayout] = None
    tables: Optional[List[SeatingTable]] = None


class SeatingPlanResponse(BaseModel):
    id: str
    event_id: str
    name: str
    layout: Optional[str] = "round"
    tables: List[dict] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TableAssignment(BaseModel):
    guest_id: str
    table_number: int


class AutoAssignResult(BaseModel):
    plan_id: str
    assignments: List[TableAssignment]
    assigned: int
    unassigned: int


class SeatingStats(BaseModel):
    totalPlans: int
    totalGuests: int
    assignedGuests: int
    unassignedGuests: int
    assignmentRate: int
