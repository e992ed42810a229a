from pydantic import BaseModel, Field
from typing import List, Literal, Optional


class BudgetItemCreate(BaseModel):
    event_id: str
    category: str
    budgeted: float = Field(default=0, ge=0)
    spent: float = Field(default=0, ge=0)
    remaining: Optional[float] = None
    color: Optional[str] = None
    vendors: List[str] = []
    notes: Optional[str] = None


class BudgetItemUpdate(BaseModel):
    category: Optional[str] = None
    budgeted: Optional[float] = Field(default=None, ge=0)
    spent: Optional[float] = Field(default=None, ge=0)
    remaining: Optional[float] = None
    color: Optional[str] = None
    vendors: Optional[List[str]] = None
    notes: Optional[str] = None


class BudgetItemResponse(BaseModel):
    id: str
    event_id: str
    category: str
    budgeted: float = 0
    spent: float = 0
    remaining: Optional[float] = 0
    color: Optional[str] = None
    vendors: Optional[List[str]] = None
    notes: Optional[str] = None

    class Config:
        from_attributes = True


class BudgetSummary(BaseModel):
    totalBudgeted: float
    totalSpent: float
    remaining: float
    percentageUsed: int
    isOverBudget: bool


class BudgetAlert(BaseModel):
    type: Literal["error", "warning"]
    category: str
    message: str
    percentage: int


class BudgetInitRequest(BaseModel):
    total_budget: float = Field(ge=0)


class BookingExpense(BaseModel):
    category: str
    amount: float = Field(ge=0)
    vendor_name: str
