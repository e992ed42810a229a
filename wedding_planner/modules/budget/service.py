from supabase import Client
from wedding_planner.core.math_utils import percentage, round_half_up
from wedding_planner.modules.budget.models import (
    BOOKING_BUDGET_HEADROOM, CATEGORY_COLORS, DEFAULT_CATEGORIES, DEFAULT_COLOR, WARNING_THRESHOLD
)
from wedding_planner.modules.budget.schemas import (
    BudgetItemCreate, BudgetItemUpdate, BudgetItemResponse, BudgetSummary, BudgetAlert
)
from typing import Any, Dict, Iterable, List
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


def _format_money(amount: float) -> str:
    if float(amount).is_integer():
        return f"${int(amount):,}"
    return f"${amount:,.2f}"


def get_category_color(category: str) -> str:
    return CATEGORY_COLORS.get(category, DEFAULT_COLOR)


def summarize_budget(items: Iterable[Dict[str, Any]]) -> BudgetSummary:
    items = list(items)
    total_budgeted = sum(item.get("budgeted") or 0 for item in items)
    total_spent = sum(item.get("spent") or 0 for item in items)
    return BudgetSummary(
        totalBudgeted=total_budgeted,
        totalSpent=total_spent,
        remaining=total_budgeted - total_spent,
        percentageUsed=percentage(total_spent, total_budgeted),
        isOverBudget=total_spent > total_budgeted
    )


def compute_budget_alerts(items: Iterable[Dict[str, Any]]) -> List[BudgetAlert]:
    """Error above 100% of an item's budget, warning above 90%; items without a budget never alert"""
    alerts = []
    for item in items:
        budgeted = item.get("budgeted") or 0
        spent = item.get("spent") or 0
        used = spent / budgeted * 100 if budgeted > 0 else 0
        category = item.get("category", "")

        if used > 100:
            alerts.append(BudgetAlert(
                type="error",
                category=category,
                message=f"{category} is over budget by {_format_money(spent - budgeted)}",
                percentage=round_half_up(used)
            ))
        elif used > WARNING_THRESHOLD:
            alerts.append(BudgetAlert(
                type="warning",
                category=category,
                message=f"{category} is at {round_half_up(used)}% of budget",
                percentage=round_half_up(used)
            ))
    return alerts


class BudgetService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _fetch_items(self, event_id: str, columns: str = "*") -> List[Dict[str, Any]]:
        result = self.supabase.table("budget_items")\
            .select(columns)\
            .eq("event_id", event_id)\
            .order("category", desc=False)\
            .execute()
        return result.data or []

    def get_event_budget(self, event_id: str) -> List[BudgetItemResponse]:
        """Budget items of one event ordered by category"""
        try:
            return [BudgetItemResponse(**item) for item in self._fetch_items(event_id)]
        except Exception as e:
            logger.error(f"Error fetching budget items: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def create_budget_item(self, item_data: BudgetItemCreate) -> BudgetItemResponse:
        """Create a budget item; remaining and color default from the other fields"""
        try:
            insert_data = item_data.model_dump()
            if insert_data["remaining"] is None:
                insert_data["remaining"] = item_data.budgeted - item_data.spent
            if not insert_data["color"]:
                insert_data["color"] = get_category_color(item_data.category)

            result = self.supabase.table("budget_items").insert(insert_data).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create budget item")

            return BudgetItemResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error creating budget item: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def update_budget_item(self, item_id: str, item_data: BudgetItemUpdate) -> BudgetItemResponse:
        """Partial update; remaining is stored as given and not recomputed"""
        try:
            update_data = item_data.model_dump(exclude_unset=True)
            if not update_data:
                raise HTTPException(status_code=400, detail="No fields to update")

            result = self.supabase.table("budget_items")\
                .update(update_data)\
                .eq("id", item_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Budget item not found")

            return BudgetItemResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating budget item: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def delete_budget_item(self, item_id: str) -> bool:
        """Delete budget item"""
        try:
            self.supabase.table("budget_items")\
                .delete()\
                .eq("id", item_id)\
                .execute()
            return True
        except Exception as e:
            logger.error(f"Error deleting budget item: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_budget_summary(self, event_id: str) -> BudgetSummary:
        try:
            items = self._fetch_items(event_id, "budgeted, spent")
        except Exception as e:
            logger.error(f"Error fetching budget summary: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        return summarize_budget(items)

    def get_budget_alerts(self, event_id: str) -> List[BudgetAlert]:
        try:
            items = self._fetch_items(event_id)
        except Exception as e:
            logger.error(f"Error fetching budget alerts: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        return compute_budget_alerts(items)

    def update_budget_with_booking(
        self,
        event_id: str,
        category: str,
        amount: float,
        vendor_name: str
    ) -> BudgetItemResponse:
        """Record a booked amount against its category, creating the category if needed"""
        try:
            existing = self.supabase.table("budget_items")\
                .select("*")\
                .eq("event_id", event_id)\
                .eq("category", category)\
                .limit(1)\
                .execute()

            if existing.data:
                item = existing.data[0]
                vendors = list(item.get("vendors") or [])
                if vendor_name not in vendors:
                    vendors.append(vendor_name)
                new_spent = (item.get("spent") or 0) + amount

                result = self.supabase.table("budget_items")\
                    .update({
                        "spent": new_spent,
                        "remaining": (item.get("budgeted") or 0) - new_spent,
                        "vendors": vendors
                    })\
                    .eq("id", item["id"])\
                    .execute()
            else:
                budgeted = amount * BOOKING_BUDGET_HEADROOM
                result = self.supabase.table("budget_items").insert({
                    "event_id": event_id,
                    "category": category,
                    "budgeted": budgeted,
                    "spent": amount,
                    "remaining": budgeted - amount,
                    "color": get_category_color(category),
                    "vendors": [vendor_name]
                }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to record booking in budget")

            return BudgetItemResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating budget with booking: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def initialize_default_budget(self, event_id: str, total_budget: float) -> List[BudgetItemResponse]:
        """Split a total budget across the default categories"""
        rows = []
        for category, share, color in DEFAULT_CATEGORIES:
            budgeted = round_half_up(total_budget * share / 100)
            rows.append({
                "event_id": event_id,
                "category": category,
                "budgeted": budgeted,
                "spent": 0,
                "remaining": budgeted,
                "color": color,
                "vendors": []
            })
        try:
            result = self.supabase.table("budget_items").insert(rows).execute()
            return [BudgetItemResponse(**item) for item in result.data]
        except Exception as e:
            logger.error(f"Error initializing budget: {e}")
            raise HTTPException(status_code=500, detail=str(e))
