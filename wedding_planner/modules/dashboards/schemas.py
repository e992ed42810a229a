from pydantic import BaseModel
from typing import List, Optional
from wedding_planner.modules.budget.schemas import BudgetSummary, BudgetAlert
from wedding_planner.modules.bookings.schemas import BookingResponse
from wedding_planner.modules.events.schemas import EventResponse
from wedding_planner.modules.guests.schemas import GuestResponse, RSVPStats
from wedding_planner.modules.reviews.schemas import ReviewResponse
from wedding_planner.modules.tasks.schemas import TaskResponse, TaskStats
from wedding_planner.modules.users.schemas import UserProfile
from wedding_planner.modules.vendors.schemas import VendorResponse


class EventOverview(BaseModel):
    event: EventResponse
    daysUntil: Optional[int] = None
    budget: BudgetSummary
    budgetAlerts: List[BudgetAlert] = []
    rsvp: RSVPStats
    tasks: TaskStats


class CoupleDashboard(BaseModel):
    role: str = "couple"
    events: List[EventResponse]
    currentEvent: Optional[EventOverview] = None
    taskStats: TaskStats
    upcomingTasks: List[TaskResponse]
    overdueTasks: List[TaskResponse]
    bookings: List[BookingResponse]
    unreadMessages: int


class VendorBookingStats(BaseModel):
    totalRevenue: float
    confirmedBookings: int
    pendingBookings: int
    completedEvents: int
    monthlyBookings: int
    monthlyRevenue: float


class VendorDashboard(BaseModel):
    role: str = "vendor"
    vendor: Optional[VendorResponse] = None
    bookings: List[BookingResponse]
    upcomingBookings: List[BookingResponse]
    stats: VendorBookingStats
    reviews: List[ReviewResponse]
    unreadMessages: int


class GuestDashboard(BaseModel):
    role: str = "guest"
    invitations: List[GuestResponse]
    publicEvents: List[EventResponse]
    featuredVendors: List[VendorResponse]
    favoriteVendors: List[VendorResponse]
    unreadMessages: int


class GeneralDashboard(BaseModel):
    role: str = "general"
    publicEvents: List[EventResponse]
    featuredVendors: List[VendorResponse]
    favoriteVendors: List[VendorResponse]


class PlatformStats(BaseModel):
    totalUsers: int
    totalVendors: int
    activeEvents: int
    pendingApprovals: int


class AdminDashboard(BaseModel):
    role: str = "admin"
    stats: PlatformStats
    pendingUsers: List[UserProfile]
    pendingVendors: List[VendorResponse]
