import logging
from typing import Any, Dict, Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from wedding_planner.config import settings
from wedding_planner.database.supabase_client import get_supabase
from wedding_planner.modules.auth.models import SIGNED_IN, SIGNED_OUT
from wedding_planner.modules.auth.service import AuthService
from wedding_planner.modules.users.service import UserService
from wedding_planner.modules.auth import routes as auth_routes
from wedding_planner.modules.users import routes as users_routes
from wedding_planner.modules.events import routes as events_routes
from wedding_planner.modules.tasks import routes as tasks_routes
from wedding_planner.modules.guests import routes as guests_routes
from wedding_planner.modules.budget import routes as budget_routes
from wedding_planner.modules.gift_registry import routes as gift_registry_routes
from wedding_planner.modules.seating import routes as seating_routes
from wedding_planner.modules.vendors import routes as vendors_routes
from wedding_planner.modules.bookings import routes as bookings_routes
from wedding_planner.modules.reviews import routes as reviews_routes
from wedding_planner.modules.messages import routes as messages_routes
from wedding_planner.modules.favorites import routes as favorites_routes
from wedding_planner.modules.dashboards import routes as dashboards_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    if settings.is_production:
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
    return JSONResponse(status_code=500, content={"detail": str(exc)})


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                    (b"X-XSS-Protection", b"1; mode=block"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include module routes
app.include_router(auth_routes.router, prefix="/api/v1")
app.include_router(users_routes.router, prefix="/api/v1")
app.include_router(events_routes.router, prefix="/api/v1")
app.include_router(tasks_routes.router, prefix="/api/v1")
app.include_router(guests_routes.router, prefix="/api/v1")
app.include_router(budget_routes.router, prefix="/api/v1")
app.include_router(gift_registry_routes.router, prefix="/api/v1")
app.include_router(seating_routes.router, prefix="/api/v1")
app.include_router(vendors_routes.router, prefix="/api/v1")
app.include_router(bookings_routes.router, prefix="/api/v1")
app.include_router(reviews_routes.router, prefix="/api/v1")
app.include_router(messages_routes.router, prefix="/api/v1")
app.include_router(favorites_routes.router, prefix="/api/v1")
app.include_router(dashboards_routes.router, prefix="/api/v1")


def handle_auth_state_change(event: str, user_data: Optional[Dict[str, Any]]):
    """Make sure every signed-in user has a profile row"""
    if event == SIGNED_IN and user_data:
        logger.info(f"User signed in: {user_data.get('id')}")
        UserService(get_supabase()).ensure_user_profile(user_data)
    elif event == SIGNED_OUT:
        logger.info(f"User signed out: {(user_data or {}).get('id')}")


_unsubscribe_auth_listener = None


@app.on_event("startup")
async def startup_event():
    global _unsubscribe_auth_listener
    logger.info("Application startup")
    _unsubscribe_auth_listener = AuthService.on_auth_state_change(handle_auth_state_change)


@app.on_event("shutdown")
async def shutdown_event():
    if _unsubscribe_auth_listener:
        _unsubscribe_auth_listener()
    logger.info("Application shutdown")


@app.get("/")
async def root():
    return {"message": f"Welcome to {settings.app_name}", "status": "healthy"}


@app.get("/health")
@limiter.exempt
async def health():
    return {"status": "healthy"}


@app.get("/ready")
@limiter.exempt
async def ready():
    """Readiness probe: fails until Supabase is configured"""
    if not settings.supabase_url or not settings.supabase_key:
        return JSONResponse(status_code=503, content={"status": "not ready", "detail": "Supabase not configured"})
    return {"status": "ready"}
