from app.api.http.health import router as health_router
from app.api.http.employees import router as employees_router
from app.api.http.sessions import router as sessions_router
from app.api.http.reports import router as reports_router

__all__ = [
    "health_router",
    "employees_router",
    "sessions_router",
    "reports_router"
]
