from campushub.api.http.health import router as health_router
from campushub.api.http.discussions import router as discussions_router
from campushub.api.http.projects import router as projects_router
from campushub.api.http.project_updates import router as project_updates_router
from campushub.api.http.notifications import router as notifications_router

__all__ = [
    "health_router",
    "discussions_router",
    "projects_router",
    "project_updates_router",
    "notifications_router"
]
