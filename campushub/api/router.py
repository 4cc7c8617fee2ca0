from fastapi import APIRouter

from campushub.api.http import (
    health_router, discussions_router, projects_router, project_updates_router, notifications_router
)

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(discussions_router)
api_router.include_router(projects_router)
api_router.include_router(project_updates_router)
api_router.include_router(notifications_router)
