from fastapi import APIRouter, Depends, Request

from app.config.dependencies import get_user_store
from app.config.logger import get_logger
from app.users.crud import UserStore

logger = get_logger("health_service")

# Create FastAPI router for health endpoints
health_router = APIRouter(prefix="/health", tags=["health"])


@health_router.get("/", summary="Check the service")
async def check_service(request: Request, store: UserStore = Depends(get_user_store)):
    """
    Report that the process is serving requests and how many users it holds.
    """
    users = len(store)
    logger.debug("Health check", users=users)
    return {
        "status": "healthy",
        "application": request.app.state.settings.app.app_name,
        "users": users,
    }
