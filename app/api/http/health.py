from fastapi import APIRouter, Depends

from app.core.config import settings
from app.api.http.sessions import get_session_registry
from app.domains.sessions.entities import SessionRegistry

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(sessions: SessionRegistry = Depends(get_session_registry)):
    """Проверка работоспособности сервиса"""
    return {
        "status": "ok",
        "version": settings.app_version,
        "active_sessions": len(sessions)
    }
