"""
Defines service information endpoints used by the client on startup.
"""

from fastapi import APIRouter

from .. import schemas
from ..config import settings

router = APIRouter(tags=["System"])


@router.get("/config", response_model=schemas.ServiceConfig)
def get_service_config():
    """Reports which optional integrations are switched on."""
    return {
        "ai_provider": settings.AI_PROVIDER,
        "ai_status": "active",
        "google_auth_enabled": bool(settings.GOOGLE_CLIENT_ID),
    }
