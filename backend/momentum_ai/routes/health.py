from fastapi import APIRouter, Depends

from momentum_ai.config import Settings, get_settings

router = APIRouter()


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)) -> dict:
    return {"status": "ok", "ai_configured": settings.ai_configured, "auth_configured": settings.auth_configured}
