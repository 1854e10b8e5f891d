from datetime import datetime, timezone
from typing import Dict, Any

from fastapi import APIRouter

from ....config import get_settings

router = APIRouter()


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "NewsHub India API",
        "version": "0.1.0",
        "environment": "development" if settings.debug else "production",
        "headline_provider": settings.headline_provider.value,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
