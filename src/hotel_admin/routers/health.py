from fastapi import APIRouter, Depends

from hotel_admin.dependencies import get_api_base_url, get_app_settings
from hotel_admin.settings import Settings

router = APIRouter()


@router.get("/health")
async def health_check(
    settings: Settings = Depends(get_app_settings),
    api_base_url: str = Depends(get_api_base_url),
):
    """
    Health check endpoint for monitoring API status and configuration readiness.

    Storage is reported as "unconfigured" when the bucket credentials are missing;
    the API still answers so the problem is visible from outside.
    """
    storage_ready = settings.storage_configured
    return {
        "status": "ok" if storage_ready else "degraded",
        "components": {
            "api": "ready",
            "storage": "ready" if storage_ready else "unconfigured",
        },
        "bucket": settings.storage_bucket,
        "api_base_url": api_base_url,
        "ready": storage_ready,
    }
