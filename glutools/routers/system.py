from fastapi import APIRouter, Depends

from glutools.core.config import Settings
from glutools.core.deps import get_settings_dep

router = APIRouter(tags=["system"])


@router.get("/health")
def health(settings: Settings = Depends(get_settings_dep)):
    """Liveness probe; answers without the API key."""
    return {"status": "ok", "version": settings.APP_VERSION, "store": settings.STORE_BACKEND}


@router.get("/version")
def version(settings: Settings = Depends(get_settings_dep)):
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "env": settings.APP_ENV,
        "api_prefix": settings.API_PREFIX,
    }
