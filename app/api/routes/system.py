from fastapi import APIRouter, HTTPException

from infrastructure.services import MaxMindClientDep, SettingsDep

router = APIRouter(tags=["System"])


@router.get("/version")
def get_version(settings: SettingsDep):
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
def get_health(maxmind: MaxMindClientDep):
    """Healthcheck endpoint, including the geolocation database."""
    result = maxmind.healthcheck()
    if not result.is_success:
        raise HTTPException(status_code=503, detail=result.message)
    return {"status": "ok", "maxmind": result.data}
