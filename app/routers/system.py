from fastapi import APIRouter, Depends

from app.schemas.system import (
    AppGroup,
    DatabaseGroup,
    GeneralGroup,
    RespondersGroup,
    SystemSettingsGrouped,
)
from app.config import get_settings
from app.routers.utils.dependencies import get_current_user

router = APIRouter(
    tags=["system"],
    responses={404: {"description": "Not found"}},
)


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/system/settings", response_model=SystemSettingsGrouped)
def get_system_settings(
    _current_user=Depends(get_current_user),
) -> SystemSettingsGrouped:
    """Return grouped, non-sensitive system configuration settings for troubleshooting."""
    s = get_settings()

    app_group = AppGroup(
        name=s.app_name,
        environment=s.environment,
        log_level=s.log_level,
        port=s.port,
    )

    # Extract safe database info only (no credentials)
    database_host = None
    database_driver = None
    try:
        url_obj = s.database_url_obj
        database_host = url_obj.host
        database_driver = url_obj.get_backend_name()
    except ValueError:
        pass

    database_group = DatabaseGroup(
        database_host=database_host,
        database_driver=database_driver,
        pool_size=s.database_pool_size,
        max_overflow=s.database_max_overflow,
    )

    return SystemSettingsGrouped(
        app=app_group,
        database=database_group,
        general=GeneralGroup(is_production=s.is_production),
        responders=RespondersGroup(
            timeout_seconds=s.responder_timeout_seconds,
            default_model=s.responder_default_model,
        ),
    )
