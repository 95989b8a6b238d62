"""Health check endpoint with optional database connectivity check."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import check_db_connected, get_db
from app.core.exceptions import ConfigurationError
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """
    Return service health status, database connectivity and whether logins
    can currently be served (token signing configured).
    """
    try:
        settings.signing_config().validate()
        signing = "configured"
    except ConfigurationError:
        signing = "missing"

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
        token_signing=signing,
    )
