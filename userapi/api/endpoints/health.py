"""Health check endpoint. No dependencies; used for liveness probes."""

from fastapi import APIRouter

from userapi.schemas.health import HealthResponse
from userapi.shared.utils.datetime import utc_now

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return healthy status and server time. Never touches the database."""
    return HealthResponse(timestamp=utc_now().replace(microsecond=0))
