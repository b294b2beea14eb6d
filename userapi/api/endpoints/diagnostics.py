"""Diagnostics: GET /api/test, a fixed response for checking routing and CORS."""

from fastapi import APIRouter

from userapi.schemas.envelope import SuccessEnvelope

router = APIRouter()


@router.get("/test", response_model=SuccessEnvelope[str])
def ping() -> SuccessEnvelope[str]:
    """Return {"success": true, "data": "Test"}."""
    return SuccessEnvelope[str](data="Test")
