"""System utility endpoints."""

from fastapi import APIRouter

from ..schemas import HealthStatus

router = APIRouter()


@router.get("/health", tags=["system"], response_model=HealthStatus)
def healthcheck() -> HealthStatus:
    return HealthStatus(status="ok")
