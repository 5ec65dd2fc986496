"""GET /health -- liveness check (no auth)."""

from __future__ import annotations

from fastapi import APIRouter

from linehook import __version__
from linehook.webhook.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)
