"""
Health check endpoint.

The decoder has no external dependencies, so liveness is the only probe.
"""

from importlib.metadata import version as pkg_version

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    """
    return HealthResponse(status="healthy", version=pkg_version("hstool"))
