"""
Liveness endpoint.

Routes: GET /health

Reports service version only; blob stores are not probed so the check stays
cheap for load balancers.

Dependencies: fastapi, pydantic
System role: Liveness probe
"""

from fastapi import APIRouter
from pydantic import BaseModel

from smartdocs import __version__


class HealthResponse(BaseModel):
    status: str
    message: str
    version: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the process is serving requests."""
    return HealthResponse(status="healthy", message="Server Healthy", version=__version__)
