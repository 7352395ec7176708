"""System router providing the health check endpoint."""

from fastapi import APIRouter, Request

from provider_schema.api.system.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Return liveness status for probes.

    The service holds no connections, so it is healthy whenever it can
    answer.
    """
    return HealthResponse(
        status="ok",
        service=request.app.title,
        version=request.app.version,
    )
