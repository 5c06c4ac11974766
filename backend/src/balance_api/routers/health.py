from fastapi import APIRouter

from balance_api.schemas.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, status_code=200)
async def health() -> HealthResponse:
    """Liveness check for Kubernetes probes and the gateway's upstream health checks.

    The service holds no external connections, so being able to answer is
    the whole check.
    """
    return HealthResponse()
