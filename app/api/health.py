import asyncio

from fastapi import APIRouter, Query, Request, Response, status
from fastapi.responses import JSONResponse

from app.schemas.health import HealthSummary, OverallStatus
from app.schemas.probe import utc_now_iso
from app.services.health_service import HealthService
from app.utils.log import app_logger

router = APIRouter(prefix="/api", tags=["Health"])


def _health_service(request: Request) -> HealthService:
    return request.app.state.health


@router.get(
    "/health",
    summary="Service health",
    description="Summary status by default; `detailed=true` adds per-dependency checks "
                "and process metrics and answers 503 when unhealthy.",
)
async def health(request: Request, detailed: bool = Query(False)) -> JSONResponse:
    service = _health_service(request)
    try:
        report = await asyncio.to_thread(service.report)
    except Exception as e:
        app_logger.error("api.health.error", error=str(e), exc_info=e)
        return JSONResponse(
            {
                "status": OverallStatus.UNHEALTHY.value,
                "timestamp": utc_now_iso(),
                "error": "Health check failed",
                "message": str(e),
            },
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    if not detailed:
        summary = HealthSummary(
            status=report.status,
            timestamp=report.timestamp,
            uptime_ms=report.uptime_ms,
            version=report.version,
        )
        return JSONResponse(summary.model_dump(mode="json"))

    http_status = (
        status.HTTP_503_SERVICE_UNAVAILABLE
        if report.status == OverallStatus.UNHEALTHY
        else status.HTTP_200_OK
    )
    return JSONResponse(report.model_dump(mode="json"), status_code=http_status)


@router.head("/health", summary="Liveness ping")
async def health_ping() -> Response:
    return Response(status_code=status.HTTP_200_OK)
