from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel


class CheckStatus(str, Enum):
    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


class OverallStatus(str, Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class HealthCheck(BaseModel):
    status: CheckStatus
    response_time_ms: Optional[float] = None
    message: Optional[str] = None
    last_checked: str


class HealthSummary(BaseModel):
    status: OverallStatus
    timestamp: str
    uptime_ms: int
    version: str


class HealthReport(HealthSummary):
    environment: str
    checks: Dict[str, HealthCheck]
    metrics: Dict[str, Any]
