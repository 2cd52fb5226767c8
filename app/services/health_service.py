import os
import time
from typing import Callable, Dict, Optional

import psutil

from app.schemas.health import CheckStatus, HealthCheck, HealthReport, OverallStatus
from app.schemas.probe import ProbeResult, utc_now_iso
from app.services.prober_service import ConnectivityProber
from app.utils.log import app_logger

MEMORY_WARN_PERCENT = 75.0
MEMORY_FAIL_PERCENT = 90.0


class HealthService:
    """Aggregate health of the service and the backends it depends on.

    - `database` and `redis` reuse the connectivity probes and add timing.
    - `memory` grades host memory usage: above 90% fails, above 75% warns.
    - Overall status is the worst of the individual checks.
    """

    def __init__(
        self,
        prober: ConnectivityProber,
        version: str,
        environment: str,
        started_at: Optional[float] = None,
        memory_percent: Optional[Callable[[], float]] = None,
    ):
        self.prober = prober
        self.version = version
        self.environment = environment
        self.started_at = started_at if started_at is not None else time.time()
        self._memory_percent = memory_percent or (lambda: psutil.virtual_memory().percent)

    def uptime_ms(self) -> int:
        return int((time.time() - self.started_at) * 1000)

    @staticmethod
    def _timed_probe(name: str, probe: Callable[[], ProbeResult]) -> HealthCheck:
        start = time.perf_counter()
        result = probe()
        elapsed = round((time.perf_counter() - start) * 1000, 2)
        if result.success:
            return HealthCheck(
                status=CheckStatus.PASS,
                response_time_ms=elapsed,
                message=f"{name} connection successful",
                last_checked=result.timestamp,
            )
        return HealthCheck(
            status=CheckStatus.FAIL,
            response_time_ms=elapsed,
            message=f"{name} connection failed: {result.error}",
            last_checked=result.timestamp,
        )

    def check_database(self) -> HealthCheck:
        return self._timed_probe("Database", self.prober.probe_relational_store)

    def check_redis(self) -> HealthCheck:
        return self._timed_probe("Redis", self.prober.probe_key_value_store)

    def check_memory(self) -> HealthCheck:
        percent = self._memory_percent()
        status = CheckStatus.PASS
        message = f"Memory usage: {percent:.2f}%"
        if percent > MEMORY_FAIL_PERCENT:
            status = CheckStatus.FAIL
            message += " - Critical memory usage"
        elif percent > MEMORY_WARN_PERCENT:
            status = CheckStatus.WARN
            message += " - High memory usage"
        return HealthCheck(status=status, message=message, last_checked=utc_now_iso())

    @staticmethod
    def overall_status(checks: Dict[str, HealthCheck]) -> OverallStatus:
        statuses = {check.status for check in checks.values()}
        if CheckStatus.FAIL in statuses:
            return OverallStatus.UNHEALTHY
        if CheckStatus.WARN in statuses:
            return OverallStatus.DEGRADED
        return OverallStatus.HEALTHY

    def system_metrics(self) -> Dict[str, float]:
        process = psutil.Process(os.getpid())
        memory = process.memory_info()
        cpu = process.cpu_times()
        return {
            "rss_bytes": memory.rss,
            "vms_bytes": memory.vms,
            "cpu_user_seconds": cpu.user,
            "cpu_system_seconds": cpu.system,
            "process_uptime_seconds": round(time.time() - process.create_time(), 3),
            "system_uptime_seconds": round(time.time() - psutil.boot_time(), 3),
        }

    def report(self) -> HealthReport:
        checks = {
            "database": self.check_database(),
            "redis": self.check_redis(),
            "memory": self.check_memory(),
        }
        status = self.overall_status(checks)
        app_logger.info("health.report", status=status.value,
                        failing=[name for name, c in checks.items() if c.status != CheckStatus.PASS])
        return HealthReport(
            status=status,
            timestamp=utc_now_iso(),
            uptime_ms=self.uptime_ms(),
            version=self.version,
            environment=self.environment,
            checks=checks,
            metrics=self.system_metrics(),
        )
