from datetime import date, datetime
from typing import Any, Dict, Optional

import redis
from sqlalchemy.engine import Engine

from app.utils.log import app_logger
from app.schemas.probe import ProbeResult
from app.core.exceptions.exceptions import ConfigurationError
from app.services import cache as kv_store
from app.services import database as relational_store


def _describe(exc: Exception) -> str:
    # driver text as-is; only an empty message is replaced by the exception type
    return str(exc) or type(exc).__name__


def _jsonable(row: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v.isoformat() if isinstance(v, (datetime, date)) else v for k, v in row.items()}


class ConnectivityProber:
    """Reachability checks for the relational and key-value stores.

    - Each probe issues a single read-only diagnostic call.
    - Any failure (network, auth, query, missing configuration) is caught here
      and returned as ``ProbeResult(success=False, error=...)``; nothing raises
      past this boundary.
    - No retries, and no timeout beyond what the clients were configured with.
    """

    def __init__(self, engine: Optional[Engine], redis_client: Optional[redis.Redis]):
        self.engine = engine
        self.redis_client = redis_client

    def probe_relational_store(self) -> ProbeResult:
        app_logger.debug("probe.relational.start")
        try:
            row = relational_store.query_server_time(self.engine)
        except Exception as e:
            error = _describe(e)
            app_logger.error("probe.relational.failed", error=error, exc_info=e)
            return ProbeResult.failed(error)

        app_logger.debug("probe.relational.success", diagnostic_message=row.get("message"))
        return ProbeResult.ok(_jsonable(row))

    def probe_key_value_store(self) -> ProbeResult:
        app_logger.debug("probe.key_value.start")
        try:
            if self.redis_client is None:
                raise ConfigurationError("REDIS_URL")
            data = kv_store.query_server_time(self.redis_client)
        except Exception as e:
            error = _describe(e)
            app_logger.error("probe.key_value.failed", error=error, exc_info=e)
            return ProbeResult.failed(error)

        app_logger.debug("probe.key_value.success")
        return ProbeResult.ok(data)
