from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


def utc_now_iso() -> str:
    """ISO-8601 timestamp in UTC with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ProbeResult(BaseModel):
    """Outcome of a single diagnostic call against one backend."""
    model_config = ConfigDict(frozen=True)

    success: bool = Field(..., description="Whether the backend answered the diagnostic call")
    data: Optional[Dict[str, Any]] = Field(None, description="Row returned by the backend on success")
    error: Optional[str] = Field(None, description="Backend error message on failure")
    timestamp: str = Field(default_factory=utc_now_iso, description="When the probe finished (ISO-8601)")

    @classmethod
    def ok(cls, data: Dict[str, Any]) -> "ProbeResult":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, error: str) -> "ProbeResult":
        return cls(success=False, error=error)

    def to_payload(self) -> Dict[str, Any]:
        # data is absent on failure and error is absent on success
        payload: Dict[str, Any] = {"success": self.success}
        if self.success:
            payload["data"] = self.data
        else:
            payload["error"] = self.error
        payload["timestamp"] = self.timestamp
        return payload
