"""
The structured logger emits one JSON object per line.
"""

from __future__ import annotations

import json
import logging

from app.utils.log import StructuredLogger


def test_structured_log_entry(caplog):
    logger = StructuredLogger("opsprobe-test", level="DEBUG")

    with caplog.at_level(logging.DEBUG, logger="opsprobe-test"):
        logger.error("probe.relational.failed", error="connection refused", exc_info=ValueError("x"))

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["level"] == "ERROR"
    assert entry["message"] == "probe.relational.failed"
    assert entry["error"] == "connection refused"
    assert entry["exc_type"] == "ValueError"
