"""Tool and matching telemetry for the volunteer matcher.

Every MCP tool call is logged once as ``tool_invocation`` on the
``volunteermatch.mcp`` logger. Process-local counters back the
``matcher_health`` tool; they reset on restart.
"""

from __future__ import annotations

import logging
from typing import Any

_LOGGER = logging.getLogger("volunteermatch.mcp")

# bucket -> key -> count; unresolved_codes keys look like "state:ZZ"
METRICS: dict[str, dict[str, int]] = {"tool_calls": {}, "errors": {}, "unresolved_codes": {}}


def get_logger() -> logging.Logger:
    return _LOGGER


def _bump(bucket: str, key: str) -> None:
    counts = METRICS[bucket]
    counts[key] = counts.get(key, 0) + 1


def log_tool_invocation(
    tool: str,
    trace_id: str | None,
    latency_ms: float,
    error: str | None = None,
    extra: dict[str, Any] | None = None,
) -> None:
    """Log one tool call with its request id and latency, and count it."""
    payload: dict[str, Any] = dict(extra or {})
    payload.update(tool=tool, trace_id=trace_id, latency_ms=round(latency_ms, 2))
    if error:
        payload["error"] = error
        _bump("errors", tool)
    _bump("tool_calls", tool)
    _LOGGER.info("tool_invocation", extra=payload)


def count_unresolved_code(tier: str, code: str) -> None:
    _bump("unresolved_codes", f"{tier}:{code}")


def metrics_snapshot() -> dict[str, dict[str, int]]:
    return {bucket: dict(counts) for bucket, counts in METRICS.items()}


def reset_metrics() -> None:
    for counts in METRICS.values():
        counts.clear()
