"""Minimal in-process metrics recorder (not suitable for multi-process aggregation)."""

from __future__ import annotations

from collections import Counter, deque
from threading import Lock
from typing import Deque, Dict, Tuple

RECENT_DURATIONS = 100


class MetricsRecorder:
    def __init__(self, max_durations: int = RECENT_DURATIONS) -> None:
        self._lock = Lock()
        self._requests = 0
        self._endpoint_requests: Counter[str] = Counter()
        self._durations: Deque[Tuple[str, float]] = deque(maxlen=max_durations)
        self._tool_success: Counter[str] = Counter()
        self._tool_error: Counter[str] = Counter()

    def incr_request(self, endpoint: str | None = None) -> None:
        with self._lock:
            self._requests += 1
            if endpoint:
                self._endpoint_requests[endpoint] += 1

    def record_duration(self, request_id: str, duration_ms: float) -> None:
        with self._lock:
            self._durations.append((request_id, duration_ms))

    def record_tool(self, tool: str, *, success: bool) -> None:
        with self._lock:
            if success:
                self._tool_success[tool] += 1
            else:
                self._tool_error[tool] += 1

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "requests": self._requests,
                "endpoint_requests": dict(self._endpoint_requests),
                "tool_success": dict(self._tool_success),
                "tool_error": dict(self._tool_error),
                "recent_request_durations_ms": dict(self._durations),
            }

    def reset(self) -> None:
        with self._lock:
            self._requests = 0
            self._endpoint_requests.clear()
            self._durations.clear()
            self._tool_success.clear()
            self._tool_error.clear()


default_metrics = MetricsRecorder()
