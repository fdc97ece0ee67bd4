"""Minimal in-process metrics recorder (not suitable for multi-process aggregation)."""

from __future__ import annotations

from collections import Counter, deque
from threading import Lock
from typing import Deque, Dict, Optional, Tuple

MAX_RECENT_DURATIONS = 500


class MetricsRecorder:
    """Counters per operation, HTTP status and error class, plus the latest request durations.

    Only the last ``max_recent`` durations are kept, so memory stays flat in
    long-running processes.
    """

    def __init__(self, max_recent: int = MAX_RECENT_DURATIONS) -> None:
        self._lock = Lock()
        self._requests = 0
        self._recent_durations: Deque[Tuple[str, float]] = deque(maxlen=max_recent)
        self._operation_success: Counter[str] = Counter()
        self._operation_error: Counter[str] = Counter()
        self._status_codes: Counter[int] = Counter()
        self._error_classes: Counter[str] = Counter()

    def incr_request(self) -> None:
        with self._lock:
            self._requests += 1

    def record_duration(self, request_id: str, duration_ms: float) -> None:
        with self._lock:
            self._recent_durations.append((request_id, duration_ms))

    def record_status(self, status_code: int) -> None:
        with self._lock:
            self._status_codes[status_code] += 1

    def record_operation(
        self, operation: str, *, success: bool, error: Optional[str] = None
    ) -> None:
        with self._lock:
            if success:
                self._operation_success[operation] += 1
            else:
                self._operation_error[operation] += 1
                if error:
                    self._error_classes[error] += 1

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "requests": self._requests,
                "operation_success": dict(self._operation_success),
                "operation_error": dict(self._operation_error),
                "status_codes": dict(self._status_codes),
                "error_classes": dict(self._error_classes),
                "recent_request_durations_ms": dict(self._recent_durations),
            }

    def reset(self) -> None:
        with self._lock:
            self._requests = 0
            self._recent_durations.clear()
            self._operation_success.clear()
            self._operation_error.clear()
            self._status_codes.clear()
            self._error_classes.clear()


default_metrics = MetricsRecorder()
