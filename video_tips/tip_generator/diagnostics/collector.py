# video_tips/tip_generator/diagnostics/collector.py
"""
Diagnostics aggregation for one generation run.

Collects one AttemptResult per model attempt and builds the summary the
runner logs when the run ends. Nothing here reaches the caller.
"""

from __future__ import annotations

from typing import Any, Dict, List
from uuid import UUID

from video_tips.tip_generator.schema import AttemptResult


class DiagnosticsCollector:
    """
    Accumulates AttemptResult objects for a single run.

    Thread-safe not required (attempts are strictly sequential).
    """

    def __init__(self, run_id: UUID) -> None:
        self.run_id = run_id
        self._attempts: Dict[int, AttemptResult] = {}

    def add_attempt_result(self, result: AttemptResult) -> None:
        if result.attempt in self._attempts:
            raise ValueError(f"Duplicate result for attempt {result.attempt}")
        self._attempts[result.attempt] = result

    @property
    def attempts(self) -> List[AttemptResult]:
        return [self._attempts[key] for key in sorted(self._attempts)]

    def has_success(self) -> bool:
        return any(result.success for result in self._attempts.values())

    def build_diagnostics(self) -> Dict[str, Any]:
        """Build the end-of-run summary dict."""
        attempts = self.attempts
        return {
            "run_id": str(self.run_id),
            "attempts": len(attempts),
            "models": [result.model for result in attempts],
            "failures": [
                result.failure_type.value
                for result in attempts
                if not result.success and result.failure_type is not None
            ],
            "success": self.has_success(),
            "total_time_ms": round(sum(result.execution_time_ms or 0.0 for result in attempts), 3),
        }
