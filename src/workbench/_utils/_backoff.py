from dataclasses import dataclass


@dataclass(frozen=True)
class BackoffPolicy:
    """Retry classification and delay schedule for the request executor.

    ``delay(attempt)`` is the pause, in milliseconds, after the attempt with
    zero-based index ``attempt`` has failed: 1000, 2000, 4000, ... capped at
    ``max_delay_ms``. No jitter is applied.
    """

    base_delay_ms: int = 1000
    max_delay_ms: int = 10000

    def is_retryable(self, status_code: int) -> bool:
        return status_code == 429 or 500 <= status_code < 600

    def delay(self, attempt: int) -> int:
        return min(self.base_delay_ms * 2**attempt, self.max_delay_ms)
