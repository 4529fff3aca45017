"""Resilience – TimeBucketThreshold strategy."""
from __future__ import annotations

from retrykit.config.validation import InvalidSettingValueError
from retrykit.kernel.time import Clock, SystemClock
from retrykit.resilience.circuit_breaker.strategies.base import BreakerStrategy, require_threshold


class TimeBucketThreshold(BreakerStrategy):
    """Open when *threshold* failures land in one bucket of *bucket_seconds*.

    A bucket covers ``[start, start + bucket_seconds)``. A failure outside the
    active bucket discards it and starts a new one at the failure's own
    timestamp; buckets never slide forward incrementally. The circuit is
    signalled once per bucket, when the count reaches *threshold*. Successes
    do not touch the bucket.
    """

    def __init__(self, bucket_seconds: float, threshold: int, clock: Clock | None = None) -> None:
        if bucket_seconds <= 0:
            raise InvalidSettingValueError("bucket_seconds", bucket_seconds, "must be > 0")
        self.bucket_seconds = bucket_seconds
        self.threshold = require_threshold(threshold)
        self._clock = clock or SystemClock()
        self._bucket_start: float | None = None
        self._bucket_end: float | None = None
        self._count = 0

    @property
    def count_in_bucket(self) -> int:
        return self._count

    @property
    def bucket(self) -> tuple[float, float] | None:
        if self._bucket_start is None or self._bucket_end is None:
            return None
        return self._bucket_start, self._bucket_end

    def on_failure(self, exc: BaseException) -> bool:  # noqa: ARG002
        now = self._clock.timestamp()
        if (
            self._bucket_start is not None
            and self._bucket_end is not None
            and self._bucket_start <= now < self._bucket_end
        ):
            self._count += 1
        else:
            self._bucket_start = now
            self._bucket_end = now + self.bucket_seconds
            self._count = 1
        return self._count == self.threshold

    def on_success(self) -> None:
        pass

    def reset(self) -> None:
        self._bucket_start = None
        self._bucket_end = None
        self._count = 0

    def __repr__(self) -> str:
        return (
            f"TimeBucketThreshold(bucket_seconds={self.bucket_seconds}, "
            f"threshold={self.threshold}, count={self._count})"
        )


__all__ = ["TimeBucketThreshold"]
