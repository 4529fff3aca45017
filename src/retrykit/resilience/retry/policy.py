"""Resilience – RetryPolicy and the fixed / unbounded / time-bounded retry engines."""
from __future__ import annotations

import abc
import dataclasses
import functools
import sys
import time
from typing import Any, Callable, TypeVar

from retrykit.config.validation import InvalidSettingValueError, MissingRequiredSettingError
from retrykit.kernel.time import Clock, SystemClock
from retrykit.observability.logging import get_logger
from retrykit.resilience.matching import RetryableException, match_any
from retrykit.resilience.retry.context import ExecutionContext
from retrykit.resilience.retry.sleep import NO_WAIT, SleepPolicy

T = TypeVar("T")
RetryHandler = Callable[[BaseException, ExecutionContext], None]
FailureHandler = Callable[[BaseException], None]

logger = get_logger(__name__)


def _ignore_retry(exc: BaseException, context: ExecutionContext) -> None:  # noqa: ARG001
    pass


def _ignore_failure(exc: BaseException) -> None:  # noqa: ARG001
    pass


@dataclasses.dataclass(frozen=True)
class RetryPolicy:
    """Build-time configuration shared by every retry engine.

    Immutable and free of per-call state, so one instance may back any number
    of concurrent invocations.
    """

    exceptions: tuple[RetryableException, ...]
    on_retry: RetryHandler = _ignore_retry
    on_failure: FailureHandler = _ignore_failure
    sleep: SleepPolicy = NO_WAIT
    sleeper: Callable[[float], Any] = time.sleep

    def __post_init__(self) -> None:
        object.__setattr__(self, "exceptions", tuple(self.exceptions))
        if not self.exceptions:
            raise MissingRequiredSettingError("exceptions")

    def match(self, exc: BaseException) -> bool:
        return match_any(self.exceptions, exc)


class RetryEngine(abc.ABC):
    """Common surface of the retry engines."""

    policy: RetryPolicy

    @abc.abstractmethod
    def __call__(self, action: Callable[[], T], recover: Callable[[], T] | None = None) -> T: ...

    def wrap(
        self,
        func: Callable[..., T],
        recover: Callable[[], T] | None = None,
    ) -> Callable[..., T]:
        """Return *func* decorated so every call runs under this engine."""

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            return self(lambda: func(*args, **kwargs), recover)

        return wrapper


class FixedRetry(RetryEngine):
    """Run *action* up to *max_attempts* times.

    Every matched failure fires ``on_retry`` and is followed by a wait, the
    last one included. When the budget is spent (or a failure matches no
    rule) *recover* supplies the result; without it ``on_failure`` fires and
    the latest failure is re-raised unchanged.
    """

    def __init__(self, policy: RetryPolicy, max_attempts: int) -> None:
        if max_attempts < 1:
            raise InvalidSettingValueError("max_attempts", max_attempts, "must be >= 1")
        self.policy = policy
        self.max_attempts = max_attempts

    def __call__(self, action: Callable[[], T], recover: Callable[[], T] | None = None) -> T:
        return self._execute(action, recover, self.policy.on_retry)

    def _execute(
        self,
        action: Callable[[], T],
        recover: Callable[[], T] | None,
        on_retry: RetryHandler,
    ) -> T:
        policy = self.policy
        context = ExecutionContext()
        last_exc: Exception | None = None
        previous_wait = 0.0

        for attempt in range(1, self.max_attempts + 1):
            try:
                return action()
            except Exception as exc:
                last_exc = exc
                if not policy.match(exc):
                    logger.debug("retry.unmatched", attempt=attempt, exc=repr(exc))
                    break

                context._set_attempt(attempt)
                on_retry(exc, context)
                if context.cancelled:
                    logger.info("retry.cancelled", attempt=attempt, exc=repr(exc))
                    raise

                wait = policy.sleep.next_wait(attempt, previous_wait)
                previous_wait = wait
                logger.debug("retry.attempt", attempt=attempt, delay=wait, exc=repr(exc))
                if wait > 0:
                    policy.sleeper(wait)
        else:
            logger.warning("retry.exhausted", attempts=self.max_attempts, exc=repr(last_exc))

        if recover is not None:
            return recover()
        policy.on_failure(last_exc)  # type: ignore[arg-type]
        raise last_exc  # type: ignore[misc]


class ForeverRetry(FixedRetry):
    """Retry until success, cancellation, or a failure no rule matches."""

    def __init__(self, policy: RetryPolicy) -> None:
        super().__init__(policy, max_attempts=sys.maxsize)


class TimeBasedRetry(RetryEngine):
    """Keep retrying until more than *max_duration* seconds have passed since the call began.

    The deadline only gates the decision to try again; an attempt already in
    flight is never interrupted. Reaching the deadline fires ``on_failure``
    and cancels the loop, after which *recover* (if any) supplies the result.
    """

    def __init__(self, policy: RetryPolicy, max_duration: float, clock: Clock | None = None) -> None:
        if max_duration < 0:
            raise InvalidSettingValueError("max_duration", max_duration, "must be >= 0")
        self.policy = policy
        self.max_duration = max_duration
        self._clock = clock or SystemClock()
        self._forever = ForeverRetry(policy)

    def __call__(self, action: Callable[[], T], recover: Callable[[], T] | None = None) -> T:
        deadline = self._clock.timestamp() + self.max_duration
        expired = False

        def on_retry(exc: BaseException, context: ExecutionContext) -> None:
            nonlocal expired
            self.policy.on_retry(exc, context)
            if context.cancelled:
                return
            if self._clock.timestamp() > deadline:
                expired = True
                logger.warning(
                    "retry.deadline_exceeded",
                    attempt=context.attempt,
                    max_duration=self.max_duration,
                )
                self.policy.on_failure(exc)
                context.cancel()

        try:
            return self._forever._execute(action, recover, on_retry)
        except Exception:
            if expired and recover is not None:
                return recover()
            raise


__all__ = [
    "FailureHandler",
    "FixedRetry",
    "ForeverRetry",
    "RetryEngine",
    "RetryHandler",
    "RetryPolicy",
    "TimeBasedRetry",
]
