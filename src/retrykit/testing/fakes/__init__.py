"""Testing fakes – in-memory doubles for the clock and the sleeper."""
from retrykit.kernel.time import FrozenClock
from retrykit.testing.fakes.sleeper import EPOCH, FakeClock, FakeSleeper

__all__ = ["EPOCH", "FakeClock", "FakeSleeper", "FrozenClock"]
