"""Testing fixtures – pytest fixtures for fake doubles."""
from retrykit.testing.fixtures.clock import fake_clock, fake_sleeper

__all__ = ["fake_clock", "fake_sleeper"]
