"""Testing support – fakes and fixtures for deterministic retry/breaker tests.

Import in your ``conftest.py``::

    pytest_plugins = ["retrykit.testing.fixtures"]
"""

from retrykit.testing.fakes import FakeClock, FakeSleeper, FrozenClock

__all__ = ["FakeClock", "FakeSleeper", "FrozenClock"]
