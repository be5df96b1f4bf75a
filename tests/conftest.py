"""Pytest configuration.

Application code lives under the top-level `src/` package. Depending on how
pytest is invoked, the repository root may not be on `sys.path`, which breaks
imports like `from src.modules...`, so it is added explicitly here.

The `timer_factory` fixture replaces `threading.Timer` with timers that only
fire when a test calls `fire()`, so expiry can be tested without sleeping.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]

if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


class ManualTimer:
    """threading.Timer stand-in driven by the test"""

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.kwargs = kwargs or {}
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function(*self.args, **self.kwargs)


class ManualTimerFactory:
    def __init__(self):
        self.timers = []

    def __call__(self, interval, function, args=None, kwargs=None):
        timer = ManualTimer(interval, function, args=args, kwargs=kwargs)
        self.timers.append(timer)
        return timer

    @property
    def last(self):
        return self.timers[-1]


@pytest.fixture
def timer_factory():
    return ManualTimerFactory()


@pytest.fixture
def engine(timer_factory):
    from src.modules.engine import BreachExposureEngine

    engine = BreachExposureEngine(realtime_timeout_seconds=1800, timer_factory=timer_factory)
    yield engine
    engine.close()
