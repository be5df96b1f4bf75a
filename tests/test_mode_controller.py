"""
Tests for sample / real-time mode switching and the expiry timer.
"""

import time

import pytest

from src.modules.breach_data import BreachRecord, sample_breaches
from src.modules.engine import BreachExposureEngine
from src.modules.mode_controller import ExpiryTimer
from src.modules.recommendations import sample_recommendations


def _real_breaches():
    return [BreachRecord(
        id="real-1", title="Real Breach", domain="real.com", breach_date="2025-06-01",
        affected_data=("Email", "Passwords"), risk_level="high",
    )]


def _titles(engine):
    return [e.title for e in engine.notifications]


class TestInitialState:
    def test_starts_in_sample_mode(self, engine):
        assert not engine.is_realtime_mode
        assert not engine.is_real_data
        assert engine.breaches == sample_breaches()
        assert engine.recommendations == sample_recommendations()
        assert engine.security_score == 75
        assert engine.notifications == []
        assert engine.scan_history == []


class TestEnterRealtime:
    def test_without_real_history_keeps_sample_data(self, engine, timer_factory):
        engine.set_mode(True)

        assert engine.is_realtime_mode
        assert engine.showing_no_realtime_data
        assert not engine.is_real_data
        assert engine.breaches == sample_breaches()
        assert _titles(engine) == ["Real-Time Mode Enabled"]
        assert engine.notifications[0].category == "system"
        assert len(timer_factory.timers) == 1
        assert timer_factory.last.started
        assert timer_factory.last.daemon
        assert timer_factory.last.interval == 1800

    def test_sample_only_history_counts_as_no_real_data(self, engine):
        engine.submit_scan("Email", "jane@example.com", _real_breaches(), is_real_scan=False)
        engine.set_mode(True)
        assert engine.showing_no_realtime_data

    def test_reveals_last_real_result_without_recomputing(self, engine):
        engine.submit_scan("Email", "jane@example.com", _real_breaches(), is_real_scan=True)
        real_score = engine.security_score
        real_recs = engine.recommendations
        engine.set_mode(False)
        assert engine.breaches == sample_breaches()

        engine.set_mode(True)
        assert not engine.showing_no_realtime_data
        assert engine.is_real_data
        assert engine.breaches == _real_breaches()
        assert engine.recommendations == real_recs
        assert engine.security_score == real_score

    def test_reactivation_restarts_timer(self, engine, timer_factory):
        engine.set_mode(True)
        engine.set_mode(True)
        first, second = timer_factory.timers
        assert first.cancelled
        assert second.started and not second.cancelled
        assert _titles(engine) == ["Real-Time Mode Enabled", "Real-Time Mode Enabled"]


class TestLeaveRealtime:
    def test_explicit_switch_restores_sample_data(self, engine, timer_factory):
        engine.set_mode(True)
        engine.submit_scan("Email", "jane@example.com", _real_breaches(), is_real_scan=True)
        assert engine.is_real_data

        engine.set_mode(False)
        assert not engine.is_realtime_mode
        assert not engine.is_real_data
        assert not engine.showing_no_realtime_data
        assert engine.breaches == sample_breaches()
        assert engine.recommendations == sample_recommendations()
        assert engine.security_score == 75
        assert timer_factory.last.cancelled
        assert engine.notifications[0].title == "Sample Data Mode"

    def test_timer_expiry_disables_realtime(self, engine, timer_factory):
        engine.set_mode(True)
        engine.submit_scan("Email", "jane@example.com", _real_breaches(), is_real_scan=True)

        timer_factory.last.fire()

        assert not engine.is_realtime_mode
        assert not engine.is_real_data
        assert engine.breaches == sample_breaches()
        latest = engine.notifications[0]
        assert latest.title == "Real-Time Mode Disabled"
        assert "inactivity" in latest.message
        assert latest.severity == "info"

    def test_superseded_timer_never_fires(self, engine, timer_factory):
        engine.set_mode(True)
        engine.set_mode(True)
        first, second = timer_factory.timers

        first.fire()
        assert engine.is_realtime_mode
        assert "Real-Time Mode Disabled" not in _titles(engine)

        second.fire()
        second.fire()
        assert not engine.is_realtime_mode
        assert _titles(engine).count("Real-Time Mode Disabled") == 1

    def test_timer_after_explicit_switch_is_ignored(self, engine, timer_factory):
        engine.set_mode(True)
        engine.set_mode(False)
        timer_factory.last.fire()
        assert "Real-Time Mode Disabled" not in _titles(engine)

    def test_close_cancels_pending_timer(self, engine, timer_factory):
        engine.set_mode(True)
        engine.close()
        assert timer_factory.last.cancelled
        timer_factory.last.fire()
        assert engine.is_realtime_mode
        assert "Real-Time Mode Disabled" not in _titles(engine)

    def test_sample_sets_are_fresh_lists(self, engine):
        engine.set_mode(True)
        engine.set_mode(False)
        shown = engine.breaches
        shown.clear()
        assert engine.breaches == sample_breaches()


class TestMetrics:
    def test_mode_switches_are_counted(self, engine, timer_factory):
        engine.set_mode(True)
        engine.set_mode(True)
        timer_factory.last.fire()
        engine.set_mode(False)
        switches = engine.metrics.get_summary()["mode_switches"]
        assert switches == {"to_realtime": 1, "renewed": 1, "expired": 1, "to_sample": 1}


class TestExpiryTimer:
    def test_generation_tracking(self, timer_factory):
        fired = []
        timer = ExpiryTimer(5, fired.append, timer_factory)
        assert not timer.pending

        generation = timer.restart()
        assert timer.pending
        assert timer.is_current(generation)

        assert timer.consume(generation)
        assert not timer.consume(generation)
        assert not timer.pending

    def test_cancel_invalidates_generation(self, timer_factory):
        timer = ExpiryTimer(5, lambda generation: None, timer_factory)
        generation = timer.restart()
        timer.cancel()
        assert not timer.is_current(generation)
        assert timer_factory.last.cancelled


def test_real_timer_expires():
    with BreachExposureEngine(realtime_timeout_seconds=0.05) as engine:
        engine.set_mode(True)
        deadline = time.monotonic() + 5
        while engine.is_realtime_mode and time.monotonic() < deadline:
            time.sleep(0.01)
        assert not engine.is_realtime_mode
        assert engine.notifications[0].title == "Real-Time Mode Disabled"
