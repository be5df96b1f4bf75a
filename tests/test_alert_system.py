"""
Tests for the console notification channel and scan summary.
"""

import pytest

from src.modules.alert_system import AlertSystem
from src.modules.notification_log import new_notification
from src.utils.config import NotificationConfig


@pytest.fixture
def lines():
    return []


def _alerts(lines, console=True, min_severity="info"):
    return AlertSystem(NotificationConfig(console=console, min_severity=min_severity), output=lines.append)


def test_prints_notification(lines):
    alerts = _alerts(lines)
    entry = new_notification("scan", "Scan Completed", "1 breach found.", severity="high")
    assert alerts.handle_notification(entry)
    assert len(lines) == 1
    assert "Scan Completed" in lines[0]
    assert "HIGH" in lines[0]


def test_respects_min_severity(lines):
    alerts = _alerts(lines, min_severity="medium")
    assert not alerts.handle_notification(new_notification("system", "Mode", "msg", severity="info"))
    assert alerts.handle_notification(new_notification("scan", "Scan", "msg", severity="high"))
    assert len(lines) == 1


def test_console_disabled(lines):
    alerts = _alerts(lines, console=False)
    assert not alerts.handle_notification(new_notification("scan", "Scan", "msg", severity="high"))
    assert lines == []


def test_control_characters_stripped(lines):
    alerts = _alerts(lines)
    alerts.handle_notification(new_notification("custom", "Title\x1b[2J", "line\nbreak"))
    assert "\x1b[2J" not in lines[0]
    assert "\n" not in lines[0]


def test_summary_lists_breaches_and_steps(engine, lines):
    engine.submit_scan("Email", "jane@example.com", [], is_real_scan=True)
    _alerts(lines).print_summary(engine.snapshot())
    output = "\n".join(lines)
    assert "REAL DATA" in output
    assert "95 (GOOD)" in output
    assert "Maintain Good Security Practices" in output
    assert "1. Review your account security settings regularly" in output


def test_summary_of_sample_view(engine, lines):
    engine.set_mode(True)
    _alerts(lines).print_summary(engine.snapshot())
    output = "\n".join(lines)
    assert "SAMPLE DATA" in output
    assert "Adobe Breach (SAMPLE)" in output
    assert "No real-time scan data yet" in output


def test_summary_shows_risk_percentage(engine, lines):
    _alerts(lines).print_summary(engine.snapshot())
    output = "\n".join(lines)
    assert "(90% risk)" in output
    assert "(50% risk)" in output


def test_summary_after_realtime_scan_has_no_placeholder(engine, lines):
    engine.set_mode(True)
    engine.submit_scan("Email", "jane@example.com", [], is_real_scan=True)
    _alerts(lines).print_summary(engine.snapshot())
    output = "\n".join(lines)
    assert "REAL DATA" in output
    assert "No real-time scan data yet" not in output
