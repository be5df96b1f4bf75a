"""
Tests for engine metrics collection
"""

import time
import unittest
from datetime import datetime, timedelta

from src.utils.metrics import EngineMetrics


class TestEngineMetrics(unittest.TestCase):

    def setUp(self):
        self.metrics = EngineMetrics()

    def test_initialization(self):
        summary = self.metrics.get_summary()
        self.assertEqual(summary["scans_submitted"], 0)
        self.assertEqual(summary["real_scans"], 0)
        self.assertEqual(summary["breaches_by_risk"], {})
        self.assertEqual(summary["mode_switches"], {})
        self.assertEqual(summary["notifications"], {})

    def test_record_scans(self):
        self.metrics.record_scan(True, ["high", "medium", "high"])
        self.metrics.record_scan(False, ["low"])
        summary = self.metrics.get_summary()
        self.assertEqual(summary["scans_submitted"], 2)
        self.assertEqual(summary["real_scans"], 1)
        self.assertEqual(summary["sample_scans"], 1)
        # Sample scans don't count their breaches
        self.assertEqual(summary["breaches_by_risk"], {"high": 2, "medium": 1})

    def test_record_mode_switch_and_notification(self):
        self.metrics.record_mode_switch("to_realtime")
        self.metrics.record_mode_switch("expired")
        self.metrics.record_notification("system")
        self.metrics.record_notification("system")
        summary = self.metrics.get_summary()
        self.assertEqual(summary["mode_switches"], {"to_realtime": 1, "expired": 1})
        self.assertEqual(summary["notifications"], {"system": 2})

    def test_uptime_calculation(self):
        self.metrics.start_time = datetime.now() - timedelta(seconds=60)
        uptime = self.metrics.get_summary()["uptime_seconds"]
        self.assertGreater(uptime, 59)
        self.assertLess(uptime, 61)

    def test_reset(self):
        self.metrics.record_scan(True, ["high"])
        self.metrics.record_mode_switch("to_sample")
        self.metrics.record_notification("scan")
        old_start_time = self.metrics.start_time
        time.sleep(0.01)

        self.metrics.reset()

        summary = self.metrics.get_summary()
        self.assertEqual(summary["scans_submitted"], 0)
        self.assertEqual(summary["breaches_by_risk"], {})
        self.assertEqual(summary["mode_switches"], {})
        self.assertEqual(summary["notifications"], {})
        self.assertGreater(self.metrics.start_time, old_start_time)


if __name__ == '__main__':
    unittest.main()
