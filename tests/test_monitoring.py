"""
Tests for the monitoring registry.
"""

import unittest

from src.modules.monitoring import MonitoringRegistry
from src.modules.notification_log import NotificationLog


class TestMonitoringRegistry(unittest.TestCase):

    def setUp(self):
        self.notifications = NotificationLog()
        self.registry = MonitoringRegistry(self.notifications)

    def _titles(self):
        return [e.title for e in self.notifications.entries()]

    def test_enable_creates_entry_and_notification(self):
        self.assertTrue(self.registry.enable("Email", "jane@example.com", account_ref="acct-1"))
        self.assertTrue(self.registry.is_monitored("Email", "jane@example.com"))

        entry = self.registry.entries()[0]
        self.assertEqual(entry.scan_type, "Email")
        self.assertEqual(entry.value, "jane@example.com")
        self.assertEqual(entry.account_ref, "acct-1")

        notification = self.notifications.entries()[0]
        self.assertEqual(notification.category, "monitoring")
        self.assertEqual(notification.title, "Continuous Monitoring Activated")
        self.assertIn("j***@example.com", notification.message)
        self.assertNotIn("jane@example.com", notification.message)
        self.assertEqual(notification.related_id, entry.id)

    def test_enable_twice_is_idempotent(self):
        self.registry.enable("Email", "jane@example.com")
        self.assertFalse(self.registry.enable("Email", "jane@example.com"))
        self.assertEqual(len(self.registry), 1)
        self.assertEqual(self._titles(), ["Continuous Monitoring Activated"])

    def test_lookup_is_exact(self):
        self.registry.enable("Email", "jane@example.com")
        self.assertFalse(self.registry.is_monitored("email", "jane@example.com"))
        self.assertFalse(self.registry.is_monitored("Email", "Jane@example.com"))

    def test_disable_removes_entry(self):
        self.registry.enable("Phone", "5551234567")
        self.assertTrue(self.registry.disable("Phone", "5551234567"))
        self.assertFalse(self.registry.is_monitored("Phone", "5551234567"))
        self.assertEqual(self.registry.entries(), [])
        self.assertEqual(self._titles(), ["Continuous Monitoring Stopped", "Continuous Monitoring Activated"])
        self.assertIn("555-XXXX-567", self.notifications.entries()[0].message)

    def test_disable_unmonitored_still_notifies(self):
        self.assertFalse(self.registry.disable("Email", "nobody@example.com"))
        self.assertEqual(self._titles(), ["Continuous Monitoring Stopped"])
        self.assertIsNone(self.notifications.entries()[0].related_id)

    def test_re_enable_after_disable(self):
        self.registry.enable("Username", "admin123")
        self.registry.disable("Username", "admin123")
        self.assertTrue(self.registry.enable("Username", "admin123"))
        self.assertEqual(len(self.registry), 1)


if __name__ == '__main__':
    unittest.main()
