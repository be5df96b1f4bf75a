"""
Configuration Management Module
Handles loading and validation of environment variables and settings
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

NOTIFICATION_SEVERITIES = ("info", "low", "medium", "high")
LOG_FORMATS = ("text", "json")


class ConfigurationError(ValueError):
    """Raised when a configuration value is missing or invalid"""


@dataclass
class ModeConfig:
    """Configuration for sample / real-time mode handling"""
    realtime_timeout_seconds: int


@dataclass
class NotificationConfig:
    """Configuration for the console notification channel"""
    console: bool
    min_severity: str


@dataclass
class SystemConfig:
    """Configuration for system settings"""
    log_level: str
    log_file: str
    log_format: str


class Config:
    """Main configuration class"""

    def __init__(self, env_file: str = ".env"):
        """
        Initialize configuration from environment file

        Args:
            env_file: Path to environment file (default: .env)
        """
        load_dotenv(env_file)

        self.mode = self._load_mode_config()
        self.notifications = self._load_notification_config()
        self.system = self._load_system_config()

    def _load_mode_config(self) -> ModeConfig:
        """Load mode configuration"""
        return ModeConfig(
            realtime_timeout_seconds=self._get_int("REALTIME_TIMEOUT_SECONDS", 1800),
        )

    def _load_notification_config(self) -> NotificationConfig:
        """Load notification channel configuration"""
        return NotificationConfig(
            console=self._get_bool("NOTIFY_CONSOLE", True),
            min_severity=os.getenv("NOTIFY_MIN_SEVERITY", "info").strip().lower(),
        )

    def _load_system_config(self) -> SystemConfig:
        """Load system configuration"""
        return SystemConfig(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE", "logs/breach_tracker.log"),
            log_format=os.getenv("LOG_FORMAT", "text").strip().lower(),
        )

    @staticmethod
    def _get_bool(key: str, default: bool = False) -> bool:
        """Convert environment variable to boolean"""
        value = os.getenv(key, str(default)).lower()
        return value in ('true', '1', 'yes', 'on')

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Convert environment variable to int, naming the variable on failure"""
        raw = os.getenv(key, str(default)).strip()
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from None

    def validate(self) -> bool:
        """
        Validate configuration

        Returns:
            True if configuration is valid

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if self.mode.realtime_timeout_seconds <= 0:
            raise ConfigurationError("REALTIME_TIMEOUT_SECONDS must be a positive number of seconds")

        if self.notifications.min_severity not in NOTIFICATION_SEVERITIES:
            raise ConfigurationError(
                f"NOTIFY_MIN_SEVERITY must be one of {', '.join(NOTIFICATION_SEVERITIES)}"
            )

        if self.system.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}")

        return True
