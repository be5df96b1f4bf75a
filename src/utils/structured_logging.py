"""
Structured Logging Module
Provides JSON-formatted logging for better integration with log aggregation tools
"""

import json
import logging
from typing import Any


class JSONFormatter(logging.Formatter):
    """
    Custom formatter that outputs log records as JSON.

    Extra context is attached with ``extra={"extra_fields": {...}}``.

    SECURITY STORY: A scan value that reaches the logs verbatim is a leak of
    exactly the data this tool is meant to protect. Any extra field whose
    name looks like a secret or a raw identifier is replaced with
    "[REDACTED]" so that one careless ``extra_fields={"raw_value": value}``
    cannot undo the masking done everywhere else.
    """

    SENSITIVE_FIELDS = {
        'password', 'token', 'api_key', 'secret', 'credential',
        'raw_value', 'identifier_value', 'last_scan_value',
    }

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_fields"):
            log_data.update({
                k: self._sanitize_value(k, v)
                for k, v in record.extra_fields.items()
            })

        return json.dumps(log_data, default=str)

    def _sanitize_value(self, key: str, value: Any) -> Any:
        """Return "[REDACTED]" for sensitive field names, else the value."""
        key_lower = key.lower()
        if any(sensitive in key_lower for sensitive in self.SENSITIVE_FIELDS):
            return "[REDACTED]"
        return value
