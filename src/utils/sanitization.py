"""
Sanitization Utility Module
Provides masking of sensitive identifiers and safe text for logging and display.
"""

import re
import unicodedata

# Scan types treated as government-issued identifiers (compared lower-case)
GOVERNMENT_ID_TYPES = frozenset({
    "ssn", "aadhar", "pan", "passport", "drivinglicense", "voterid",
})

_PHONE_MIDDLE_BLOCK = re.compile(r"(\d{3})\d{4}(\d{3})")
_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def mask_sensitive_data(value: str, scan_type: str) -> str:
    """
    Redact an identifier value for display and storage.

    Args:
        value: The raw identifier value as submitted by the user.
        scan_type: Open-ended scan type label (e.g. "Email", "Phone", "SSN").

    Returns:
        The masked value. Values that do not match the expected shape for
        their type are returned unchanged; this function never raises.

    SECURITY STORY: The masked form is what ends up in the scan history and
    in notification messages, so the raw value only lives as long as the
    caller holds it. Government IDs are rendered as ``***-**-<value>``
    without truncating the value itself: the scan form only collects the
    last digits, so the value is shown as given.
    """
    if value is None:
        return ""
    kind = (scan_type or "").strip().lower()

    if kind == "email":
        parts = value.split("@")
        local_part = parts[0]
        domain = parts[1] if len(parts) > 1 else ""
        if local_part and domain:
            return f"{local_part[:1]}***@{domain}"
        return value

    if kind == "phone":
        # Only the first 10-digit run is masked
        return _PHONE_MIDDLE_BLOCK.sub(r"\1-XXXX-\2", value, count=1)

    if kind in GOVERNMENT_ID_TYPES:
        return f"***-**-{value}"

    if kind == "username":
        if len(value) <= 3:
            return value
        return f"{value[:1]}***{value[-1:]}"

    return value


def sanitize_for_logging(text: str, max_length: int = 255) -> str:
    """
    Sanitize text for safe logging to prevent Log Injection (CRLF) and terminal manipulation.

    Args:
        text: The input string to sanitize.
        max_length: Maximum allowed length for the log entry (truncates if longer).

    Returns:
        Sanitized string safe for logging.
    """
    if not text:
        return ""

    text = unicodedata.normalize('NFKC', str(text))
    text = text.replace('\n', '\\n').replace('\r', '\\r')
    text = _ANSI_ESCAPE.sub('', text)

    # Remaining control characters (ASCII 0-31 except tab)
    text = "".join(ch for ch in text if ch == '\t' or ord(ch) >= 32)

    if len(text) > max_length:
        text = text[:max_length] + "..."

    return text
