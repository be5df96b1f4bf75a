"""
ANSI Color codes for console output formatting
"""

import os
import sys


def _colors_enabled() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


_ENABLED = _colors_enabled()


def _code(value: str) -> str:
    return value if _ENABLED else ""


class Colors:
    """ANSI color codes and helper methods"""
    RESET = _code("\033[0m")
    BOLD = _code("\033[1m")

    RED = _code("\033[31m")
    GREEN = _code("\033[32m")
    YELLOW = _code("\033[33m")
    BLUE = _code("\033[34m")
    MAGENTA = _code("\033[35m")
    CYAN = _code("\033[36m")
    WHITE = _code("\033[37m")
    GREY = _code("\033[90m")

    @classmethod
    def colorize(cls, text: str, color: str) -> str:
        """Wrap text in color codes"""
        if not color:
            return text
        return f"{color}{text}{cls.RESET}"

    @classmethod
    def get_risk_color(cls, level: str) -> str:
        """Color for a risk, severity or priority label"""
        level = (level or "").lower()
        if level in ("critical", "high"):
            return cls.RED
        if level == "medium":
            return cls.YELLOW
        if level == "low":
            return cls.GREEN
        if level == "info":
            return cls.CYAN
        return cls.WHITE

    @classmethod
    def get_rating_color(cls, rating: str) -> str:
        """Color for a security score rating (good / fair / poor)"""
        return {
            "good": cls.GREEN,
            "fair": cls.YELLOW,
            "poor": cls.RED,
        }.get((rating or "").lower(), cls.WHITE)
