#!/usr/bin/env python3
"""
Breach Exposure Tracker
Command-line demo session: scan an identifier and show the resulting report
"""

import sys
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.utils.config import Config, ConfigurationError
from src.utils.logging_utils import ColoredFormatter
from src.utils.structured_logging import JSONFormatter
from src.modules.alert_system import AlertSystem
from src.modules.engine import BreachExposureEngine
from src.modules.mock_scanner import MockBreachScanner, ScanInputError

DEMO_SCAN_TYPE = "Email"
DEMO_SCAN_VALUE = "test@example.com"


class BreachTrackerSession:
    """Wires configuration, logging, the mocked scanner and the engine"""

    def __init__(self, config_file: str = ".env"):
        """
        Initialize session

        Args:
            config_file: Path to configuration file
        """
        self.config = Config(config_file)
        self.config.validate()

        self._setup_logging()
        self.logger = logging.getLogger("BreachTrackerSession")

        self.engine = BreachExposureEngine.from_config(self.config)
        self.scanner = MockBreachScanner()
        self.alert_system = AlertSystem(self.config.notifications)
        self.engine.add_notification_listener(self.alert_system.handle_notification)

    def _setup_logging(self):
        """Setup logging configuration"""
        log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

        log_path = Path(self.config.system.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        level_name = str(self.config.system.log_level).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.INFO

        file_handler = logging.FileHandler(self.config.system.log_file)
        if self.config.system.log_format == "json":
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(log_format))

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(ColoredFormatter(log_format))

        logging.basicConfig(level=level, handlers=[file_handler, console_handler], force=True)

        if level_name != logging.getLevelName(level):
            logging.getLogger("BreachTrackerSession").warning(
                "Invalid log level '%s'; defaulting to INFO",
                self.config.system.log_level
            )

    def run(self, scan_type: str, value: str) -> int:
        """
        Run one real-time scan and print the report.

        Returns:
            Process exit status
        """
        try:
            self.engine.set_mode(True)
            breaches = self.scanner.scan(scan_type, value)
            self.engine.submit_scan(scan_type, value, breaches, is_real_scan=True)
            self.alert_system.print_summary(self.engine.snapshot())
            self.logger.debug(f"Session metrics: {self.engine.metrics.get_summary()}")
            return 0
        except ScanInputError as e:
            self.logger.error(f"Invalid scan input: {e}")
            return 1
        finally:
            self.engine.close()


def main(argv=None) -> int:
    """Main entry point"""
    args = list(sys.argv if argv is None else argv)

    scan_type = args[1] if len(args) > 2 else DEMO_SCAN_TYPE
    value = args[2] if len(args) > 2 else DEMO_SCAN_VALUE
    config_file = args[3] if len(args) > 3 else ".env"

    if len(args) == 2:
        print("Usage: python -m src.main [TYPE VALUE [ENV_FILE]]")
        return 1

    try:
        session = BreachTrackerSession(config_file)
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return 1

    return session.run(scan_type, value)


if __name__ == "__main__":
    sys.exit(main())
