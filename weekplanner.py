#!/usr/bin/env python3
"""
Week Planner - A PySide6 viewer for one user's weekly schedule.

This is the main entry point for the application.
"""

import sys
import argparse
import logging
from pathlib import Path

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from backend.config import Config
from backend.logging_config import setup_logging
from backend.model import Planner
from backend.schedule_ics import load_schedule
from backend.timezone_utils import set_timezone
from gui.main_window import MainWindow

logger = logging.getLogger("weekplanner")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Week Planner - view a user's week as a 7 day x 24 hour grid"
    )
    parser.add_argument(
        "schedules",
        nargs="*",
        type=Path,
        metavar="SCHEDULE.ics",
        help="iCalendar files to read events from"
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to configuration file (default: auto-detect)"
    )
    parser.add_argument(
        "-u", "--user",
        help="User whose schedule is shown first"
    )
    parser.add_argument(
        "--host-view",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Colour events the selected user hosts differently (default: from config)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )
    return parser.parse_args(argv)


def load_planner(config: Config, paths: list[Path]) -> Planner:
    """Read every schedule file into one planner."""
    planner = Planner()
    default_host = config.default_user or "unknown"
    for path in paths:
        load_schedule(path, planner, default_host=default_host)
    return planner


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.debug)

    # Load configuration
    try:
        config = Config.load(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        print(f"Default location: {Config.get_default_config_path()}", file=sys.stderr)
        sys.exit(1)

    set_timezone(config.timezone)

    try:
        planner = load_planner(config, args.schedules)
    except (OSError, ValueError) as e:
        print(f"Error reading schedule: {e}", file=sys.stderr)
        sys.exit(1)

    logger.debug("Loaded %d events for %d users", len(planner), len(planner.get_list_of_users()))

    # Enable high DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Week Planner")
    app.setApplicationVersion("0.1")
    app.setStyle("Fusion")

    window = MainWindow(config, planner, args.user or config.default_user, args.host_view)
    window.show()

    # Run event loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
