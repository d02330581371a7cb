"""
Meeting window finder entry point.
Reads a day's events and a meeting request from a JSON calendar file
and reports the windows where the meeting fits best.
"""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from meetfinder.core.config_manager import Config
from meetfinder.core.scheduler import find_meeting_windows
from meetfinder.models import MeetingFinderError
from meetfinder.services.calendar_loader import CalendarLoader, save_windows
from meetfinder.utils.logger import setup_logger

logger = setup_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find the best windows of the day for a meeting.")
    parser.add_argument(
        "calendar",
        nargs="?",
        default=str(Config.CALENDAR_FILE),
        help="JSON file with 'events' and 'request' (default: %(default)s)",
    )
    parser.add_argument("-o", "--output", help="Also write the windows to this JSON file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = parse_args(argv)
    start_time = time.time()

    try:
        if not Config.validate(Path(args.calendar)):
            logger.error("Configuration validation failed")
            return 1

        events, request = CalendarLoader(Path(args.calendar)).load()
        windows = find_meeting_windows(events, request)

        logger.info("="*60)
        if windows:
            logger.info(f"{len(windows)} window(s) for a {request.duration}-minute meeting:")
            for window in windows:
                logger.info(f"  {window}  ({window.duration()} min)")
        else:
            logger.info("No window found for this meeting")
        logger.info("="*60)

        if args.output:
            save_windows(windows, Path(args.output))
        return 0

    except FileNotFoundError as e:
        logger.error("Missing required file", exc_info=True)
        logger.error(f"Could not find: {e.filename}")
        return 1

    except MeetingFinderError as e:
        logger.error("Calendar file could not be used", exc_info=True)
        logger.error(f"Error: {e}")
        return 1

    finally:
        elapsed = time.time() - start_time
        logger.debug(f"Total execution time: {elapsed:.2f} seconds")


if __name__ == "__main__":
    sys.exit(main())
