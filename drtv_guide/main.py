#!/usr/bin/env python3
"""
drtv_guide - DR TV Guide Scraper

Fetches one day of the DR linear TV schedule, then prints it and exports
it as JSON and CSV.
"""

import logging
import logging.handlers
import sys
import time

from .args import ArgumentParser
from .config import ConfigManager
from .downloader import ScheduleApiClient
from .errors import ConfigError, FetchError
from .output import ScheduleExporter
from .parser import ScheduleOrchestrator

# Package version
from . import __version__


def setup_logging(logging_config: dict):
    """Setup logging configuration according to specified levels"""
    if logging_config["level"] == "warning":
        level = logging.WARNING
    elif logging_config["level"] == "debug":
        level = logging.DEBUG
    else:  # default
        level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    # Console logging on stderr keeps stdout for the schedule table
    if logging_config["console"] and not logging_config["quiet"]:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        root_logger.addHandler(console_handler)

    log_file = logging_config.get("log_file")
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(message)s", datefmt="%Y/%m/%d %H:%M:%S"
            )
        )
        root_logger.addHandler(file_handler)

    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())


def report_error(message: str, logging_config: dict):
    """Log a fatal error, and print it when console logging is off"""
    logging.error(message)
    if logging_config["quiet"]:
        print(f"[ERROR] {message}", file=sys.stderr)


def main(argv=None):
    """Main application entry point"""
    start_time = time.time()

    arg_parser = ArgumentParser()
    args = arg_parser.parse_args(argv)

    logging_config = arg_parser.get_logging_config(args)
    setup_logging(logging_config)

    logging.info("=" * 60)
    logging.info("drtv_guide session started - Version %s", __version__)

    try:
        config_manager = ConfigManager(args.config_file)
        config_manager.load_config(**arg_parser.get_config_overrides(args))
        config_manager.log_config_summary()
        output_config = config_manager.get_output_config()

        with ScheduleApiClient(**config_manager.get_client_config()) as client:
            orchestrator = ScheduleOrchestrator(client)
            schedule = orchestrator.run(args.date)
            logging.debug("Request statistics: %s", client.get_statistics())

        exporter = ScheduleExporter(schedule, args.date, output_config["output_dir"])
        if output_config["console"]:
            exporter.print_schedule()
        if output_config["json"]:
            exporter.export_json()
        if output_config["csv"]:
            exporter.export_csv()

    except ConfigError as e:
        report_error(f"Configuration error: {e}", logging_config)
        return 1
    except FetchError as e:
        report_error(str(e), logging_config)
        logging.info("drtv_guide session ended with error")
        return 1
    except (OSError, UnicodeError) as e:
        report_error(f"Cannot write output: {e}", logging_config)
        return 1
    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        return 130

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    logging.info("drtv_guide session ended successfully")
    logging.info("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
