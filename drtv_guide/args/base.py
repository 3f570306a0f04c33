"""
Main argument parser module for drtv_guide

Orchestrates argument parsing, validation, and special actions handling.
"""

import argparse
import sys
from pathlib import Path

from ..utils import TimeUtils
from .validator import ArgumentValidator


class ArgumentParser:
    """Command line argument parser for drtv_guide"""

    def __init__(self):
        self.parser = self._create_parser()
        self.validator = ArgumentValidator()

    def _create_parser(self):
        """Create the argument parser with all options"""
        parser = argparse.ArgumentParser(
            prog="drtv-guide",
            description="DR TV guide scraper (www.dr.dk/drtv/tv-guide)",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._get_epilog_text(),
        )

        parser.add_argument(
            "date", nargs="?",
            help="Schedule date as YYYY-MM-DD (default: today)"
        )

        parser.add_argument(
            "--description", "-d", action="store_true",
            help="Show scraper description and exit"
        )

        parser.add_argument(
            "--version", "-v", action="store_true",
            help="Show version and exit"
        )

        # Log level selection
        level_group = parser.add_mutually_exclusive_group()
        level_group.add_argument(
            "--warning", "-w", action="store_true",
            help="Only log warnings and errors"
        )

        level_group.add_argument(
            "--debug", action="store_true",
            help="Log all debug information (very verbose)"
        )

        # Console output control
        console_group = parser.add_mutually_exclusive_group()
        console_group.add_argument(
            "--console", action="store_true",
            help="Display log messages on stderr (default)"
        )

        console_group.add_argument(
            "--quiet", "-q", action="store_true",
            help="No log messages on stderr"
        )

        parser.add_argument(
            "--log-file", type=Path,
            help="Also write log messages to this file (rotated at 1 MiB)"
        )

        # Output control
        parser.add_argument(
            "--output-dir", "-o", type=Path,
            help="Directory for the JSON and CSV files (default: current directory)"
        )

        parser.add_argument(
            "--no-console", action="store_true",
            help="Don't print the schedule table"
        )

        parser.add_argument(
            "--no-json", action="store_true",
            help="Don't write the JSON file"
        )

        parser.add_argument(
            "--no-csv", action="store_true",
            help="Don't write the CSV file"
        )

        # Configuration
        parser.add_argument(
            "--config-file", type=Path,
            help="Configuration file path"
        )

        parser.add_argument(
            "--create-config", type=Path, metavar="PATH",
            help="Write the default configuration file to PATH and exit"
        )

        parser.add_argument(
            "--timeout", type=float, metavar="SECONDS",
            help="Read timeout for the schedule API (default: 30)"
        )

        return parser

    def _get_epilog_text(self):
        """Get the epilog help text"""
        return """
Examples:
  drtv-guide                                  # Today's schedule
  drtv-guide 2026-02-26
  drtv-guide 2026-02-26 --no-console --output-dir exports
  drtv-guide 2026-02-26 --debug --log-file drtv-guide.log
  drtv-guide --create-config ~/.config/drtv-guide.xml

Output files:
  dr_tv_schedule_YYYY-MM-DD.json
  dr_tv_schedule_YYYY-MM-DD.csv

Environment:
  DRTV_BASE_URL, DRTV_LANG, DRTV_CONNECT_TIMEOUT, DRTV_READ_TIMEOUT,
  DRTV_OUTPUT_DIR override the configuration file
        """

    def parse_args(self, args=None):
        """Parse command line arguments with validation"""
        args = self.parser.parse_args(args)

        # Handle special actions that exit immediately
        if self._handle_special_actions(args):
            sys.exit(0)

        # Validate arguments
        self._validate_args(args)

        # Normalize options
        self._normalize_options(args)

        return args

    def _handle_special_actions(self, args) -> bool:
        """Handle special actions that exit immediately"""
        if args.description:
            print("Denmark (www.dr.dk/drtv/tv-guide using drtv-guide)")
            return True

        if args.version:
            from .. import __version__
            print(__version__)
            return True

        if args.create_config:
            from ..config import ConfigManager
            try:
                path = ConfigManager.write_default_config(args.create_config)
            except OSError as e:
                self.parser.error(f"Cannot write configuration file {args.create_config}: {e}")
            print(f"Default configuration written to {path}")
            return True

        return False

    def _validate_args(self, args):
        """Validate argument values"""
        errors = self.validator.validate_all_arguments(args)
        if errors:
            # parser.error() exits with status 2 and the usage message
            self.parser.error("; ".join(errors))

    def _normalize_options(self, args):
        """Normalize various options"""
        if args.date is None:
            args.date = TimeUtils.today_iso()

    def get_logging_config(self, args):
        """Determine logging configuration from arguments"""
        config = {
            "level": "default",
            "console": True,
            "quiet": False,
            "log_file": getattr(args, "log_file", None),
        }

        if args.debug:
            config["level"] = "debug"
        elif args.warning:
            config["level"] = "warning"

        if args.quiet:
            config["console"] = False
            config["quiet"] = True

        return config

    def get_config_overrides(self, args):
        """Configuration settings given on the command line"""
        return {
            "readtimeout": args.timeout,
            "outputdir": str(args.output_dir) if args.output_dir else None,
            "console": False if args.no_console else None,
            "json": False if args.no_json else None,
            "csv": False if args.no_csv else None,
        }
