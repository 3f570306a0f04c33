"""
drtv_guide.output - Schedule presentation

Console table, JSON file and CSV file exports of a parsed Schedule.
"""

import csv
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from .models import Schedule
from .utils import TimeUtils

RULE_WIDTH = 74
CSV_FIELDS = ["channel_name", "start_time", "end_time", "title"]


class ScheduleExporter:
    """Writes a Schedule to the console, JSON and CSV"""

    def __init__(self, schedule: Schedule, date: str, output_dir: Optional[Path] = None):
        self.schedule = schedule
        self.date = date
        self.output_dir = Path(output_dir) if output_dir else Path(".")

    def total_programs(self) -> int:
        return sum(len(records) for records in self.schedule.values())

    def print_schedule(self, stream: Optional[TextIO] = None):
        """Print a formatted table, one separator rule after each channel"""
        out = stream or sys.stdout

        out.write("\n" + "=" * RULE_WIDTH + "\n")
        out.write(f" DR TV Schedule - {self.date}\n")
        out.write("=" * RULE_WIDTH + "\n")
        out.write("%-16s | %-8s - %-8s | %s\n" % ("Channel", "Start", "End", "Title"))
        out.write("-" * RULE_WIDTH + "\n")

        for records in self.schedule.values():
            for record in records:
                out.write(record.format_line() + "\n")
            out.write("-" * RULE_WIDTH + "\n")

    def build_payload(self) -> Dict[str, Any]:
        """JSON export document"""
        return {
            "date": self.date,
            "scraped_at": TimeUtils.utc_now_iso(),
            "total_channels": len(self.schedule),
            "total_programs": self.total_programs(),
            "schedule": {
                channel_name: [record.to_dict() for record in records]
                for channel_name, records in self.schedule.items()
            },
        }

    def export_json(self, path: Optional[Path] = None) -> Path:
        """Write a pretty-printed JSON file and return its path"""
        path = Path(path) if path else self.default_path("json")
        path.parent.mkdir(parents=True, exist_ok=True)

        text = json.dumps(self.build_payload(), indent=2, ensure_ascii=False) + "\n"
        with open(path, "w", encoding="utf-8", errors="replace") as f:
            f.write(text)

        logging.info("JSON written: %s", path)
        return path

    def export_csv(self, path: Optional[Path] = None) -> Path:
        """Write a CSV file with a header row and return its path"""
        path = Path(path) if path else self.default_path("csv")
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8", errors="replace", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_FIELDS)
            for records in self.schedule.values():
                for record in records:
                    row = record.to_dict()
                    writer.writerow([row[field] for field in CSV_FIELDS])

        logging.info("CSV written: %s", path)
        return path

    def default_path(self, extension: str) -> Path:
        return self.output_dir / f"dr_tv_schedule_{self.date}.{extension}"

    @staticmethod
    def load_json(path: Path) -> Dict[str, Any]:
        """Read a JSON export back"""
        with open(path, encoding="utf-8") as f:
            return json.load(f)
