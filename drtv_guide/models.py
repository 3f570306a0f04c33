"""
drtv_guide.models - Normalized schedule data
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List

from .utils import TimeUtils


@dataclass(frozen=True)
class ScheduleRecord:
    """A single validated broadcast slot"""
    channel_name: str
    title: str
    start_time: datetime
    end_time: datetime  # may precede start_time on malformed feeds

    def format_line(self) -> str:
        """Console table line"""
        return "%-16s | %-8s - %-8s | %s" % (
            self.channel_name,
            TimeUtils.format_clock(self.start_time),
            TimeUtils.format_clock(self.end_time),
            self.title,
        )

    def to_dict(self) -> Dict[str, str]:
        """Plain dict for JSON and CSV export"""
        return {
            "channel_name": self.channel_name,
            "title": self.title,
            "start_time": TimeUtils.format_minutes(self.start_time),
            "end_time": TimeUtils.format_minutes(self.end_time),
        }


# Channel display name -> records sorted by start time
Schedule = Dict[str, List[ScheduleRecord]]
