"""
Schedule parser for drtv_guide

The schedule API mixes several historical response versions in a single
payload. Each logical field is therefore looked up through an ordered list
of candidate names, and broadcasts that cannot be normalized are dropped
instead of failing the whole schedule:

    [
      {
        "channelId": 20875,
        "channelName": "DR1",                  # sometimes present
        "schedules": [                         # or "items" / "schedule"
          {
            "item": {"title": "Nyhederne"},    # or "customTitle" / "showTitle"
            "startDate": "2026-02-26T19:00:00+01:00",  # or "start" / "scheduleStart"
            "endDate": "2026-02-26T19:30:00+01:00"     # or "end" / "scheduleEnd"
          }
        ]
      }
    ]
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..models import Schedule, ScheduleRecord
from ..utils import TimeUtils, clean_text
from .channels import ChannelRegistry

BROADCAST_LIST_FIELDS = ("schedules", "items", "schedule")
TITLE_FIELDS = ("customTitle", "showTitle")
START_FIELDS = ("startDate", "start", "scheduleStart")
END_FIELDS = ("endDate", "end", "scheduleEnd")


def first_present(data: Any, names: Sequence[str]) -> Optional[Any]:
    """Return the value of the first field in names that is set and not null"""
    if not isinstance(data, Mapping):
        return None

    for name in names:
        value = data.get(name)
        if value is not None:
            return value
    return None


class ScheduleParser:
    """Parses raw schedule API data into a Schedule"""

    def __init__(self, registry=ChannelRegistry):
        self.registry = registry
        self.dropped_count = 0

    def parse(self, raw_channels: Any) -> Schedule:
        """
        Build a Schedule from the API channel array

        Args:
            raw_channels: Decoded JSON, expected to be a list of channel objects

        Returns:
            Schedule: channel name -> records sorted by start time, channels
            in the order they appear in the response
        """
        schedule: Schedule = {}
        self.dropped_count = 0

        if not isinstance(raw_channels, (list, tuple)):
            if raw_channels is not None:
                logging.warning(
                    "Unexpected schedule payload (%s), treating as empty",
                    type(raw_channels).__name__,
                )
            return schedule

        for channel_data in raw_channels:
            if not isinstance(channel_data, Mapping):
                logging.debug("Skipping non-object channel entry: %r", channel_data)
                continue

            channel_name = self.registry.resolve(
                channel_data.get("channelId"), channel_data.get("channelName")
            )

            records = []
            for broadcast in self._get_broadcasts(channel_data):
                record = self.build_record(broadcast, channel_name)
                if record is None:
                    self.dropped_count += 1
                    continue
                records.append(record)

            if channel_name in schedule:
                logging.debug("Channel %s listed more than once, last entry wins", channel_name)

            # sorted() is stable: equal start times keep their feed order
            schedule[channel_name] = sorted(records, key=lambda record: record.start_time)

        if self.dropped_count:
            logging.debug("Dropped %d incomplete broadcasts", self.dropped_count)

        return schedule

    def build_record(self, broadcast: Any, channel_name: str) -> Optional[ScheduleRecord]:
        """Normalize one broadcast, or return None if it lacks a title or valid times"""
        if not isinstance(broadcast, Mapping):
            return None

        title = self._extract_title(broadcast).strip()
        if not title:
            return None

        start_time = TimeUtils.parse_iso8601(first_present(broadcast, START_FIELDS))
        end_time = TimeUtils.parse_iso8601(first_present(broadcast, END_FIELDS))
        if start_time is None or end_time is None:
            return None

        return ScheduleRecord(
            channel_name=channel_name,
            title=title,
            start_time=start_time,
            end_time=end_time,
        )

    def _get_broadcasts(self, channel_data: Mapping) -> List[Dict]:
        """Broadcast list under whichever key this response version uses"""
        broadcasts = first_present(channel_data, BROADCAST_LIST_FIELDS)
        if broadcasts is None:
            return []
        if not isinstance(broadcasts, (list, tuple)):
            logging.debug("Ignoring non-list broadcast field: %r", broadcasts)
            return []
        return list(broadcasts)

    def _extract_title(self, broadcast: Mapping) -> str:
        """Title from item.title, customTitle or showTitle"""
        title = first_present(broadcast.get("item"), ("title",))
        if title is None:
            title = first_present(broadcast, TITLE_FIELDS)

        if not isinstance(title, str):
            return ""
        return clean_text(title)
