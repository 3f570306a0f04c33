"""
Core that orchestrates downloading and parsing
"""

import logging
from typing import Optional

from ..models import Schedule
from .schedule import ScheduleParser


class ScheduleOrchestrator:
    """Runs fetch then parse for one date and keeps the result"""

    def __init__(self, client, parser: Optional[ScheduleParser] = None):
        self.client = client
        self.parser = parser or ScheduleParser()
        self.schedule: Schedule = {}

    def run(self, date: str) -> Schedule:
        """
        Fetch and parse the schedule for a date

        Args:
            date: Date string YYYY-MM-DD, passed through to the API

        Returns:
            Schedule: Freshly parsed schedule

        Raises:
            FetchError: If the API request fails (not retried)
        """
        logging.info("Fetching DR TV schedule for %s", date)
        self.schedule = {}
        raw_data = self.client.fetch_schedule(date)

        self.schedule = self.parser.parse(raw_data)

        logging.info(
            "Done - %d programs across %d channels.",
            self.total_programs(),
            self.total_channels(),
        )
        return self.schedule

    def total_programs(self) -> int:
        return sum(len(records) for records in self.schedule.values())

    def total_channels(self) -> int:
        return len(self.schedule)

    def get_schedule(self) -> Schedule:
        """Get the last parsed schedule"""
        return self.schedule
