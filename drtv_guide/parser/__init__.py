"""
drtv_guide.parser - Schedule parsing module

Turns raw schedule API JSON into normalized, per-channel records.
Pure parsing logic without HTTP responsibilities.
"""

from .channels import ChannelRegistry
from .core import ScheduleOrchestrator
from .schedule import ScheduleParser, first_present

__all__ = [
    "ScheduleOrchestrator",  # Fetch + parse for one date
    "ScheduleParser",        # Pure schedule parsing
    "ChannelRegistry",       # Channel ID -> display name
    "first_present",
]
