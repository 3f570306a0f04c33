"""
drtv_guide - DR TV Guide Scraper

Downloads the daily DR linear TV schedule from the Massive CDN API behind
www.dr.dk/drtv/tv-guide, normalizes it and exports it as a console table,
JSON and CSV.
"""

__version__ = "1.0.0"
__author__ = "drtv-guide contributors"
__license__ = "GPL-3.0"

from .args import ArgumentParser
from .config import ConfigManager
from .downloader import ScheduleApiClient
from .errors import ConfigError, DrtvGuideError, FetchError
from .models import Schedule, ScheduleRecord
from .output import ScheduleExporter
from .parser import ChannelRegistry, ScheduleOrchestrator, ScheduleParser
from .utils import TimeUtils

__all__ = [
    "ArgumentParser",
    "ConfigManager",
    "ScheduleApiClient",
    "ConfigError",
    "DrtvGuideError",
    "FetchError",
    "Schedule",
    "ScheduleRecord",
    "ScheduleExporter",
    "ChannelRegistry",
    "ScheduleOrchestrator",
    "ScheduleParser",
    "TimeUtils",
]
