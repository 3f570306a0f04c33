"""
drtv_guide.downloader - Download management module

Handles the HTTP request to the DR schedule API.
"""

from .client import ScheduleApiClient

__all__ = [
    "ScheduleApiClient",
]
