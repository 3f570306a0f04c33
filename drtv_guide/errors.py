"""
drtv_guide.errors - Exception types

Only failures that abort a run are modelled here. Broadcasts that cannot be
normalized are not errors: the parser drops them.
"""

from typing import Optional


class DrtvGuideError(Exception):
    """Base class for all drtv_guide failures"""


class FetchError(DrtvGuideError):
    """Schedule API could not be reached or returned an unusable response"""

    def __init__(self, message: str, url: Optional[str] = None,
                 status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ConfigError(DrtvGuideError):
    """Invalid configuration file, environment override or setting value"""
