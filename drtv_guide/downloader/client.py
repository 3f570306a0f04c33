"""
drtv_guide.downloader.client - Schedule API client

Wraps the Massive/Accedo CDN endpoint behind https://www.dr.dk/drtv/tv-guide.
One GET per run: failures raise FetchError and are never retried.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..errors import FetchError
from ..parser.channels import ChannelRegistry


class ScheduleApiClient:
    """HTTP client for the DR schedule API"""

    BASE_URL = "https://prod95-cdn.dr-massive.com/api/schedules"

    # Query parameters as sent by the DR TV web player
    STATIC_PARAMS = [
        ("device", "web_browser"),
        ("ff", "idp,ldp,rpt"),
        ("hour", "0"),  # midnight start
        ("segments", "drtv,optedout"),
        ("sub", "Anonymous2"),
    ]

    # Browser-like User-Agent, the CDN rejects unknown clients with 403
    USER_AGENT = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/123.0.0.0 Safari/537.36"
    )

    def __init__(
        self,
        base_url: Optional[str] = None,
        connect_timeout: float = 10.0,
        read_timeout: float = 30.0,
        lang: str = "da",
        geolocation: str = "abroad",
        abroad: bool = True,
        duration: int = 24,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url or self.BASE_URL
        self.timeout: Tuple[float, float] = (connect_timeout, read_timeout)
        self.lang = lang
        self.geolocation = geolocation
        self.abroad = abroad
        self.duration = duration

        self.total_requests = 0
        self.last_status_code: Optional[int] = None
        self.bytes_received = 0

        self.session = session
        if self.session is None:
            self.init_session()

    def init_session(self):
        """Initialize session with browser headers and no automatic retries"""
        if self.session:
            self.session.close()

        self.session = requests.Session()
        self.session.headers.update(
            {
                "User-Agent": self.USER_AGENT,
                "Accept": "application/json, */*",
                "Referer": "https://www.dr.dk/",
                "Origin": "https://www.dr.dk",
            }
        )

        adapter = HTTPAdapter(max_retries=Retry(total=0, backoff_factor=0, status_forcelist=[]))
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        logging.debug("Schedule API session initialized (timeout: %s)", self.timeout)

    def build_params(self, date: str) -> List[Tuple[str, str]]:
        """Query parameters for one day of every known channel"""
        params = list(self.STATIC_PARAMS)
        params.extend(
            [
                ("duration", str(self.duration)),
                ("geoLocation", self.geolocation),
                ("isDeviceAbroad", "true" if self.abroad else "false"),
                ("lang", self.lang),
                ("channels", ",".join(ChannelRegistry.channel_ids())),
                ("date", date),
            ]
        )
        return params

    def fetch_schedule(self, date: str) -> Any:
        """
        Fetch the raw schedule JSON for a date

        Args:
            date: Date string YYYY-MM-DD

        Returns:
            Decoded JSON body, normally a list with one entry per channel

        Raises:
            FetchError: On network failure, non-200 status or invalid JSON
        """
        self.total_requests += 1
        logging.debug("GET %s (date=%s)", self.base_url, date)

        try:
            response = self.session.get(
                self.base_url, params=self.build_params(date), timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            raise FetchError(f"Network error: timed out ({e})", url=self.base_url) from e
        except requests.exceptions.ConnectionError as e:
            raise FetchError(f"Network error: {e}", url=self.base_url) from e
        except requests.exceptions.RequestException as e:
            raise FetchError(f"Request error: {e}", url=self.base_url) from e

        self.last_status_code = response.status_code
        if response.status_code != 200:
            raise FetchError(
                f"HTTP {response.status_code} {response.reason} fetching: {response.url}",
                url=response.url,
                status_code=response.status_code,
            )

        self.bytes_received += len(response.content)
        logging.debug("  Success: %d bytes received", len(response.content))

        try:
            return response.json()
        except ValueError as e:
            raise FetchError(f"Could not parse API JSON: {e}", url=response.url) from e

    def close(self):
        """Clean shutdown"""
        if self.session:
            self.session.close()
            self.session = None

    def get_statistics(self) -> Dict[str, Any]:
        """Get request statistics"""
        return {
            "total_requests": self.total_requests,
            "last_status_code": self.last_status_code,
            "bytes_received": self.bytes_received,
        }

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self.close()
