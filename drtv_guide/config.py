"""
drtv_guide.config - Configuration management

Settings come from, in increasing priority: built-in defaults, an optional
XML settings file, DRTV_* environment variables and command line options.
"""

import logging
import os
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ConfigError


class ConfigManager:
    """Manages drtv_guide configuration"""

    # Default configuration template, also written by --create-config
    DEFAULT_CONFIG = """<?xml version="1.0" encoding="utf-8"?>
<settings version="1">
  <!-- Schedule API -->
  <setting id="baseurl">https://prod95-cdn.dr-massive.com/api/schedules</setting>
  <setting id="lang">da</setting>
  <setting id="geolocation">abroad</setting>
  <setting id="abroad">true</setting>
  <setting id="duration">24</setting>

  <!-- Network timeouts (seconds) -->
  <setting id="connecttimeout">10</setting>
  <setting id="readtimeout">30</setting>

  <!-- Output -->
  <setting id="outputdir">.</setting>
  <setting id="console">true</setting>
  <setting id="json">true</setting>
  <setting id="csv">true</setting>
</settings>"""

    # Valid settings and their types
    VALID_SETTINGS = {
        "baseurl": str,
        "lang": str,
        "geolocation": str,
        "abroad": bool,
        "duration": int,
        "connecttimeout": float,
        "readtimeout": float,
        "outputdir": str,
        "console": bool,
        "json": bool,
        "csv": bool,
    }

    # Environment variable -> setting
    ENV_SETTINGS = {
        "DRTV_BASE_URL": "baseurl",
        "DRTV_LANG": "lang",
        "DRTV_CONNECT_TIMEOUT": "connecttimeout",
        "DRTV_READ_TIMEOUT": "readtimeout",
        "DRTV_OUTPUT_DIR": "outputdir",
    }

    TRUE_VALUES = ("true", "1", "yes", "on")
    FALSE_VALUES = ("false", "0", "no", "off", "")

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = Path(config_file) if config_file else None
        self.settings: Dict[str, Any] = {}
        self.sources: Dict[str, str] = {}  # setting -> where its value came from

    def load_config(self, **overrides: Any) -> Dict[str, Any]:
        """
        Load and validate configuration

        Args:
            **overrides: Setting values from the command line; None means unset

        Returns:
            Dict of setting id -> typed value

        Raises:
            ConfigError: On unreadable XML or invalid setting values
        """
        self.settings = {}
        self.sources = {}

        self._apply(self._parse_settings(self.DEFAULT_CONFIG, "defaults"), "defaults")

        if self.config_file:
            if self.config_file.exists():
                logging.info("Reading configuration from: %s", self.config_file)
                try:
                    content = self.config_file.read_text(encoding="utf-8")
                except OSError as e:
                    raise ConfigError(
                        f"Cannot read configuration file {self.config_file}: {e}"
                    ) from e
                self._apply(self._parse_settings(content, str(self.config_file)), "file")
            else:
                logging.warning("Configuration file not found: %s, using defaults", self.config_file)

        self._apply(self._load_environment(), "environment")

        command_line = {}
        for setting_id, value in overrides.items():
            if value is None:
                continue
            if setting_id not in self.VALID_SETTINGS:
                raise ConfigError(f"Unknown setting: {setting_id}")
            command_line[setting_id] = self._convert(setting_id, value)
        self._apply(command_line, "command line")

        self._validate_config()
        return self.settings

    def _apply(self, values: Dict[str, Any], source: str):
        for setting_id, value in values.items():
            self.settings[setting_id] = value
            self.sources[setting_id] = source

    def _parse_settings(self, content: str, source: str) -> Dict[str, Any]:
        """Parse <setting id="..."> entries from an XML settings document"""
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise ConfigError(f"Cannot parse configuration {source}: {e}") from e

        values = {}
        for setting in root.findall("setting"):
            setting_id = setting.get("id")
            setting_value = setting.get("value")
            if setting_value is None:
                setting_value = setting.text

            if setting_id not in self.VALID_SETTINGS:
                logging.warning(
                    "Unknown configuration setting: %s = %s (ignored)", setting_id, setting_value
                )
                continue

            values[setting_id] = self._convert(setting_id, setting_value)
            logging.debug("Config setting: %s = %s", setting_id, values[setting_id])

        return values

    def _load_environment(self) -> Dict[str, Any]:
        """Read DRTV_* overrides; invalid values are ignored"""
        values = {}
        for env_name, setting_id in self.ENV_SETTINGS.items():
            raw_value = os.environ.get(env_name)
            if not raw_value:
                continue
            try:
                values[setting_id] = self._convert(setting_id, raw_value)
            except ConfigError:
                logging.warning("Invalid %s=%r, ignored", env_name, raw_value)
        return values

    def _convert(self, setting_id: str, value: Any) -> Any:
        """Type-convert a raw setting value"""
        expected_type = self.VALID_SETTINGS[setting_id]

        if expected_type == bool:
            return self._parse_boolean(setting_id, value)

        if expected_type == str:
            return str(value).strip() if value is not None else ""

        try:
            return expected_type(str(value).strip())
        except (TypeError, ValueError) as e:
            raise ConfigError(
                f"Setting [{setting_id}] must be {expected_type.__name__}, got: {value!r}"
            ) from e

    def _parse_boolean(self, setting_id: str, value: Any) -> bool:
        """Parse boolean values from configuration"""
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower() if value is not None else ""
        if text in self.TRUE_VALUES:
            return True
        if text in self.FALSE_VALUES:
            return False
        raise ConfigError(f"Setting [{setting_id}] must be true or false, got: {value!r}")

    def _validate_config(self):
        """Range checks on the merged settings"""
        duration = self.settings["duration"]
        if duration < 1 or duration > 24:
            raise ConfigError(f"Setting [duration] must be 1-24 hours, got: {duration}")

        for setting_id in ("connecttimeout", "readtimeout"):
            if self.settings[setting_id] <= 0:
                raise ConfigError(
                    f"Setting [{setting_id}] must be positive, got: {self.settings[setting_id]}"
                )

        base_url = self.settings["baseurl"]
        if not base_url.startswith(("http://", "https://")):
            raise ConfigError(f"Setting [baseurl] must be an http(s) URL, got: {base_url!r}")

    def get_client_config(self) -> Dict[str, Any]:
        """Keyword arguments for ScheduleApiClient"""
        return {
            "base_url": self.settings["baseurl"],
            "connect_timeout": self.settings["connecttimeout"],
            "read_timeout": self.settings["readtimeout"],
            "lang": self.settings["lang"],
            "geolocation": self.settings["geolocation"],
            "abroad": self.settings["abroad"],
            "duration": self.settings["duration"],
        }

    def get_output_config(self) -> Dict[str, Any]:
        """Which presentations to produce and where"""
        return {
            "output_dir": Path(self.settings["outputdir"] or "."),
            "console": self.settings["console"],
            "json": self.settings["json"],
            "csv": self.settings["csv"],
        }

    def log_config_summary(self):
        """Log effective settings and where they came from"""
        logging.info("Configuration values processed:")
        for setting_id in self.VALID_SETTINGS:
            logging.info(
                "  %s: %s (%s)",
                setting_id,
                self.settings.get(setting_id),
                self.sources.get(setting_id, "defaults"),
            )

    @classmethod
    def write_default_config(cls, path: Path) -> Path:
        """Write the default configuration template"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(cls.DEFAULT_CONFIG + "\n", encoding="utf-8")
        logging.info("Default configuration written: %s", path)
        return path
