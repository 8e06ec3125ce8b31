"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           swisspaycode/config.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Manages billing defaults and logging settings using QSettings.
                Standardizes paths for configuration and data across different
                platforms (XDG standards on Linux). Only read at the edges
                (record constructors, logging setup), never by the encoder.
------------------------------------------------------------------------------
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from PyQt6.QtCore import QSettings, QStandardPaths

from swisspaycode.logger import get_logger, setup_logging
from swisspaycode.models.types import Currency


class AppConfig:
    """
    Manages configuration using QSettings.
    Singleton-like usage via class methods or single instance.
    """

    KEY_DEFAULT_CURRENCY: str = "default_currency"
    KEY_CREDITOR_COUNTRY: str = "creditor_country"
    KEY_LOG_LEVEL: str = "log_level"
    KEY_LOG_COMPONENTS: str = "log_components"

    # Defaults
    DEFAULT_CURRENCY: str = Currency.CHF.value
    DEFAULT_CREDITOR_COUNTRY: str = "CH"
    DEFAULT_LOG_LEVEL: str = "WARNING"

    APP_ID: str = "swisspaycode"
    _active_profile: Optional[str] = None

    def __init__(self, profile: Optional[str] = None) -> None:
        """
        Initializes the configuration manager.

        Args:
            profile: Optional profile name (e.g. 'dev', 'test').
                    If provided, all paths and settings will be isolated (e.g. swisspaycode-dev).
        """
        # If no profile provided, use the last active one
        if profile is None:
            profile = AppConfig._active_profile
        else:
            AppConfig._active_profile = profile

        self.profile = profile
        self.active_id = self.APP_ID
        if profile:
            self.active_id = f"{self.APP_ID}-{profile}"

        self.settings = QSettings(self.active_id, self.active_id)

    def get_data_dir(self) -> Path:
        """
        Returns the path to the application data directory.
        Forces a flat structure: ~/.local/share/swisspaycode[-profile]/
        """
        base_path = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericDataLocation)
        data_dir = Path(base_path) / self.active_id
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def _get_setting(self, group: str, key: str, default: Any = None) -> Any:
        """
        Helper to retrieve a setting value from a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            default: The default value if not found.

        Returns:
            The retrieved value or default.
        """
        if group:
            self.settings.beginGroup(group)
        val = self.settings.value(key, default)
        if group:
            self.settings.endGroup()
        return val

    def _set_setting(self, group: str, key: str, value: Any) -> None:
        """
        Helper to save a setting value into a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            value: The value to save.
        """
        if isinstance(value, str):
            value = value.strip()

        if group:
            self.settings.beginGroup(group)
        self.settings.setValue(key, value)
        if group:
            self.settings.endGroup()

    def get_default_currency(self) -> str:
        """
        Retrieves the currency used when an invoice does not name one.
        Unsupported stored values fall back to CHF.

        Returns:
            "CHF" or "EUR".
        """
        val = str(self._get_setting("Billing", self.KEY_DEFAULT_CURRENCY, self.DEFAULT_CURRENCY)).upper()
        if val not in {c.value for c in Currency}:
            return self.DEFAULT_CURRENCY
        return val

    def set_default_currency(self, currency: str) -> None:
        """
        Saves the default currency.

        Args:
            currency: The ISO currency code.
        """
        self._set_setting("Billing", self.KEY_DEFAULT_CURRENCY, currency.upper())

    def get_creditor_country(self) -> str:
        """Retrieves the country code written for the creditor address."""
        return str(self._get_setting("Billing", self.KEY_CREDITOR_COUNTRY, self.DEFAULT_CREDITOR_COUNTRY))

    def set_creditor_country(self, country: str) -> None:
        """Saves the creditor country code."""
        self._set_setting("Billing", self.KEY_CREDITOR_COUNTRY, country.upper())

    def get_log_level(self) -> str:
        """Retrieves the global log level."""
        return str(self._get_setting("Logging", self.KEY_LOG_LEVEL, self.DEFAULT_LOG_LEVEL))

    def set_log_level(self, level: str) -> None:
        """Saves the global log level."""
        self._set_setting("Logging", self.KEY_LOG_LEVEL, level.upper())

    def get_log_components(self) -> Dict[str, str]:
        """Retrieves a dictionary of component-specific log levels."""
        raw = str(self._get_setting("Logging", self.KEY_LOG_COMPONENTS, "{}"))
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            return {}
        return data if isinstance(data, dict) else {}

    def set_log_components(self, components: Dict[str, str]) -> None:
        """Saves a dictionary of component-specific log levels."""
        self._set_setting("Logging", self.KEY_LOG_COMPONENTS, json.dumps(components))

    def get_log_file_path(self) -> Path:
        """Returns the absolute path to the log file."""
        return self.get_data_dir() / "swisspaycode.log"


def configure_logging(app_config: Optional[AppConfig] = None, log_to_file: bool = True) -> None:
    """
    Initializes logging from the stored settings.

    Args:
        app_config: The configuration to read. A default instance is used if omitted.
        log_to_file: Whether to also write to the log file in the data directory.
    """
    if app_config is None:
        app_config = AppConfig()

    setup_logging(
        level=app_config.get_log_level(),
        log_file=str(app_config.get_log_file_path()) if log_to_file else None,
        component_levels=app_config.get_log_components()
    )
    get_logger("config").info(f"Logging configured (Profile: {app_config.profile or 'default'})")
