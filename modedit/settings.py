"""User settings for the editor.

Settings are read from a JSON file in the OS-appropriate config
directory. A missing or unreadable file simply means defaults.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


@dataclass
class EditorSettings:
    show_line_numbers: bool = False
    log_file: str = EditorConstants.DEFAULT_LOG_FILE
    log_level: str = EditorConstants.DEFAULT_LOG_LEVEL


class SettingsStore:
    """Loads ``settings.json`` from the user's config directory."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = config_dir or Path(platformdirs.user_config_dir("modedit"))
        self._settings_file = self._config_dir / "settings.json"
        self._settings_cache: Optional[Dict[str, Any]] = None

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _load_raw(self) -> Dict[str, Any]:
        """Load the raw settings dict from disk.

        Returns:
            The parsed settings, or an empty dict if the file doesn't
            exist or can't be read.
        """
        if self._settings_cache is not None:
            return self._settings_cache

        if not self._settings_file.exists():
            self._settings_cache = {}
            return self._settings_cache

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            self._settings_cache = {}
            return self._settings_cache

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            data = {}
        self._settings_cache = data
        return self._settings_cache

    def validate_setting(self, key: str, value: Any) -> bool:
        """Validate a setting value.

        Args:
            key: Setting key name.
            value: Setting value to validate.

        Returns:
            True if setting is valid, False otherwise.
        """
        if key == 'show_line_numbers':
            return isinstance(value, bool)
        if key == 'log_file':
            return isinstance(value, str) and bool(value.strip())
        if key == 'log_level':
            return isinstance(value, str) and value.upper() in LOG_LEVELS
        # Unknown settings are considered valid (forward compatibility)
        return True

    def load(self) -> EditorSettings:
        """Build the effective settings from defaults, file and environment."""
        settings = EditorSettings()
        for key, value in self._load_raw().items():
            if not hasattr(settings, key):
                continue
            if not self.validate_setting(key, value):
                logger.warning(f"Ignoring invalid value for {key}: {value!r}")
                continue
            if key == 'log_level':
                value = value.upper()
            setattr(settings, key, value)

        env_log_file = os.environ.get(EditorConstants.LOG_FILE_ENV_VAR)
        if env_log_file:
            settings.log_file = env_log_file
        return settings

    def clear_cache(self) -> None:
        """Clear the in-memory cache of settings."""
        self._settings_cache = None
