"""User settings for the input widget.

Settings live in a JSON file in the OS-appropriate config directory. A
missing or broken file never stops the editor: problems are logged and the
defaults apply.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)


class Settings:
    """Read-only view of the user's settings file.

    Known keys:
        width: fixed wrap width; when absent the width follows the terminal.
    """

    def __init__(self, settings_file: Optional[Path] = None):
        if settings_file is None:
            config_dir = Path(platformdirs.user_config_dir(EditorConstants.APP_NAME))
            settings_file = config_dir / EditorConstants.SETTINGS_FILENAME
        self._settings_file = settings_file
        self._data: Optional[Dict[str, Any]] = None

    @property
    def path(self) -> Path:
        return self._settings_file

    def _load(self) -> Dict[str, Any]:
        """Load the settings file once and cache the result."""
        if self._data is not None:
            return self._data

        if not self._settings_file.exists():
            self._data = {}
            return self._data

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            self._data = {}
            return self._data

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            data = {}
        self._data = data
        return self._data

    @property
    def width(self) -> Optional[int]:
        """Configured wrap width, or None to follow the terminal."""
        value = self._load().get("width")
        if value is None:
            return None
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int) or value < EditorConstants.MIN_WIDTH:
            logger.warning(f"Ignoring invalid width setting {value!r} in {self._settings_file}")
            return None
        return value
