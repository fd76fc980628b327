"""The Termux color settings file — locate, write, and read back the theme name."""

import logging
import os
from pathlib import Path

from themux.themes import Theme

logger = logging.getLogger(__name__)

SETTINGS_DIR_NAME = ".termux"
SETTINGS_FILE_NAME = "colors.properties"
THEME_MARKER = "# Color Theme: "


class SettingsError(Exception):
    """The settings file (or its directory) cannot be read or written."""


def default_settings_path() -> Path:
    """``$HOME/.termux/colors.properties``."""
    home = os.environ.get("HOME")
    if not home:
        raise SettingsError("HOME environment variable must be set.")
    return Path(home) / SETTINGS_DIR_NAME / SETTINGS_FILE_NAME


def apply_theme(theme: Theme, path: Path | None = None) -> Path:
    """Write ``theme`` to the settings file, creating its directory if needed."""
    path = path or default_settings_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(theme.render_config_block(), encoding="utf-8")
    except OSError as e:
        raise SettingsError(f"Unable to write color settings to {path}: {e}") from e
    logger.info("Applied theme '%s' to %s", theme.name, path)
    return path


def parse_theme_name(text: str) -> str | None:
    """Return the name from the first ``# Color Theme:`` line, or None."""
    for line in text.splitlines():
        line = line.strip()
        if line.startswith(THEME_MARKER):
            return line[len(THEME_MARKER) :].strip()
    return None


def current_theme_name(path: Path | None = None) -> str | None:
    """Name of the theme recorded in the settings file, or None if undetermined."""
    path = path or default_settings_path()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SettingsError(f"Unable to read color settings from {path}: {e}") from e
    return parse_theme_name(text)
