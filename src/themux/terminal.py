"""Terminal size and Termux process helpers."""

import logging
import shlex
import shutil
import subprocess

from rich.console import Console

from themux.settings import SettingsError

logger = logging.getLogger(__name__)

FALLBACK_SIZE = (60, 10)
WIDTH_MARGIN = 4


def get_size() -> tuple[int, int]:
    """(columns, lines) of the terminal, or a sensible default when unknown."""
    size = shutil.get_terminal_size(fallback=FALLBACK_SIZE)
    if size.columns <= 0 or size.lines <= 0:
        return FALLBACK_SIZE
    return size.columns, size.lines


def list_width() -> int:
    """Line width available to the theme listing."""
    columns, _ = get_size()
    return max(columns - WIDTH_MARGIN, 1)


def reload_settings(command: str | None) -> bool:
    """Ask Termux to pick up the new colors. Returns False if the command is unavailable."""
    if not command:
        return False
    argv = shlex.split(command)
    if shutil.which(argv[0]) is None:
        logger.warning("'%s' not found; restart the terminal to see the new colors", argv[0])
        return False
    try:
        subprocess.run(argv, check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        raise SettingsError(f"Unable to reload terminal settings: {e}") from e
    logger.debug("Ran %s", command)
    return True


def clear_screen(console: Console) -> None:
    if console.is_terminal:
        console.clear()
