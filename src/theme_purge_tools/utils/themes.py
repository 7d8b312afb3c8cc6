"""Theme discovery."""
from __future__ import annotations

from pathlib import Path

from theme_purge_tools.errors import DiscoveryError
from theme_purge_tools.models.purge import ThemeSet

THEME_MARKER = "theme.css"


def discover_themes(root: Path | str) -> ThemeSet:
    """
    Find theme directories directly under root.
    A theme is a non-hidden directory containing a theme.css file.
    Names are returned sorted.
    """
    root = Path(root)
    try:
        entries = list(root.iterdir())
    except OSError as e:
        raise DiscoveryError(f"Failed to discover themes in {str(root)!r}: {e}") from e

    themes = [entry.name for entry in entries if is_theme_dir(entry)]
    return tuple(sorted(themes))


def is_theme_dir(entry: Path) -> bool:
    if entry.name.startswith("."):
        return False
    try:
        return entry.is_dir() and (entry / THEME_MARKER).is_file()
    except OSError:
        # unreadable, treat as unmarked
        return False
