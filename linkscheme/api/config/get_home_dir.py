"""Get linkscheme home directory path or path under it."""

import os
from pathlib import Path

from ...constants import LINKSCHEME_HOME_ENV, LINKSCHEME_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get linkscheme home directory path or path under it.

    Checks the LINKSCHEME_HOME environment variable first, defaults to
    ~/.linkscheme if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.linkscheme")
        >>> get_home_dir("config.json")
        Path("/Users/user/.linkscheme/config.json")
    """
    home_env = os.environ.get(LINKSCHEME_HOME_ENV)
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home = os.environ.get("HOME")
        home = Path(user_home) / LINKSCHEME_HOME_EXT if user_home else Path.home() / LINKSCHEME_HOME_EXT

    return home / Path(*parts) if parts else home
