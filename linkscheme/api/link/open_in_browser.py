"""Default navigation primitive for opening links."""

import logging
import webbrowser
from typing import Any

# The CLI attaches the file handler to the "linkscheme" parent logger.
logger = logging.getLogger(__name__)


def open_in_browser(uri: str, extra_arg: Any = None) -> bool:
    """Open uri in the system web browser.

    Args:
        uri: Absolute URI to open.
        extra_arg: When truthy, ask the browser for a new window.

    Returns:
        True if a browser was launched.
    """
    new = 1 if extra_arg else 0
    logger.info(f"Opening {uri} (new window: {bool(extra_arg)})")
    return webbrowser.open(uri, new=new)
