from collections.abc import Callable
from typing import Any

from .build_uri import build_uri
from .open_in_browser import open_in_browser

Navigator = Callable[[str, Any], Any]
OpenFn = Callable[[str, Any], Any]


def make_open_fn(base_location: str, navigator: Navigator = open_in_browser) -> OpenFn:
    """Create an open function bound to base_location.

    The returned function takes ``(path, extra_arg=None)``, builds the URI and
    returns whatever ``navigator(uri, extra_arg)`` returns.
    """

    def open_link(path: str, extra_arg: Any = None) -> Any:
        return navigator(build_uri(base_location, path), extra_arg)

    return open_link
