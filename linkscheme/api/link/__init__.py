"""Link API domain: rendering and opening scheme-relative links."""

from .Backend import Backend
from .build_uri import build_uri
from .call_when_type_matches import call_when_type_matches
from .call_with_path import call_with_path
from .export_link import export_link
from .ExportContext import ExportContext
from .extract_path import extract_path
from .find_scheme import find_scheme
from .has_type_prefix import has_type_prefix
from .LinkScheme import LinkScheme
from .make_export_fn import make_export_fn
from .make_open_fn import make_open_fn
from .open_in_browser import open_in_browser

__all__ = [
    "Backend",
    "ExportContext",
    "LinkScheme",
    "build_uri",
    "call_when_type_matches",
    "call_with_path",
    "export_link",
    "extract_path",
    "find_scheme",
    "has_type_prefix",
    "make_export_fn",
    "make_open_fn",
    "open_in_browser",
]
