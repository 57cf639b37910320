"""linkscheme - render and open scheme-relative links for any export backend."""

from .api.link import (
    Backend,
    ExportContext,
    LinkScheme,
    build_uri,
    call_when_type_matches,
    call_with_path,
    export_link,
    extract_path,
    has_type_prefix,
    make_export_fn,
    make_open_fn,
    open_in_browser,
)

__all__ = [
    "Backend",
    "ExportContext",
    "LinkScheme",
    "build_uri",
    "call_when_type_matches",
    "call_with_path",
    "export_link",
    "extract_path",
    "has_type_prefix",
    "make_export_fn",
    "make_open_fn",
    "open_in_browser",
]
