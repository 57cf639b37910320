"""Render a link for an output backend."""

from typing import Any

from ._formatters import get_formatter
from .Backend import Backend
from .build_uri import build_uri
from .ExportContext import ExportContext


def export_link(
    base_location: str,
    path: str,
    description: str | None,
    backend: Backend | str | None,
    context: ExportContext | dict[str, Any] | None = None,
) -> str:
    """Export a link as the literal text of the given backend.

    Args:
        base_location: Base the path is relative to (e.g. "https://github.com").
        path: Relative path with the type prefix already stripped.
        description: Human readable label, None when the link has none.
        backend: Backend member or tag. Unrecognized tags render the bare URI.
        context: Export options; only ``links_to_notes`` is read.

    Returns:
        Backend specific text for the link.
    """
    uri = build_uri(base_location, path)
    formatter = get_formatter(Backend.from_tag(backend))
    if formatter is None:
        return uri
    return formatter.format(uri, description, ExportContext.coerce(context))
