from collections.abc import Callable
from typing import Any

from .Backend import Backend
from .export_link import export_link
from .ExportContext import ExportContext

ExportFn = Callable[[str, str | None, Backend | str | None, ExportContext | dict[str, Any] | None], str]


def make_export_fn(base_location: str) -> ExportFn:
    """Create an export function bound to base_location.

    The returned function takes ``(path, description, backend, context)``
    and renders the link with :func:`export_link`.
    """

    def export(
        path: str,
        description: str | None,
        backend: Backend | str | None,
        context: ExportContext | dict[str, Any] | None = None,
    ) -> str:
        return export_link(base_location, path, description, backend, context)

    return export
