"""Link scheme value object."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .Backend import Backend
from .build_uri import build_uri
from .export_link import export_link
from .ExportContext import ExportContext
from .open_in_browser import open_in_browser


@dataclass(frozen=True)
class LinkScheme:
    """A link type bound to one base location.

    Exposes the export and open operations for paths relative to the base.
    Instances hold no mutable state and can be shared freely.
    """

    base_location: str
    navigator: Callable[[str, Any], Any] = open_in_browser

    def uri(self, path: str) -> str:
        """Absolute, percent-encoded URI for path."""
        return build_uri(self.base_location, path)

    def export(
        self,
        path: str,
        description: str | None = None,
        backend: Backend | str | None = Backend.OTHER,
        context: ExportContext | dict[str, Any] | None = None,
    ) -> str:
        """Render path as backend text."""
        return export_link(self.base_location, path, description, backend, context)

    def open(self, path: str, extra_arg: Any = None) -> Any:
        """Hand the URI for path to the navigator."""
        return self.navigator(self.uri(path), extra_arg)
