"""HTML link formatter."""

from ..ExportContext import ExportContext
from ._BaseFormatter import BaseFormatter


class HTMLFormatter(BaseFormatter):
    """Formatter for HTML anchors."""

    def format(self, uri: str, description: str | None, context: ExportContext) -> str:  # noqa: ARG002
        label = uri if description is None else description
        return f'<a href="{uri}">{label}</a>'
