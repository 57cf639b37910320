"""Markdown link formatter."""

from ..ExportContext import ExportContext
from ._BaseFormatter import BaseFormatter


class MarkdownFormatter(BaseFormatter):
    """Formatter for Markdown: [description](uri)."""

    def format(self, uri: str, description: str | None, context: ExportContext) -> str:  # noqa: ARG002
        label = uri if description is None else description
        return f"[{label}]({uri})"
