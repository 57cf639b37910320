"""Texinfo link formatter."""

from ..ExportContext import ExportContext
from ._BaseFormatter import BaseFormatter


class TexinfoFormatter(BaseFormatter):
    """Formatter for Texinfo @uref."""

    def format(self, uri: str, description: str | None, context: ExportContext) -> str:  # noqa: ARG002
        if description is None:
            return f"@uref{{{uri}}}"
        return f"@uref{{{uri}, {description}}}"
