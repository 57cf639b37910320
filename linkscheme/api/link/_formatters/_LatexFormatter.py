"""LaTeX link formatter."""

from ..ExportContext import ExportContext
from ._BaseFormatter import BaseFormatter


class LatexFormatter(BaseFormatter):
    """Formatter for LaTeX (hyperref).

    Without a description the shorter \\url form is used instead of
    repeating the uri inside \\href.
    """

    def format(self, uri: str, description: str | None, context: ExportContext) -> str:  # noqa: ARG002
        if description is None:
            return f"\\url{{{uri}}}"
        return f"\\href{{{uri}}}{{{description}}}"
