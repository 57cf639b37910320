"""Plain text (ASCII) link formatter."""

from ..ExportContext import ExportContext
from ._BaseFormatter import BaseFormatter


class AsciiFormatter(BaseFormatter):
    """Formatter for plain text export.

    A described link prints as "[description] (<uri>)". When the export
    collects links into notes (``links_to_notes``) the uri is left out.
    """

    def format(self, uri: str, description: str | None, context: ExportContext) -> str:
        if description is None:
            return f"<{uri}>"
        if context.links_to_notes:
            return f"[{description}]"
        return f"[{description}] (<{uri}>)"
