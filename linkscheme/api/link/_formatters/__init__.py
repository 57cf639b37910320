"""Link formatters package."""

from ..Backend import Backend
from ._AsciiFormatter import AsciiFormatter
from ._BaseFormatter import BaseFormatter
from ._HTMLFormatter import HTMLFormatter
from ._LatexFormatter import LatexFormatter
from ._MarkdownFormatter import MarkdownFormatter
from ._TexinfoFormatter import TexinfoFormatter

_FORMATTERS: dict[Backend, type[BaseFormatter]] = {
    Backend.MARKDOWN: MarkdownFormatter,
    Backend.HTML: HTMLFormatter,
    Backend.LATEX: LatexFormatter,
    Backend.ASCII: AsciiFormatter,
    Backend.TEXINFO: TexinfoFormatter,
}


def get_formatter(backend: Backend) -> BaseFormatter | None:
    """Get a formatter instance for a backend.

    Returns None for Backend.OTHER, which has no formatter.
    """
    formatter_cls = _FORMATTERS.get(backend)
    if formatter_cls is None:
        return None
    return formatter_cls()


__all__ = [
    "AsciiFormatter",
    "BaseFormatter",
    "HTMLFormatter",
    "LatexFormatter",
    "MarkdownFormatter",
    "TexinfoFormatter",
    "get_formatter",
]
