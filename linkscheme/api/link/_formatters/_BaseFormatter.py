"""Abstract base formatter for link export."""

from abc import ABC, abstractmethod

from ..ExportContext import ExportContext


class BaseFormatter(ABC):
    """Abstract interface for backend formatters."""

    @abstractmethod
    def format(self, uri: str, description: str | None, context: ExportContext) -> str:
        """Render uri and optional description as backend text."""
        pass
