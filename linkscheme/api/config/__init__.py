"""Config API module."""

from .ExportConfig import ExportConfig
from .LinkConfig import LinkConfig
from .LogConfig import LogConfig
from .SchemeConfig import SchemeConfig

__all__ = ["ExportConfig", "LinkConfig", "LogConfig", "SchemeConfig"]
