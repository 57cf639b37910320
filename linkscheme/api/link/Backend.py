"""Backend enum for link export."""

from enum import Enum


class Backend(str, Enum):
    """Output backend a link is exported to.

    OTHER stands for every backend without a dedicated formatter; links
    exported to it render as the bare URI.
    """

    MARKDOWN = "markdown"
    HTML = "html"
    LATEX = "latex"
    ASCII = "ascii"
    TEXINFO = "texinfo"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag: "str | Backend | None") -> "Backend":
        """Map a backend tag to a member, OTHER for anything unrecognized."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            return cls.OTHER
