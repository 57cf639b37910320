"""Export context passed through to the backend formatters."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_LINKS_TO_NOTES_KEYS = ("linksToNotes", "links_to_notes")


class ExportContext(BaseModel):
    """Rendering options supplied by the caller.

    Only ``links_to_notes`` is read. Any other option is kept on the model
    untouched so callers can pass their whole option bag.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    links_to_notes: bool = Field(
        False,
        alias="linksToNotes",
        description="ASCII export only: drop the parenthetical URI after the description",
    )

    @classmethod
    def coerce(cls, context: "ExportContext | Mapping[Any, Any] | None") -> "ExportContext":
        """Accept an ExportContext, a plain options mapping or None.

        Never fails on the caller's options: ``linksToNotes`` is read by
        truthiness and keys that are not strings are left out.
        """
        if context is None:
            return cls()
        if isinstance(context, cls):
            return context
        options = {key: value for key, value in context.items() if isinstance(key, str)}
        links_to_notes = False
        for key in _LINKS_TO_NOTES_KEYS:
            if key in options:
                links_to_notes = bool(options.pop(key))
        return cls.model_construct(links_to_notes=links_to_notes, **options)
