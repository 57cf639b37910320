"""Output schemas for link commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkExportOutput(BaseOutputSchema):
    """Output schema for link export command."""

    link: str = Field(..., description="Raw link as given")
    scheme: str = Field(..., description="Matched scheme tag, empty string if none matched")
    path: str = Field(..., description="Path relative to the scheme base location")
    backend: str = Field(..., description="Backend the link was exported to")
    uri: str = Field(..., description="Absolute URI, empty string if no scheme matched")
    text: str = Field(..., description="Exported link text, empty string on failure")


class LinkOpenOutput(BaseOutputSchema):
    """Output schema for link open command."""

    link: str = Field(..., description="Raw link as given")
    scheme: str = Field(..., description="Matched scheme tag, empty string if none matched")
    uri: str = Field(..., description="Absolute URI handed to the browser")
    opened: bool = Field(..., description="Whether the navigator reported success")


class LinkUriOutput(BaseOutputSchema):
    """Output schema for link uri command."""

    link: str = Field(..., description="Raw link as given")
    scheme: str = Field(..., description="Matched scheme tag, empty string if none matched")
    path: str = Field(..., description="Path relative to the scheme base location")
    uri: str = Field(..., description="Absolute URI, empty string if no scheme matched")


class LinkListOutput(BaseOutputSchema):
    """Output schema for link list command."""

    schemes: dict[str, str] = Field(..., description="Scheme tag -> base location")


register_output_schema("link", "export", LinkExportOutput)
register_output_schema("link", "open", LinkOpenOutput)
register_output_schema("link", "uri", LinkUriOutput)
register_output_schema("link", "list", LinkListOutput)
