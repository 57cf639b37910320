"""Configuration of a single link scheme."""

from pydantic import BaseModel, ConfigDict, Field


class SchemeConfig(BaseModel):
    """Base location a link type resolves against."""

    model_config = ConfigDict(extra="forbid")

    base_location: str = Field(..., description="Base URL the link path is appended to")
    new_window: bool = Field(False, description="Open links of this type in a new browser window")
