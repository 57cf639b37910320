"""Export defaults."""

from pydantic import BaseModel, ConfigDict, Field


class ExportConfig(BaseModel):
    """Defaults applied by the export command when no option is given."""

    model_config = ConfigDict(extra="forbid")

    default_backend: str = Field("markdown", description="Backend used when --backend is omitted")
    links_to_notes: bool = Field(False, description="ASCII export: omit the parenthetical URI")
