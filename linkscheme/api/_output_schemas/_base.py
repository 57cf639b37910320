"""Base output schema with standard errors and warnings fields."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Base schema for all API command outputs.

    Every command reports errors and warnings lists; undeclared keys are rejected
    so command output cannot drift from its schema.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Error messages, empty when the command succeeded")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal notices, e.g. an unrecognized backend")
