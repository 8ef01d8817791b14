"""Fields shared by every command output."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Every command reports its errors and warnings, both possibly empty.

    Unknown keys are rejected so a command cannot drift from its schema.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Error messages; empty on success")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal observations")
