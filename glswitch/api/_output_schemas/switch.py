"""Output schemas for switch commands."""

from pydantic import BaseModel, Field

from ..schema_registry import output_schema
from ._base import BaseOutputSchema


class LinkEntry(BaseModel):
    """One system link that was re-pointed during the run."""

    library: str = Field(..., description="Library file name under the vendor directory")
    source: str = Field(..., description="Vendor path that was resolved")
    resolved: str = Field(..., description="Canonical real path the system link now points at")
    target: str = Field(..., description="System link path")
    replaced: bool = Field(..., description="True if an entry already existed at the system link path")
    previous: str | None = Field(..., description="Previous symlink target, null if nothing or a non-link was there")


@output_schema("switch", "set_link")
class SetLinkOutput(BaseOutputSchema):
    """Output schema for set-link command.

    Output structure:
    - errors: list[str] - first hard failure, empty list on success
    - warnings: list[str] - non-fatal observations (e.g. a regular file was replaced)
    - driver: str - requested driver name
    - vendor_dir: str - vendor driver directory that was read
    - staged: bool - whether all sources were resolved before any link changed
    - links: list[LinkEntry] - links updated in this run, including those done before a failure
    """

    driver: str = Field(..., description="Requested driver name")
    vendor_dir: str = Field(..., description="Vendor driver directory")
    staged: bool = Field(..., description="Resolve every source before touching any link")
    links: list[LinkEntry] = Field(..., description="System links updated in this run")

