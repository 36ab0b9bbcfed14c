"""Data schemas for fm-engine."""

from pydantic import BaseModel, ConfigDict, Field


class FileEntry(BaseModel):
    """One immediate child of a listed directory.

    Rebuilt on every listing call and never cached.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Base name of the entry")
    path: str = Field(..., description="Fully-qualified path of the entry")
    is_dir: bool = Field(..., description="True for directories")
    size: int = Field(
        default=0, ge=0, description="On-disk usage in bytes; 0 for directories"
    )
    modified: int = Field(
        default=0, ge=0, description="Modification time, seconds since the epoch"
    )
