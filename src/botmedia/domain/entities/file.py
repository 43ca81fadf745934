"""Remote file metadata returned by the bot API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class File(BaseModel):
    """File known to the remote service.

    ``file_path`` is only present while the file can be downloaded.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    file_id: str
    file_unique_id: str | None = None
    file_size: int | None = Field(default=None, ge=0)
    file_path: str | None = None
