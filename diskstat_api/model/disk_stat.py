from typing import List

from pydantic import BaseModel, ConfigDict, Field


class DiskStat(BaseModel):
    """
    One row of disk usage output for a single device.

    Units are whatever the reporting command emits; ``read`` and ``write``
    are zero when the command has no IO counter columns.
    """

    model_config = ConfigDict(populate_by_name=True)

    host_name: str = Field(alias="hostname", min_length=1)
    path: str = Field(min_length=1)
    size: int = Field(ge=0)
    used: float
    type: str
    read: float = 0.0
    write: float = 0.0


class DiskStats(BaseModel):
    stats: List[DiskStat]
