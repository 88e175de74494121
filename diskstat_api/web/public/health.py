import logging
import shutil
from typing import List

from fastapi import APIRouter
from pydantic import BaseModel

from diskstat_api.service.disk_stats import configured_command

log = logging.getLogger(__name__)

router = APIRouter(
    prefix="/health",
)


class Health(BaseModel):
    status: str
    command: List[str]


@router.get("", response_model=Health)
def health():
    command = configured_command()
    if shutil.which(command[0]) is None:
        log.warning(f"disk usage command {command[0]} not found")
        return Health(status="degraded", command=command)
    return Health(status="ok", command=command)
