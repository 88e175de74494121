import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from diskstat_api.model.disk_stat import DiskStats
from diskstat_api.service import disk_stats
from diskstat_api.service.exceptions import (
    CommandExecutionError,
    InvalidHostname,
    NoStatsFound,
)
from diskstat_api.util.misc import format_error

log = logging.getLogger(__name__)

router = APIRouter(
    tags=["/diskstats"],
)


@router.get(
    "/{hostname:path}/diskstats",
    response_model=DiskStats,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Invalid hostname"}},
)
async def get_disk_stats(hostname: str):
    try:
        stats = await disk_stats.get_stats(hostname)
    except InvalidHostname:
        return PlainTextResponse(
            "Invalid hostname", status_code=status.HTTP_400_BAD_REQUEST
        )
    except NoStatsFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except CommandExecutionError as e:
        log.error(f"disk stats for {hostname} failed: {format_error(e.cause)}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    return DiskStats(stats=stats)
