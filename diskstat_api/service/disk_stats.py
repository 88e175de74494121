import logging
import math
import shlex
from typing import Awaitable, Callable, List, Optional, Set

import gconf

from diskstat_api.model.disk_stat import DiskStat
from diskstat_api.util import signals
from diskstat_api.util.subprocess import subprocess, SubprocessError
from .exceptions import CommandExecutionError, NoStatsFound
from .hostname import ensure_valid

log = logging.getLogger(__name__)

MIN_FIELDS = 6
READ_FIELD = 8
WRITE_FIELD = 9

DiskReporter = Callable[[str], Awaitable[str]]


def device_path(host_name: str) -> str:
    return f'{gconf.get("diskstats.device_root")}{host_name}'


def configured_command() -> List[str]:
    # environment overrides arrive as a single string
    command = gconf.get("diskstats.command")
    if isinstance(command, str):
        return shlex.split(command)
    return list(command)


def _header_labels() -> Set[str]:
    labels = gconf.get("diskstats.header_labels")
    if isinstance(labels, str):
        return {label.strip() for label in labels.split(",") if label.strip()}
    return set(labels)


async def run_disk_report(path: str) -> str:
    return await subprocess(*configured_command(), path)


async def get_stats(
    host_name: str, reporter: Optional[DiskReporter] = None
) -> List[DiskStat]:
    """
    Run the disk usage reporter for the device named ``host_name`` and parse
    the first data row of its output.

    Raises CommandExecutionError if the reporter fails and NoStatsFound if
    its output holds no data row.
    """
    ensure_valid(host_name)
    path = device_path(host_name)
    reporter = reporter or run_disk_report
    try:
        output = await reporter(path)
    except (SubprocessError, OSError, UnicodeDecodeError) as e:
        raise CommandExecutionError(path, e) from e

    stats = parse_disk_stats(host_name, path, output)
    signals.on_disk_stats_update.send(stats)
    return stats


def parse_disk_stats(host_name: str, path: str, output: str) -> List[DiskStat]:
    header_labels = _header_labels()
    for line in output.splitlines():
        fields = line.split()
        if len(fields) < MIN_FIELDS or fields[0] in header_labels:
            continue

        # only the first data row is reported
        return [
            DiskStat(
                host_name=host_name,
                path=path,
                type=fields[0],
                size=_parse_size(fields[1]),
                used=_parse_float(fields[2], "used"),
                read=_parse_optional_float(fields, READ_FIELD, "read"),
                write=_parse_optional_float(fields, WRITE_FIELD, "write"),
            )
        ]

    raise NoStatsFound(host_name)


def _parse_size(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        log.debug(f"size {value!r} is not an integer, using 0")
        return 0
    if size < 0:
        log.debug(f"size {value!r} is negative, using 0")
        return 0
    return size


def _parse_float(value: str, name: str) -> float:
    try:
        result = float(value)
    except ValueError:
        log.debug(f"{name} {value!r} is not a number, using 0")
        return 0.0
    if not math.isfinite(result):
        log.debug(f"{name} {value!r} is not finite, using 0")
        return 0.0
    return result


def _parse_optional_float(fields: List[str], index: int, name: str) -> float:
    if len(fields) <= index:
        return 0.0
    return _parse_float(fields[index], name)
