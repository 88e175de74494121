import logging
import re

import gconf

from .exceptions import InvalidHostname

log = logging.getLogger(__name__)


def validate(candidate: str) -> bool:
    """
    Check that a hostname taken from a request path is safe to append to
    the device root and pass to the disk usage command.
    """
    if not candidate:
        return False
    if len(candidate) > int(gconf.get("hostname.max_length")):
        return False
    return re.fullmatch(gconf.get("hostname.pattern"), candidate) is not None


def ensure_valid(candidate: str) -> str:
    if not validate(candidate):
        raise InvalidHostname(candidate)
    return candidate
