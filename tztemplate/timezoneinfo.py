"""Library for creating python time zones from templates.

The encoded template is handed to python's zoneinfo, which reads TZif data
directly, so the result behaves like any time zone from the system database.
"""

from __future__ import annotations

import io
import logging
import zoneinfo

from .encoder import encode
from .exceptions import TimezoneInfoError
from .model import Template

__all__ = [
    "new_zoneinfo",
]

_LOGGER = logging.getLogger(__name__)


def new_zoneinfo(template: Template) -> zoneinfo.ZoneInfo:
    """Create a zoneinfo time zone from the template."""
    tzdata = encode(template)
    _LOGGER.debug("Loading time zone %s from %d bytes", template.name, len(tzdata))
    try:
        return zoneinfo.ZoneInfo.from_file(
            io.BytesIO(tzdata), key=template.name or None
        )
    except ValueError as err:
        raise TimezoneInfoError(
            f"Unable to load time zone from template: {template.name}"
        ) from err
