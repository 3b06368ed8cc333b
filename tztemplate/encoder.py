"""Library for encoding a template as TZif data.

The output is a version 3 TZif file compatible with Go's time package and
python's zoneinfo. Readers that only support version 1 are not supported: when
version 2+ data is present, readers use it and ignore the version 1 data, so
the version 1 data block is left empty.

Transition times are always UT, so every standard/wall and UT/local indicator
is 1. No leap second records are written.
"""

from __future__ import annotations

import datetime
import logging
import struct

from .designations import DesignationTable
from .exceptions import (
    DesignationsTooLongError,
    MissingZoneInformationError,
    TooManyTransitionsError,
    TooManyZonesError,
    UnorderedTransitionsError,
    ZoneIndexError,
)
from .model import Template, Zone
from .tzif import (
    LOCAL_TIME_TYPE_STRUCT_FORMAT,
    MAX_CHARCNT,
    MAX_COUNT,
    MAX_ZONES,
    Header,
    TZifVersion,
)

__all__ = [
    "encode",
]

_LOGGER = logging.getLogger(__name__)

_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
_SECOND = datetime.timedelta(seconds=1)
_VERSION = TZifVersion.V3

# Placeholder anchor used when the extend rule describes the whole time zone
_PLACEHOLDER_ZONE = Zone(name="", offset=datetime.timedelta(0))


def _unix_seconds(value: datetime.datetime) -> int:
    """Return the whole seconds since the epoch, rounded down."""
    return (value - _EPOCH) // _SECOND


class _Writer:
    """Writes sequential fields into a buffer of a precomputed size."""

    def __init__(self, size: int) -> None:
        self._buf = bytearray(size)
        self._pos = 0

    def write(self, fmt: str, *values: int) -> None:
        """Pack the values at the current position."""
        size = struct.calcsize(fmt)
        self._reserve(size)
        struct.pack_into(fmt, self._buf, self._pos, *values)
        self._pos += size

    def write_bytes(self, value: bytes) -> None:
        """Copy the bytes at the current position."""
        self._reserve(len(value))
        self._buf[self._pos : self._pos + len(value)] = value
        self._pos += len(value)

    def _reserve(self, size: int) -> None:
        if self._pos + size > len(self._buf):
            raise AssertionError(
                f"TZif buffer overflow writing {size} bytes at {self._pos} of {len(self._buf)}"
            )

    def getvalue(self) -> bytes:
        """Return the buffer, which must have been written completely."""
        if self._pos != len(self._buf):
            raise AssertionError(
                f"TZif buffer not filled, wrote {self._pos} of {len(self._buf)} bytes"
            )
        return bytes(self._buf)


def _validate(template: Template) -> list[int]:
    """Validate the template and return its transition times."""
    if len(template.zones) > MAX_ZONES:
        raise TooManyZonesError(len(template.zones))
    if not template.zones and not template.extend:
        raise MissingZoneInformationError()
    if len(template.transitions) > MAX_COUNT:
        raise TooManyTransitionsError(len(template.transitions))
    times: list[int] = []
    for index, transition in enumerate(template.transitions):
        if transition.zone_index >= len(template.zones):
            raise ZoneIndexError(index, transition.zone_index)
        time = _unix_seconds(transition.start)
        if times and time <= times[-1]:
            raise UnorderedTransitionsError(index)
        times.append(time)
    return times


def encode(template: Template) -> bytes:
    """Encode the template as TZif data, see rfc8536."""
    times = _validate(template)

    # Local time type 0 is the anchor zone, so user zones start at index 1
    anchor = template.zones[0] if template.zones else _PLACEHOLDER_ZONE
    zones = [anchor, *template.zones]
    designations = DesignationTable()
    for zone in zones:
        designations.add(zone.name)
    if designations.charcnt > MAX_CHARCNT:
        raise DesignationsTooLongError(designations.charcnt)

    v1_header = Header(_VERSION.version)
    header = Header(
        _VERSION.version,
        isutcnt=len(times),
        isstdcnt=len(times),
        timecnt=len(times),
        typecnt=len(zones),
        charcnt=designations.charcnt,
    )
    extend = template.extend.encode()
    size = (
        Header.SIZE
        + v1_header.datablock_size(TZifVersion.V1)
        + Header.SIZE
        + header.datablock_size(_VERSION)
        + len(extend)
        + 2
    )
    _LOGGER.debug(
        "Encoding template %s with %d zones and %d transitions (%d bytes)",
        template.name,
        len(template.zones),
        len(times),
        size,
    )

    writer = _Writer(size)
    writer.write_bytes(v1_header.pack())
    writer.write_bytes(header.pack())
    writer.write(f">{header.timecnt}{_VERSION.time_format}", *times)
    writer.write(
        f">{header.timecnt}B",
        *(transition.zone_index + 1 for transition in template.transitions),
    )
    for zone, offset in zip(zones, designations.offsets):
        writer.write(
            LOCAL_TIME_TYPE_STRUCT_FORMAT,
            zone.offset // _SECOND,
            int(zone.is_dst),
            offset,
        )
    writer.write_bytes(designations.to_bytes())
    writer.write_bytes(b"\x01" * (header.isstdcnt + header.isutcnt))
    writer.write_bytes(b"\n" + extend + b"\n")
    return writer.getvalue()
