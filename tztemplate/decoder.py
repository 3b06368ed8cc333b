"""Library for decoding TZif data into a template.

This reads the data produced by the encoder as well as other TZif files,
provided that all transition times are UT based (every standard/wall and
UT/local indicator is 1), as that is the only kind of transition a template
can describe.

Sizes are validated against the header counts before anything is read, so
truncated or corrupt data is reported as an InvalidDataError.
"""

from __future__ import annotations

import datetime
import io
import logging
import struct
from collections import namedtuple

from .compat import strip_anchor, swap_first_zone
from .exceptions import (
    InvalidDataError,
    TooManyZonesError,
    UnsupportedIndicatorValuesError,
    UnsupportedVersionError,
)
from .model import Template, Transition, Zone
from .tzif import (
    LOCAL_TIME_TYPE_SIZE,
    LOCAL_TIME_TYPE_STRUCT_FORMAT,
    MAX_ZONES,
    Header,
    TZifVersion,
)

__all__ = [
    "decode",
]

_LOGGER = logging.getLogger(__name__)

_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

# A local time type record: utoff (4 bytes), dst (1 byte), idx (1 byte)
_LocalTimeType = namedtuple("_LocalTimeType", ["utoff", "dst", "idx"])

_Datablock = namedtuple(
    "_Datablock",
    ["transition_times", "transition_types", "local_time_types", "tz_designations"],
)


def _read_header(buf: io.BytesIO, size: int) -> Header:
    """Read a header, verifying the magic."""
    if size - buf.tell() < Header.SIZE:
        raise InvalidDataError("truncated header")
    magic, header = Header.unpack(buf.read(Header.SIZE))
    if magic != Header.MAGIC:
        raise InvalidDataError("file did not contain magic header")
    return header


def _check_datablock_size(
    header: Header, version: TZifVersion, buf: io.BytesIO, size: int
) -> None:
    """Verify the data block described by the header is present."""
    if size - buf.tell() < header.datablock_size(version):
        raise InvalidDataError("truncated data block")


def _read_datablock(header: Header, version: TZifVersion, buf: io.BytesIO) -> _Datablock:
    """Read records from the buffer."""
    # A series of transition times in sorted order
    transition_times = struct.unpack(
        f">{header.timecnt}{version.time_format}",
        buf.read(header.timecnt * version.time_size),
    )

    # Indices into the local time type records for each transition time
    transition_types = struct.unpack(f">{header.timecnt}B", buf.read(header.timecnt))

    local_time_types = [
        _LocalTimeType._make(
            struct.unpack(LOCAL_TIME_TYPE_STRUCT_FORMAT, buf.read(LOCAL_TIME_TYPE_SIZE))
        )
        for _ in range(header.typecnt)
    ]

    # An array of NUL-terminated time zone designation strings
    tz_designations = buf.read(header.charcnt)

    # Leap second records are not supported by templates
    buf.seek(header.leapcnt * (version.time_size + 4), io.SEEK_CUR)

    # Standard/wall indicators then UT/local indicators, which must all be
    # standard time (1) and UT (1)
    indicators = buf.read(header.isstdcnt + header.isutcnt)
    if any(value != 1 for value in indicators):
        raise UnsupportedIndicatorValuesError()

    return _Datablock(
        transition_times, transition_types, local_time_types, tz_designations
    )


def _new_zone(local_time_type: _LocalTimeType, tz_designations: bytes) -> Zone:
    """Create a zone from a local time type record."""
    (utoff, dst, idx) = local_time_type
    if dst not in (0, 1):
        raise InvalidDataError(f"dst indicator must be 0 or 1, got {dst}")
    if idx >= len(tz_designations):
        raise InvalidDataError(
            f"designation index out of bounds {idx} >= {len(tz_designations)}"
        )
    end = tz_designations.find(b"\x00", idx)
    if end == -1:
        end = len(tz_designations)
    try:
        name = tz_designations[idx:end].decode("utf-8")
    except UnicodeDecodeError as err:
        raise InvalidDataError(f"designation is not valid utf-8 at {idx}") from err
    return Zone(name=name, offset=datetime.timedelta(seconds=utoff), is_dst=bool(dst))


def _new_start(transition_time: int) -> datetime.datetime:
    """Create a transition start time from seconds since the epoch."""
    try:
        return _EPOCH + datetime.timedelta(seconds=transition_time)
    except OverflowError as err:
        raise InvalidDataError(
            f"transition time out of range {transition_time}"
        ) from err


def _read_footer(buf: io.BytesIO) -> str:
    """Read the TZ string from the version 2+ footer."""
    footer = buf.read()
    if len(footer) < 2 or not footer.startswith(b"\n") or not footer.endswith(b"\n"):
        raise InvalidDataError("failed to read TZ footer")
    try:
        return footer[1:-1].decode("utf-8")
    except UnicodeDecodeError as err:
        raise InvalidDataError("TZ footer is not valid utf-8") from err


def decode(content: bytes, name: str = "") -> Template:
    """Decode TZif data into a template with the specified name."""
    size = len(content)
    buf = io.BytesIO(content)

    # V1 header and block
    header = _read_header(buf, size)
    try:
        version = TZifVersion(header.version)
    except ValueError as err:
        raise UnsupportedVersionError(header.version) from err
    _check_datablock_size(header, TZifVersion.V1, buf, size)

    # V2+ header and block, the v1 block is only used by v1 readers
    if version != TZifVersion.V1:
        buf.seek(header.datablock_size(TZifVersion.V1), io.SEEK_CUR)
        header = _read_header(buf, size)
        if header.version != version.version:
            raise InvalidDataError(
                f"version mismatch {header.version!r} != {version.version!r}"
            )
        _check_datablock_size(header, version, buf, size)
    _LOGGER.debug("Decoding TZif %s data block: %s", version.name, header)

    datablock = _read_datablock(header, version, buf)
    zones = [
        _new_zone(local_time_type, datablock.tz_designations)
        for local_time_type in datablock.local_time_types
    ]
    zone_indexes = list(datablock.transition_types)
    for zone_index in zone_indexes:
        if zone_index >= len(zones):
            raise InvalidDataError(
                f"transition type out of bounds {zone_index} >= {len(zones)}"
            )
    starts = [_new_start(value) for value in datablock.transition_times]

    # rfc8536 says type 0 applies before the first transition, but readers
    # like Go may select another zone, see compat.py
    zones, zone_indexes = swap_first_zone(zones, zone_indexes)
    transitions = [
        Transition(start=start, zone_index=zone_index)
        for start, zone_index in zip(starts, zone_indexes)
    ]

    extend = ""
    if version != TZifVersion.V1:
        extend = _read_footer(buf)

    zones, transitions = strip_anchor(zones, transitions, extend)
    if len(zones) > MAX_ZONES:
        raise TooManyZonesError(len(zones))

    return Template(name=name, zones=zones, transitions=transitions, extend=extend)
