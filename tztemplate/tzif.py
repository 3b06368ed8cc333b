"""Binary layout of the TZif file format.

See rfc8536 for the TZif file format. A TZif file is a version 1 header and
data block, followed (for version 2 and above) by a second header and data
block using 64-bit transition times, then a footer with a TZ rule string:

    header | v1 data block | header | v2+ data block | footer

A data block holds, in order: transition times, transition types, local time
type records, time zone designations, leap second records, standard/wall
indicators and UT/local indicators. The sizes of each are given by the counts
in the header that precedes the block.
"""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

__all__ = [
    "TZifVersion",
    "Header",
    "LOCAL_TIME_TYPE_STRUCT_FORMAT",
    "LOCAL_TIME_TYPE_SIZE",
    "MAX_TYPES",
    "MAX_ZONES",
    "MAX_CHARCNT",
    "MAX_COUNT",
]

# Records specifying the local time type
LOCAL_TIME_TYPE_STRUCT_FORMAT = "".join(
    [
        ">",  # Use standard size of packed value bytes
        "l",  # utoff (4 bytes): Number of seconds to add to UTC to determine local time
        "B",  # dst (1 byte): Indicates the time is DST (1) or standard (0)
        "B",  # idx (1 byte): Offset index into the time zone designation octets
    ]
)
LOCAL_TIME_TYPE_SIZE = 6

# Transition types are a single byte index into the local time type records
MAX_TYPES = 255

# Type 0 is reserved for the anchor zone, see compat.py
MAX_ZONES = MAX_TYPES - 1

# Maximum size of the designation table, addressed by a single byte
MAX_CHARCNT = 255

# Counts in the header are 32-bit unsigned values
MAX_COUNT = 2**32 - 1


class TZifVersion(enum.Enum):
    """A supported TZif format version, keyed by the header version byte."""

    V1 = b"\x00"
    V2 = b"2"
    V3 = b"3"

    @property
    def version(self) -> bytes:
        """Return the version byte string."""
        return self.value

    @property
    def time_size(self) -> int:
        """Return the size of transition and leap times, 32-bit in v1 and 64-bit in v2+."""
        return 4 if self is TZifVersion.V1 else 8

    @property
    def time_format(self) -> str:
        """Return the struct format character for a transition or leap time."""
        return "l" if self is TZifVersion.V1 else "q"


@dataclass
class Header:
    """TZif header information."""

    SIZE = 44  # Total size of the header
    STRUCT_FORMAT = "".join(
        [
            ">",  # Use standard size of packed value bytes
            "4s",  # magic (4 bytes)
            "c",  # version (1 byte)
            "15x",  # unused
            "6L",  # isutcnt, isstdcnt, leapcnt, timecnt, typecnt, charcnt
        ]
    )
    MAGIC = "TZif".encode()

    version: bytes
    """The version of the files format."""

    isutcnt: int = 0
    """The number of UT/local indicators in the data block."""

    isstdcnt: int = 0
    """The number of standard/wall indicators in the data block."""

    leapcnt: int = 0
    """The number of leap second records in the data block."""

    timecnt: int = 0
    """The number of time transitions in the data block."""

    typecnt: int = 0
    """The number of local time type records in the data block."""

    charcnt: int = 0
    """The number of characters for time zone designations in the data block."""

    @classmethod
    def unpack(cls, header_bytes: bytes) -> tuple[bytes, Header]:
        """Parse the header bytes, returning the magic and the header."""
        (
            magic,
            version,
            isutcnt,
            isstdcnt,
            leapcnt,
            timecnt,
            typecnt,
            charcnt,
        ) = struct.unpack(Header.STRUCT_FORMAT, header_bytes)
        return magic, Header(
            version, isutcnt, isstdcnt, leapcnt, timecnt, typecnt, charcnt
        )

    def pack(self) -> bytes:
        """Serialize the header."""
        return struct.pack(
            Header.STRUCT_FORMAT,
            Header.MAGIC,
            self.version,
            self.isutcnt,
            self.isstdcnt,
            self.leapcnt,
            self.timecnt,
            self.typecnt,
            self.charcnt,
        )

    def datablock_size(self, version: TZifVersion) -> int:
        """Return the size in bytes of the data block described by this header."""
        return (
            self.timecnt * version.time_size
            + self.timecnt
            + self.typecnt * LOCAL_TIME_TYPE_SIZE
            + self.charcnt
            + self.leapcnt * (version.time_size + 4)  # occur + corr
            + self.isstdcnt
            + self.isutcnt
        )
