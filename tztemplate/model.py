"""Data model for describing a time zone as a template.

A template is a small, abstract description of a time zone: a list of local
time zones (an offset from UTC, a DST flag and a name), a list of transitions
that switch between them, and an optional POSIX TZ rule string that describes
the time zone after the last transition.
"""

from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "Zone",
    "Transition",
    "Template",
]

_SECOND = datetime.timedelta(seconds=1)
_MIN_OFFSET = datetime.timedelta(seconds=-(2**31))
_MAX_OFFSET = datetime.timedelta(seconds=2**31 - 1)


class Zone(BaseModel):
    """A local time zone that applies between transitions."""

    name: str
    """The designation of the zone e.g. PST."""

    offset: datetime.timedelta
    """Time added to UTC to get local time, positive east of UTC."""

    is_dst: bool = False
    """Determines if local time is Daylight Savings Time (else Standard time)."""

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def verify_name(cls, value: str) -> str:
        """Validate that the name can be stored as a NUL terminated string."""
        if "\x00" in value:
            raise ValueError(f"Zone name must not contain NUL characters: {value!r}")
        return value

    @field_validator("offset")
    @classmethod
    def verify_offset(cls, value: datetime.timedelta) -> datetime.timedelta:
        """Validate that the offset is a whole number of seconds that fits 32 bits."""
        if value % _SECOND:
            raise ValueError(f"Zone offset must be a whole number of seconds: {value}")
        if not _MIN_OFFSET <= value <= _MAX_OFFSET:
            raise ValueError(f"Zone offset out of range: {value}")
        return value


class Transition(BaseModel):
    """A change from one zone to another."""

    start: datetime.datetime
    """The instant when the previous zone changes to the zone at zone_index."""

    zone_index: int = Field(ge=0)
    """The index into Template.zones which takes effect since start."""

    model_config = ConfigDict(frozen=True)

    @field_validator("start")
    @classmethod
    def verify_start_aware(cls, value: datetime.datetime) -> datetime.datetime:
        """Validate that the start is an absolute instant."""
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError(f"Transition start must be timezone aware: {value}")
        return value


class Template(BaseModel):
    """Describes how to build a time zone.

    At the beginning of time the zone at index 0 applies, then each
    transition in turn selects another zone. If extend is set, it replaces
    the zone selected by the last transition and describes all future changes.
    A template with no zones applies the extend rule for all time.
    """

    name: str = ""
    """Name of the time zone, not stored in the TZif data."""

    zones: tuple[Zone, ...] = ()
    """Local zones, at most 254. The zone at index 0 applies at the beginning of time."""

    transitions: tuple[Transition, ...] = ()
    """Zone transitions in strictly increasing order of start time."""

    extend: str = ""
    """A TZ string conforming to RFC 8536 section 3.3, used after the last transition."""

    model_config = ConfigDict(frozen=True)
