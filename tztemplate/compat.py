"""Compatibility layer for the zone that applies before the first transition.

rfc8536 says local time type 0 applies to times before the first transition.
Go's time package does not follow this exactly (see lookupFirstZone in
time/zoneinfo.go): when type 0 is referenced by a transition, it prefers a
standard time type instead. The encoder therefore always writes an "anchor"
copy of the first zone as type 0 that no transition references, so every
reader agrees on the first zone.

When decoding, the first zone is selected the same way Go does so that a
decoded template describes the same time zone Go would load. The selection can
be turned off with `disable_first_zone_selection` to follow rfc8536 instead.
"""

from __future__ import annotations

import contextlib
import contextvars
import logging
from collections.abc import Generator, Sequence

from .model import Transition, Zone

__all__ = [
    "disable_first_zone_selection",
    "is_first_zone_selection_enabled",
    "first_zone",
    "swap_first_zone",
    "strip_anchor",
]

_LOGGER = logging.getLogger(__name__)

_first_zone_selection = contextvars.ContextVar("first_zone_selection", default=True)


@contextlib.contextmanager
def disable_first_zone_selection() -> Generator[None]:
    """Context manager to always treat type 0 as the first zone when decoding."""
    token = _first_zone_selection.set(False)
    try:
        yield
    finally:
        _first_zone_selection.reset(token)


def is_first_zone_selection_enabled() -> bool:
    """Check if first zone selection compatible with Go is enabled."""
    return _first_zone_selection.get()


def first_zone(zones: Sequence[Zone], zone_indexes: Sequence[int]) -> int:
    """Return the index of the zone that applies before the first transition.

    The zone_indexes are the zones selected by each transition, in order.
    """
    if not is_first_zone_selection_enabled() or 0 not in zone_indexes:
        return 0
    first_index = zone_indexes[0]
    if zones[first_index].is_dst:
        # Nearest preceding standard time zone
        for index in range(first_index - 1, -1, -1):
            if not zones[index].is_dst:
                return index
    for index, zone in enumerate(zones):
        if not zone.is_dst:
            return index
    return 0


def swap_first_zone(
    zones: list[Zone], zone_indexes: list[int]
) -> tuple[list[Zone], list[int]]:
    """Move the zone that applies before the first transition to index 0."""
    if (index := first_zone(zones, zone_indexes)) == 0:
        return zones, zone_indexes
    _LOGGER.debug("Selected zone %d as the first zone", index)
    zones = list(zones)
    zones[0], zones[index] = zones[index], zones[0]
    swapped = {0: index, index: 0}
    return zones, [swapped.get(value, value) for value in zone_indexes]


def strip_anchor(
    zones: list[Zone], transitions: list[Transition], extend: str
) -> tuple[list[Zone], list[Transition]]:
    """Remove the anchor zone written by the encoder, if present.

    The anchor is recognized when no transition references zone 0 and it is
    identical to zone 1, or when there are no transitions and the extend
    rule describes the whole time zone.
    """
    zero_is_used = any(transition.zone_index == 0 for transition in transitions)
    if not (
        (not zero_is_used and len(zones) >= 2 and zones[0] == zones[1])
        or (not transitions and extend)
    ):
        return zones, transitions
    _LOGGER.debug("Removing anchor zone %s", zones[0] if zones else None)
    return zones[1:], [
        Transition(start=transition.start, zone_index=transition.zone_index - 1)
        for transition in transitions
    ]
