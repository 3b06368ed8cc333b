"""Library for building the time zone designation table of a TZif file.

Local time type records refer to their designation with a single byte offset
into a table of NUL terminated strings, so names are shared where possible.
A name that is a suffix of a name already in the table reuses its storage,
since reading from the middle of a string still stops at the same NUL. This is
explicitly allowed by rfc8536.

Existing names are searched in insertion order and the first match is used,
which keeps the output deterministic rather than minimal.
"""

from __future__ import annotations

__all__ = [
    "DesignationTable",
]


class DesignationTable:
    """A table of NUL terminated time zone designations."""

    def __init__(self) -> None:
        """Initialize DesignationTable."""
        self._names: list[bytes] = []
        self._name_offsets: list[int] = []
        self._offsets: list[int] = []
        self._charcnt = 0

    @property
    def names(self) -> list[str]:
        """Return the names stored in the table, in insertion order."""
        return [name.decode("utf-8") for name in self._names]

    @property
    def offsets(self) -> list[int]:
        """Return the offset assigned to every added name, in the order added."""
        return list(self._offsets)

    @property
    def charcnt(self) -> int:
        """Return the size of the table in bytes."""
        return self._charcnt

    def add(self, name: str) -> int:
        """Add the name to the table and return its offset."""
        value = name.encode("utf-8")
        for stored, stored_offset in zip(self._names, self._name_offsets):
            if stored.endswith(value):
                offset = stored_offset + len(stored) - len(value)
                self._offsets.append(offset)
                return offset
        offset = self._charcnt
        self._names.append(value)
        self._name_offsets.append(offset)
        self._offsets.append(offset)
        self._charcnt += len(value) + 1
        return offset

    def to_bytes(self) -> bytes:
        """Return the table contents as stored in the TZif file."""
        return b"".join(name + b"\x00" for name in self._names)
