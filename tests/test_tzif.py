"""Tests for the TZif binary layout."""

import pytest

from tztemplate.tzif import Header, TZifVersion


@pytest.mark.parametrize(
    "version_byte,expected,time_size,time_format",
    [
        (b"\x00", TZifVersion.V1, 4, "l"),
        (b"2", TZifVersion.V2, 8, "q"),
        (b"3", TZifVersion.V3, 8, "q"),
    ],
)
def test_version(
    version_byte: bytes, expected: TZifVersion, time_size: int, time_format: str
) -> None:
    """Test versions are looked up by their header byte."""
    version = TZifVersion(version_byte)
    assert version is expected
    assert version.version == version_byte
    assert version.time_size == time_size
    assert version.time_format == time_format


@pytest.mark.parametrize("version_byte", [b"1", b"4", b"\xff"])
def test_unsupported_version(version_byte: bytes) -> None:
    """Test unknown header bytes are not a version."""
    with pytest.raises(ValueError):
        TZifVersion(version_byte)


def test_header() -> None:
    """Test serializing and parsing a header."""
    header = Header(b"3", isutcnt=2, isstdcnt=2, timecnt=2, typecnt=3, charcnt=8)
    content = header.pack()
    assert len(content) == Header.SIZE
    assert content[:5] == b"TZif3"
    assert content[5:20] == b"\x00" * 15
    assert Header.unpack(content) == (b"TZif", header)


def test_datablock_size() -> None:
    """Test the data block size uses the time size of the version."""
    header = Header(
        b"3", isutcnt=2, isstdcnt=2, leapcnt=1, timecnt=2, typecnt=3, charcnt=8
    )
    # times, types, records, designations, leap seconds, indicators
    assert header.datablock_size(TZifVersion.V1) == 8 + 2 + 18 + 8 + 8 + 4
    assert header.datablock_size(TZifVersion.V3) == 16 + 2 + 18 + 8 + 12 + 4
