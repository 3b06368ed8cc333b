"""Tests for loading templates as python time zones."""

import datetime
import io
from typing import Any
import zoneinfo

import pytest

from tztemplate import (
    MissingZoneInformationError,
    Template,
    TimezoneInfoError,
    Transition,
    Zone,
    encode,
    new_zoneinfo,
)

UTC = datetime.timezone.utc
FORMAT = "%Y-%m-%d %H:%M:%S %z %Z"


def test_utc() -> None:
    """Test a UTC time zone."""
    tz = new_zoneinfo(
        Template(name="MyUTC", zones=[Zone(name="MyUTC", offset=datetime.timedelta(0))])
    )
    value = datetime.datetime(2022, 1, 9, 8, 10, 15, tzinfo=tz)
    assert value.strftime(FORMAT) == "2022-01-09 08:10:15 +0000 MyUTC"
    assert not value.dst()
    assert str(tz) == "MyUTC"


def test_fixed_offset() -> None:
    """Test a fixed offset time zone."""
    tz = new_zoneinfo(
        Template(
            name="MyFixed",
            zones=[
                Zone(name="MyFixed", offset=datetime.timedelta(hours=2, minutes=23))
            ],
        )
    )
    value = datetime.datetime(2022, 1, 9, 8, 10, 15, tzinfo=tz)
    assert value.strftime(FORMAT) == "2022-01-09 08:10:15 +0223 MyFixed"
    assert not value.dst()


def test_transitions() -> None:
    """Test a time zone with transitions between standard and DST zones."""
    tz = new_zoneinfo(
        Template(
            name="MyChanges",
            zones=[
                Zone(name="Std", offset=datetime.timedelta(hours=2, minutes=23)),
                Zone(
                    name="Dst",
                    offset=datetime.timedelta(hours=2, minutes=53),
                    is_dst=True,
                ),
            ],
            transitions=[
                Transition(
                    start=datetime.datetime(2022, 1, 9, 10, tzinfo=UTC), zone_index=1
                ),
                Transition(
                    start=datetime.datetime(2022, 1, 9, 11, tzinfo=UTC), zone_index=0
                ),
            ],
        )
    )
    value = datetime.datetime(2022, 1, 9, 12, 22, 59, tzinfo=tz)
    assert value.strftime(FORMAT) == "2022-01-09 12:22:59 +0223 Std"
    assert not value.dst()

    # Local time moves 30 minutes forward
    value = (value.astimezone(UTC) + datetime.timedelta(seconds=1)).astimezone(tz)
    assert value.strftime(FORMAT) == "2022-01-09 12:53:00 +0253 Dst"
    assert value.dst()

    value = datetime.datetime(2022, 1, 9, 11, tzinfo=UTC).astimezone(tz)
    assert value.strftime(FORMAT) == "2022-01-09 13:23:00 +0223 Std"
    assert not value.dst()


def test_extend_only() -> None:
    """Test a time zone described only by a TZ rule."""
    tz = new_zoneinfo(
        Template(
            name="MyExt",
            extend="<MyExt>-02:23:00<MyExtDST>-03:23:00,M1.2.3/10:00:00,M2.3.4/10:00:00",
        )
    )
    value = datetime.datetime(2022, 1, 9, 8, 10, 15, tzinfo=tz)
    assert value.strftime(FORMAT) == "2022-01-09 08:10:15 +0223 MyExt"
    assert not value.dst()

    value = datetime.datetime(2022, 1, 12, 9, 59, 59, tzinfo=tz)
    assert value.strftime(FORMAT) == "2022-01-12 09:59:59 +0223 MyExt"
    assert not value.dst()

    # At 10:00, local clock moves to 11:00
    value = (value.astimezone(UTC) + datetime.timedelta(seconds=1)).astimezone(tz)
    assert value.strftime(FORMAT) == "2022-01-12 11:00:00 +0323 MyExtDST"
    assert value.dst()


def test_invalid_template() -> None:
    """Test encoding errors are raised unchanged."""
    with pytest.raises(MissingZoneInformationError):
        new_zoneinfo(Template(name="Empty"))


def test_rejected_by_zoneinfo() -> None:
    """Test errors loading the encoded data."""
    with pytest.raises(TimezoneInfoError, match="Unable to load time zone"):
        new_zoneinfo(Template(name="Bad", extend="1234"))


def test_benchmark_new_zoneinfo(bench_template: Template, benchmark: Any) -> None:
    """Add a benchmark for creating a time zone from a template."""
    tz = benchmark(new_zoneinfo, bench_template)
    value = datetime.datetime(2022, 1, 9, 10, 30, tzinfo=UTC).astimezone(tz)
    assert value.strftime(FORMAT) == "2022-01-09 13:23:00 +0253 Dst"


def test_benchmark_load_zoneinfo(bench_template: Template, benchmark: Any) -> None:
    """Add a benchmark for loading encoded template data with zoneinfo."""
    content = encode(bench_template)

    def load() -> zoneinfo.ZoneInfo:
        return zoneinfo.ZoneInfo.from_file(io.BytesIO(content), key="Test")

    tz = benchmark(load)
    assert str(tz) == "Test"
