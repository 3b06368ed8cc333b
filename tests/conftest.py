"""Test fixtures."""

from collections.abc import Callable
import datetime

import pytest

from tztemplate import Template, Transition, Zone

UTC = datetime.timezone.utc


def _bench_template() -> Template:
    """Return a template with a pair of transitions every other year."""
    transitions = []
    for i in range(0, 100, 2):
        transitions.append(
            Transition(
                start=datetime.datetime(1980 + i, 1, 9, 10, tzinfo=UTC), zone_index=1
            )
        )
        transitions.append(
            Transition(
                start=datetime.datetime(1980 + i, 1, 9, 11, tzinfo=UTC), zone_index=0
            )
        )
    return Template(
        name="MyChanges",
        zones=[
            Zone(name="Std", offset=datetime.timedelta(hours=2, minutes=23)),
            Zone(
                name="Dst", offset=datetime.timedelta(hours=2, minutes=53), is_dst=True
            ),
        ],
        transitions=transitions,
    )


@pytest.fixture
def bench_template_factory() -> Callable[[], Template]:
    """Fixture that builds the template used for benchmarks."""
    return _bench_template


@pytest.fixture
def bench_template() -> Template:
    """Fixture that returns the template used for benchmarks."""
    return _bench_template()
