import pytest

from powerlogic import exceptions
from powerlogic.bounds import compute_bounds
from powerlogic.types import BatteryStatus, Bounds, Event


def _event(start, end):
    return Event(entry_id=1, node=None, root_node=None, start=start, end=end, energy=0)


def test_bounds_span_events_and_battery():
    battery = [BatteryStatus(120.0, 0.5, False), BatteryStatus(200.0, 0.4, False)]
    events = [_event(150.0, 300.0), _event(110.0, 130.0)]
    assert compute_bounds(events, battery) == Bounds(110.0, 300.0)


def test_battery_can_widen_bounds():
    battery = [BatteryStatus(10.0, 0.5, False), BatteryStatus(900.0, 0.4, True)]
    span = compute_bounds([_event(150.0, 300.0)], battery)
    assert span == Bounds(10.0, 900.0)
    assert span.duration == 890.0
    assert 10.0 in span and 900.0 in span and 901.0 not in span


@pytest.mark.parametrize("events,battery", [
    ([], [BatteryStatus(1.0, 0.5, False)]),
    ([_event(1.0, 2.0)], []),
])
def test_empty_inputs_fail(events, battery):
    with pytest.raises(exceptions.EmptyDatasetError):
        compute_bounds(events, battery)
