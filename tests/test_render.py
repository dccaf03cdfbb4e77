import io

import pytest

from queuesim.events import Event, EventType, format_clock
from queuesim.render import TextRenderer, describe, render_event


@pytest.mark.parametrize(
    "t, expected",
    [(0, "00:00:00"), (59, "00:00:59"), (3725, "01:02:05"), (86400, "24:00:00"), (360061, "100:01:01")],
)
def test_format_clock(t, expected):
    assert format_clock(t) == expected


def test_describe():
    assert describe(Event(EventType.ARRIVED, 0, 3)) == "Client #3 arrived."
    assert describe(Event(EventType.WAITING, 0, 3)) == \
        "Client #3 is waiting for a server to become available."
    assert describe(Event(EventType.SERVICE_STARTED, 0, 3, 0)) == \
        "Client #3 is being served by server #1."
    assert describe(Event(EventType.DEPARTED, 0, 3, 1)) == \
        "Server #2 finished serving client #3."


def test_render_event_has_clock_prefix():
    assert render_event(Event(EventType.ARRIVED, 65, 1)) == "[00:01:05] Client #1 arrived."


def test_event_to_dict():
    d = Event(EventType.DEPARTED, 3661, 2, 0).to_dict()
    assert d == {"type": "departed", "timestamp": 3661, "clock": "01:01:01",
                 "client_id": 2, "server_index": 0}


def test_renderer_writes_lines():
    out = io.StringIO()
    n = TextRenderer(out).render_all([Event(EventType.ARRIVED, 0, 1), Event(EventType.ARRIVED, 9, 2)])
    assert n == 2
    assert out.getvalue() == "[00:00:00] Client #1 arrived.\n[00:00:09] Client #2 arrived.\n"


def test_renderer_pauses_only_when_clock_moves(monkeypatch):
    sleeps = []
    monkeypatch.setattr("queuesim.render.time.sleep", sleeps.append)
    events = [
        Event(EventType.ARRIVED, 0, 1),
        Event(EventType.SERVICE_STARTED, 0, 1, 0),
        Event(EventType.DEPARTED, 5, 1, 0),
    ]
    TextRenderer(io.StringIO(), delay=0.25).render_all(events)
    assert sleeps == [0.25]


def test_renderer_rejects_negative_delay():
    with pytest.raises(ValueError):
        TextRenderer(io.StringIO(), delay=-1)
