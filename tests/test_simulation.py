import pytest

from queuesim.models import ClientRecord, GanttBlock
from queuesim.simulation import simulate, summarize

from conftest import make_config


def test_example_result(example_config):
    res = simulate(example_config)
    assert len(res.events) == 6
    assert res.rows == [
        ClientRecord(1, 0, 0, 5, 5, 0, 5, server=1, waited=False),
        ClientRecord(2, 18, 18, 25, 7, 0, 7, server=1, waited=False),
    ]
    assert res.gantt == [GanttBlock(1, 1, 0, 5), GanttBlock(1, 2, 18, 25)]
    assert res.arrival_times == [0, 18]
    assert res.service_times == [5, 7]
    assert res.summary.end_time == 25
    assert res.summary.clients_served == 2
    assert res.summary.utilization == {1: pytest.approx(12 / 25)}


def test_waiting_statistics(scripted):
    gen = scripted([0, 2, 0, 0, 1, 1])
    cfg = make_config(clients=3, servers=1, arrival_rate=4, service_rate=5)
    res = simulate(cfg, gen)

    assert [r.waiting_time for r in res.rows] == [0, 10, 14]
    assert [r.turnaround_time for r in res.rows] == [18, 22, 26]
    assert [r.waited for r in res.rows] == [False, True, True]

    s = res.summary
    assert s.mean_wait == pytest.approx(8.0)
    assert s.max_wait == 14
    assert s.mean_turnaround == pytest.approx(22.0)
    assert s.max_queue_length == 2
    assert s.utilization == {1: pytest.approx(1.0)}


def test_idle_server_has_zero_utilization():
    # gap 60s, service 60s, second server never used
    res = simulate(make_config(clients=2, servers=2, arrival_rate=1, service_rate=1))
    assert [g.server_id for g in res.gantt] == [1, 1]
    assert res.summary.utilization[2] == 0.0


def test_empty_trace():
    res = summarize([], server_count=3)
    assert res.rows == []
    assert res.summary.end_time == 0
    assert res.summary.mean_wait == 0.0
    assert res.summary.utilization == {1: 0.0, 2: 0.0, 3: 0.0}
