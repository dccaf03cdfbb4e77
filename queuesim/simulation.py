from itertools import groupby
from typing import Dict, List, Optional

from .engine import SimulationEngine
from .events import Event, EventType
from .generator import SequenceGenerator
from .models import (
    SimulationConfig, SimulationResult, SimulationSummary, ClientRecord, GanttBlock
)


def simulate(config: SimulationConfig, generator: Optional[SequenceGenerator] = None) -> SimulationResult:
    engine = SimulationEngine(config, generator)
    events = engine.run()
    return summarize(events, config.server_count)


def summarize(events: List[Event], server_count: int) -> SimulationResult:
    """
    Rebuild per-client rows and aggregate stats from an event trace.
    Only uses the events, so it works on any recorded run.
    """
    arrivals: Dict[int, int] = {}
    starts: Dict[int, Event] = {}
    ends: Dict[int, int] = {}
    waited = set()

    for ev in events:
        if ev.type == EventType.ARRIVED:
            arrivals[ev.client_id] = ev.timestamp
        elif ev.type == EventType.WAITING:
            waited.add(ev.client_id)
        elif ev.type == EventType.SERVICE_STARTED:
            starts[ev.client_id] = ev
        elif ev.type == EventType.DEPARTED:
            ends[ev.client_id] = ev.timestamp

    rows: List[ClientRecord] = []
    gantt: List[GanttBlock] = []
    busy: Dict[int, int] = {i + 1: 0 for i in range(server_count)}

    for cid in sorted(ends):
        start_ev = starts[cid]
        arrival = arrivals[cid]
        start = start_ev.timestamp
        end = ends[cid]
        server = start_ev.server_index + 1

        rows.append(ClientRecord(
            client_id=cid,
            arrival_time=arrival,
            service_start_time=start,
            service_end_time=end,
            service_time=end - start,
            waiting_time=start - arrival,
            turnaround_time=end - arrival,
            server=server,
            waited=cid in waited,
        ))
        gantt.append(GanttBlock(server_id=server, client_id=cid, start=start, end=end))
        busy[server] += end - start

    gantt.sort(key=lambda g: (g.start, g.server_id))

    # queue length as seen at the end of each tick
    queue_len = 0
    max_queue = 0
    for _, tick_events in groupby(events, key=lambda e: e.timestamp):
        for ev in tick_events:
            if ev.type == EventType.ARRIVED:
                queue_len += 1
            elif ev.type == EventType.SERVICE_STARTED:
                queue_len -= 1
        max_queue = max(max_queue, queue_len)

    wait_times = [r.waiting_time for r in rows]
    turnaround_times = [r.turnaround_time for r in rows]
    end_time = max(ends.values()) if ends else 0

    summary = SimulationSummary(
        clients_served=len(rows),
        end_time=end_time,
        mean_wait=sum(wait_times) / len(rows) if rows else 0.0,
        max_wait=max(wait_times) if rows else 0,
        mean_turnaround=sum(turnaround_times) / len(rows) if rows else 0.0,
        max_queue_length=max_queue,
        utilization={k: (v / end_time if end_time > 0 else 0.0) for k, v in busy.items()},
    )

    return SimulationResult(
        events=list(events),
        rows=rows,
        gantt=gantt,
        wait_times=wait_times,
        turnaround_times=turnaround_times,
        service_times=[r.service_time for r in rows],
        arrival_times=[r.arrival_time for r in rows],
        summary=summary,
    )
