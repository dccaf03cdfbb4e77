from dataclasses import dataclass, fields
from typing import Dict, List, Sequence

from .errors import InvalidConfiguration
from .events import Event
from .validators import require_int, require_int_at_least


@dataclass
class SimulationConfig:
    seed: int          # LCG x0
    multiplier: int    # LCG a
    increment: int     # LCG c
    mod: int           # LCG m
    client_count: int
    server_count: int
    arrival_rate: int  # arrivals per minute
    service_rate: int  # clients served per minute, per server

    @classmethod
    def from_values(cls, values: Sequence[int]) -> "SimulationConfig":
        # same order the console program reads them in
        names = [f.name for f in fields(cls)]
        if len(values) != len(names):
            raise InvalidConfiguration(
                f"expected {len(names)} integers ({', '.join(names)}), got {len(values)}"
            )
        return cls(*values)

    def validate(self) -> None:
        for f in fields(self):
            require_int(f.name, getattr(self, f.name))
        require_int_at_least("client_count", self.client_count, 0)
        require_int_at_least("server_count", self.server_count, 1)
        require_int_at_least("arrival_rate", self.arrival_rate, 1)
        require_int_at_least("service_rate", self.service_rate, 1)


@dataclass
class ClientRecord:
    client_id: int
    arrival_time: int
    service_start_time: int
    service_end_time: int
    service_time: int
    waiting_time: int
    turnaround_time: int
    server: int     # 1-based, as printed
    waited: bool    # got a Waiting notice on arrival


@dataclass
class GanttBlock:
    server_id: int
    client_id: int
    start: int
    end: int


@dataclass
class SimulationSummary:
    clients_served: int
    end_time: int
    mean_wait: float
    max_wait: int
    mean_turnaround: float
    max_queue_length: int
    utilization: Dict[int, float]   # server number -> busy fraction


@dataclass
class SimulationResult:
    events: List[Event]
    rows: List[ClientRecord]
    gantt: List[GanttBlock]
    wait_times: List[int]
    turnaround_times: List[int]
    service_times: List[int]
    arrival_times: List[int]
    summary: SimulationSummary
