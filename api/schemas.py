from typing import Dict, List, Optional, Literal
from pydantic import BaseModel, Field, model_validator

from queuesim.distributions import base_time, time_bounds


EventKind = Literal["arrived", "waiting", "service_started", "departed"]

# requests are simulated inline, one tick per simulated second
MAX_SIMULATED_SECONDS = 7 * 24 * 3600

# ---------- Input ----------
class SimulationRequest(BaseModel):
    # LCG parameters; ranges relative to mod are checked below
    seed: int = Field(..., ge=0)
    multiplier: int = Field(..., gt=0)
    increment: int = Field(..., ge=0)
    mod: int = Field(..., gt=0, examples=[13])

    clients: int = Field(..., ge=0, le=20000)
    servers: int = Field(..., ge=1, le=1000)
    arrival_rate: int = Field(..., ge=1, description="Arrivals per minute")
    service_rate: int = Field(..., ge=1, description="Clients served per minute, per server")

    @model_validator(mode="after")
    def check_generator_ranges(self):
        if self.multiplier >= self.mod:
            raise ValueError("multiplier must be in range (0, mod)")
        if self.increment >= self.mod:
            raise ValueError("increment must be in range [0, mod)")
        if self.seed >= self.mod:
            raise ValueError("seed must be in range [0, mod)")
        return self

    @model_validator(mode="after")
    def check_run_length(self):
        # last arrival can come no later than clients x the longest gap
        longest_gap = time_bounds(base_time(self.arrival_rate))[1]
        if self.clients * longest_gap > MAX_SIMULATED_SECONDS:
            raise ValueError(
                f"run too long: {self.clients} clients at {self.arrival_rate}/min "
                f"may span more than {MAX_SIMULATED_SECONDS}s"
            )
        return self


# ---------- Simulation ----------
class EventOut(BaseModel):
    type: EventKind
    timestamp: int
    clock: str
    client_id: int
    server_index: Optional[int] = None

class ClientRow(BaseModel):
    client_id: int
    arrival_time: int
    service_start_time: int
    service_end_time: int
    service_time: int
    waiting_time: int
    turnaround_time: int
    server: int
    waited: bool

class GanttBlock(BaseModel):
    server_id: int
    client_id: int
    start: int
    end: int

class Summary(BaseModel):
    clients_served: int
    end_time: int
    mean_wait: float
    max_wait: int
    mean_turnaround: float
    max_queue_length: int
    utilization: Dict[int, float]

class SimulationResponse(BaseModel):
    events: List[EventOut]
    lines: List[str]
    rows: List[ClientRow]
    gantt: List[GanttBlock]
    summary: Summary

# ---------- Analytical ----------
class AnalyticalResponse(BaseModel):
    arrival_rate: float
    service_rate: float
    servers: int
    mean_gap: float
    mean_service: float
    var_gap: float
    var_service: float
    utilization: float
    # None when the configuration is unstable (infinite)
    Lq: Optional[float] = None
    Wq: Optional[float] = None
    W: Optional[float] = None
    L: Optional[float] = None
    note: Optional[str] = None
