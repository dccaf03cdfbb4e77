"""Single-queue, multi-server tick simulation driven by an LCG."""

from .errors import (
    SimulationError, InvalidGeneratorParameters, UnstableQueue,
    InvalidConfiguration, ServerBusy
)
from .generator import SequenceGenerator
from .server import ServerState
from .events import Event, EventType, format_clock
from .models import SimulationConfig, SimulationResult
from .engine import SimulationEngine
from .simulation import simulate

__all__ = [
    "SimulationError", "InvalidGeneratorParameters", "UnstableQueue",
    "InvalidConfiguration", "ServerBusy",
    "SequenceGenerator", "ServerState",
    "Event", "EventType", "format_clock",
    "SimulationConfig", "SimulationResult",
    "SimulationEngine", "simulate",
]
