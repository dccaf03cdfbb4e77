import logging
from collections import deque
from typing import Deque, Iterator, List, Optional

from .distributions import base_time, random_time
from .events import Event, arrived, departed, service_started, waiting
from .generator import SequenceGenerator
from .models import SimulationConfig
from .server import ServerState
from .validators import require_stable

logger = logging.getLogger(__name__)


class SimulationEngine:
    """
    One line, `server_count` tellers, one-second ticks.

    Every tick runs three phases in a fixed order:

      1. release  - every busy server counts down; those reaching 0 depart
      2. arrival  - admit the next client if one is due
      3. assign   - hand waiting clients to idle servers, lowest index first

    A server freed in phase 1 is available to phase 3 of the same tick.
    Configuration problems are raised from the constructor, so no tick ever
    runs for a configuration that cannot finish.
    """

    def __init__(self, config: SimulationConfig, generator: Optional[SequenceGenerator] = None):
        config.validate()
        if generator is None:
            generator = SequenceGenerator(config.seed, config.multiplier, config.increment, config.mod)
        self.validate(config.arrival_rate, config.service_rate, config.server_count)

        self.config = config
        self.generator = generator

        self.current_time = 0
        self.next_arrival_time = 0   # first client arrives on tick 0
        self.servers: List[ServerState] = [ServerState() for _ in range(config.server_count)]
        self.waiting_queue: Deque[int] = deque()

        self.total_clients = config.client_count
        self.arrived_count = 0
        self.served_count = 0

        self.arrival_gap_base = base_time(config.arrival_rate)
        self.service_duration_base = base_time(config.service_rate)

    @staticmethod
    def validate(arrival_rate: int, service_rate: int, server_count: int) -> None:
        require_stable(arrival_rate, service_rate, server_count)

    @property
    def finished(self) -> bool:
        return self.served_count == self.total_clients

    def idle_count(self) -> int:
        return sum(1 for s in self.servers if s.is_idle())

    def random_arrival_gap(self) -> int:
        return random_time(self.arrival_gap_base, self.generator)

    def random_service_duration(self) -> int:
        return random_time(self.service_duration_base, self.generator)

    # ------------------------------
    # Tick phases
    # ------------------------------
    def _release(self) -> List[Event]:
        out = []
        for idx, server in enumerate(self.servers):
            if server.tick():
                client_id = server.release_client()
                self.served_count += 1
                out.append(departed(idx, client_id, self.current_time))
        return out

    def _admit(self) -> List[Event]:
        if self.current_time != self.next_arrival_time or self.arrived_count >= self.total_clients:
            return []

        self.arrived_count += 1
        client_id = self.arrived_count
        out = [arrived(client_id, self.current_time)]

        # saturation is judged against the line as it was before this client joined
        if self.idle_count() <= len(self.waiting_queue):
            out.append(waiting(client_id, self.current_time))
        self.waiting_queue.append(client_id)

        self.next_arrival_time = self.current_time + self.random_arrival_gap()
        return out

    def _assign(self) -> List[Event]:
        out = []
        for idx, server in enumerate(self.servers):
            if not self.waiting_queue:
                break
            if not server.is_idle():
                continue
            client_id = self.waiting_queue.popleft()
            server.assign(client_id, self.random_service_duration())
            out.append(service_started(idx, client_id, self.current_time))
        return out

    # ------------------------------
    # Public loop
    # ------------------------------
    def step(self) -> List[Event]:
        """Run a single tick and return what happened during it."""
        events = self._release()
        events += self._admit()
        events += self._assign()
        if events:
            logger.debug(
                "t=%d: %d event(s), queue=%d, idle=%d/%d, served=%d/%d",
                self.current_time, len(events), len(self.waiting_queue),
                self.idle_count(), len(self.servers), self.served_count, self.total_clients,
            )
        self.current_time += 1
        return events

    def iter_events(self) -> Iterator[Event]:
        logger.info(
            "Simulation started: %d client(s), %d server(s), arrival gap ~%ds, service ~%ds",
            self.total_clients, len(self.servers), self.arrival_gap_base, self.service_duration_base,
        )
        while not self.finished:
            yield from self.step()
        logger.info("Simulation finished at t=%d, %d client(s) served", self.current_time, self.served_count)

    def run(self) -> List[Event]:
        return list(self.iter_events())
