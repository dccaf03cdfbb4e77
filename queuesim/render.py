import sys
import time
from typing import IO, Iterable, Optional

from .events import Event, EventType


def describe(ev: Event) -> str:
    if ev.type == EventType.ARRIVED:
        return f"Client #{ev.client_id} arrived."
    if ev.type == EventType.WAITING:
        return f"Client #{ev.client_id} is waiting for a server to become available."
    if ev.type == EventType.SERVICE_STARTED:
        return f"Client #{ev.client_id} is being served by server #{ev.server_index + 1}."
    if ev.type == EventType.DEPARTED:
        return f"Server #{ev.server_index + 1} finished serving client #{ev.client_id}."
    raise ValueError(f"Unknown event type: {ev.type}")


def render_event(ev: Event) -> str:
    return f"[{ev.clock}] {describe(ev)}"


class TextRenderer:
    """
    Writes one line per event.

    `delay` is wall-clock seconds to pause each time the simulated clock
    moves forward, so a human can follow the trace. 0 disables pacing.
    """

    def __init__(self, stream: Optional[IO[str]] = None, delay: float = 0.0):
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self.stream = stream if stream is not None else sys.stdout
        self.delay = delay
        self._last_timestamp: Optional[int] = None

    def __call__(self, ev: Event) -> None:
        if self.delay and self._last_timestamp is not None and ev.timestamp > self._last_timestamp:
            time.sleep(self.delay)
        self._last_timestamp = ev.timestamp
        self.stream.write(render_event(ev) + "\n")

    def render_all(self, events: Iterable[Event]) -> int:
        n = 0
        for ev in events:
            self(ev)
            n += 1
        self.stream.flush()
        return n
