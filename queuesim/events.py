from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class EventType(str, Enum):
    ARRIVED = "arrived"
    WAITING = "waiting"
    SERVICE_STARTED = "service_started"
    DEPARTED = "departed"


def format_clock(t: int) -> str:
    # HH:MM:SS, hours keep growing past 23
    hours = t // 3600
    minutes = (t % 3600) // 60
    seconds = t % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


@dataclass(frozen=True)
class Event:
    """Something that happened to a client at a given second of the run."""
    type: EventType
    timestamp: int                      # simulation seconds
    client_id: int
    server_index: Optional[int] = None  # 0-based, only for service events

    @property
    def clock(self) -> str:
        return format_clock(self.timestamp)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "timestamp": self.timestamp,
            "clock": self.clock,
            "client_id": self.client_id,
            "server_index": self.server_index,
        }


def arrived(client_id: int, t: int) -> Event:
    return Event(EventType.ARRIVED, t, client_id)


def waiting(client_id: int, t: int) -> Event:
    return Event(EventType.WAITING, t, client_id)


def service_started(server_index: int, client_id: int, t: int) -> Event:
    return Event(EventType.SERVICE_STARTED, t, client_id, server_index)


def departed(server_index: int, client_id: int, t: int) -> Event:
    return Event(EventType.DEPARTED, t, client_id, server_index)
