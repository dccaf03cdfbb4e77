from dataclasses import dataclass
from typing import Optional

from .errors import ServerBusy


@dataclass
class ServerState:
    """One teller slot: who it is serving and how long until it frees up."""
    client_id: Optional[int] = None   # None while idle
    remaining_ticks: int = 0          # seconds until released

    def is_idle(self) -> bool:
        return self.remaining_ticks == 0

    def assign(self, client_id: int, duration_ticks: int) -> None:
        if not self.is_idle():
            raise ServerBusy(
                f"cannot assign client #{client_id}: still serving client "
                f"#{self.client_id} for {self.remaining_ticks}s"
            )
        if duration_ticks < 1:
            raise ValueError("duration_ticks must be >= 1")
        self.client_id = client_id
        self.remaining_ticks = duration_ticks

    def tick(self) -> bool:
        # True only on the busy -> idle transition
        if self.remaining_ticks > 0:
            self.remaining_ticks -= 1
            return self.remaining_ticks == 0
        return False

    def release_client(self) -> Optional[int]:
        client_id = self.client_id
        self.client_id = None
        return client_id
