class SimulationError(Exception):
    """Base class for everything the simulator refuses to run."""


class InvalidGeneratorParameters(SimulationError, ValueError):
    pass


class InvalidConfiguration(SimulationError, ValueError):
    pass


class UnstableQueue(SimulationError):
    """Arrivals outpace total service capacity, so the line grows forever."""

    def __init__(self, arrival_rate: int, service_rate: int, server_count: int):
        self.arrival_rate = arrival_rate
        self.service_rate = service_rate
        self.server_count = server_count
        capacity = service_rate * server_count
        self.utilization = arrival_rate / capacity if capacity > 0 else float("inf")
        super().__init__(
            f"Unstable system: arrival rate {arrival_rate}/min >= "
            f"{server_count} server(s) x {service_rate}/min"
        )


class ServerBusy(SimulationError, RuntimeError):
    pass
