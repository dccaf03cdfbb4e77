from .errors import InvalidConfiguration, UnstableQueue


def require_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"{name} must be an integer")


def require_int_at_least(name: str, value: int, minimum: int) -> None:
    require_int(name, value)
    if value < minimum:
        raise InvalidConfiguration(f"{name} must be an integer >= {minimum}")


def require_stable(arrival_rate: int, service_rate: int, server_count: int) -> None:
    # the queue only drains if arrivals are strictly below total capacity
    if arrival_rate >= service_rate * server_count:
        raise UnstableQueue(arrival_rate, service_rate, server_count)
