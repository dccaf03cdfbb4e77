from dataclasses import dataclass
from typing import Optional

from .distributions import base_time, mean_variance
from .models import SimulationConfig


def _round(x: float) -> float:
    return x if x == float("inf") else round(float(x), 4)


# ---------- Result Model ----------
@dataclass
class AnalyticalResult:
    arrival_rate: float       # lambda, clients per second
    service_rate: float       # mu, clients per second per server
    servers: int
    mean_gap: float           # seconds, after rounding up
    mean_service: float
    var_gap: float
    var_service: float
    utilization: float        # rho = lambda / (c * mu)
    Lq: float                 # mean line length
    Wq: float                 # mean wait in line (seconds)
    W: float                  # mean time in system (seconds)
    L: float
    note: Optional[str] = None


# ---------- Erlang C ----------
def erlang_c(offered_load: float, servers: int) -> float:
    """
    Probability an arrival finds every server busy (M/M/c).

    Built from the Erlang B recursion
      B(0) = 1,  B(k) = a*B(k-1) / (k + a*B(k-1))
    then C = c*B / (c - a*(1 - B)). Needs a < c.
    """
    if servers <= 0:
        raise ValueError("servers must be >= 1")
    if offered_load >= servers:
        raise ValueError("offered load must be below the server count")
    b = 1.0
    for k in range(1, servers + 1):
        b = offered_load * b / (k + offered_load * b)
    return servers * b / (servers - offered_load * (1.0 - b))


# ---------- G/G/c (Allen–Cunneen approximation) ----------
def allen_cunneen_wait(mean_gap: float, var_gap: float,
                       mean_service: float, var_service: float, servers: int) -> float:
    """
    Wq ≈ ((Ca^2 + Cs^2) / 2) * Wq(M/M/c)

    Ca^2, Cs^2 are the squared coefficients of variation of the gap and
    service times; Wq(M/M/c) = C / (c*mu - lambda).
    """
    if mean_gap <= 0 or mean_service <= 0:
        raise ValueError("mean gap and service time must be > 0")
    lam = 1.0 / mean_gap
    mu = 1.0 / mean_service
    ca2 = var_gap / mean_gap ** 2
    cs2 = var_service / mean_service ** 2
    pw = erlang_c(lam / mu, servers)
    return (ca2 + cs2) / 2.0 * pw / (servers * mu - lam)


# ---------- Prediction for a simulator config ----------
def predict(config: SimulationConfig) -> AnalyticalResult:
    """
    Steady-state estimate for the simulated system.

    Uses the law of the rounded-up draws the engine really makes, so the
    means sit half a second above the base times. Two rates that pass the
    integer stability check can still round to equal bases and saturate a
    single server; that case comes back with infinite metrics and a note.
    """
    config.validate()
    c = config.server_count
    mean_gap, var_gap = mean_variance(base_time(config.arrival_rate))
    mean_svc, var_svc = mean_variance(base_time(config.service_rate))

    lam = 1.0 / mean_gap
    mu = 1.0 / mean_svc
    rho = lam / (c * mu)

    if rho >= 1:
        Wq = Lq = W = L = float("inf")
        note = "Unstable system (λ ≥ cμ)"
    else:
        Wq = allen_cunneen_wait(mean_gap, var_gap, mean_svc, var_svc, c)
        Lq = lam * Wq
        W = Wq + mean_svc
        L = lam * W
        note = None

    return AnalyticalResult(
        arrival_rate=_round(lam),
        service_rate=_round(mu),
        servers=c,
        mean_gap=_round(mean_gap),
        mean_service=_round(mean_svc),
        var_gap=_round(var_gap),
        var_service=_round(var_svc),
        utilization=_round(rho),
        Lq=_round(Lq),
        Wq=_round(Wq),
        W=_round(W),
        L=_round(L),
        note=note,
    )
