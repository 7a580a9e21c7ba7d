from __future__ import annotations

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Search ceiling above the offered load before a target is declared unreachable.
MAX_SEARCH_AGENTS: int = 1000


@dataclass(frozen=True)
class ErlangAgentsResult:
    agents: int
    service_level: float
    target_met: bool


def offered_load_erlangs(volume: float, aht_seconds: float, period_seconds: float = 3600.0) -> float:
    """
    Offered load a (Erlangs) = arrival_rate * AHT.
    With arrivals measured as count per period:
      a = volume * aht_seconds / period_seconds

    The dashboard normalizes interval call counts against an hour (3600 s).
    """
    if period_seconds <= 0:
        raise ValueError("period_seconds must be > 0")
    if volume <= 0:
        return 0.0
    return float(volume) * float(aht_seconds) / float(period_seconds)


# Headcounts this close below a whole number count as that whole number.
_SERVER_TOLERANCE: float = 1e-9


def _whole_servers(n: float) -> int:
    # Fractional (shrinkage-adjusted) headcounts answer calls as whole agents.
    if n <= 0:
        return 0
    return int(math.floor(float(n) + _SERVER_TOLERANCE * max(1.0, float(n))))


def erlang_c_wait_probability(a: float, n: float) -> float:
    """
    Erlang C probability of wait (Pw).

    Pw = [ (a^n / n!) * (n/(n-a)) ] / [ sum_{k=0..n-1} a^k/k! + (a^n/n!) * (n/(n-a)) ]

    Requires n > a for stability; returns 1.0 otherwise.
    """
    servers = _whole_servers(n)
    if servers <= 0:
        return 1.0
    if a <= 0:
        return 0.0
    if servers <= a:
        return 1.0

    # Erlang B by recurrence B(k) = a*B(k-1) / (k + a*B(k-1)); each step multiplies
    # in the running ratio a/k, so no factorial or power is ever formed.
    b = 1.0
    for k in range(1, servers + 1):
        b = a * b / (k + a * b)

    pw = servers * b / (servers - a * (1.0 - b))
    return max(0.0, min(1.0, float(pw)))


def asa_erlang_c(a: float, n: float, aht_seconds: float) -> float:
    """
    Average Speed of Answer (ASA) for M/M/n without abandonment.

    ASA = Pw * (AHT / (n-a))
    """
    if a <= 0:
        return 0.0
    servers = _whole_servers(n)
    if servers <= a:
        return float("inf")
    pw = erlang_c_wait_probability(a, servers)
    return float(pw) * float(aht_seconds) / float(servers - a)


def service_level_erlang_c(a: float, n: float, aht_seconds: float, service_time_seconds: float) -> float:
    """
    Service level for threshold T (seconds):

    SL(T) = 1 - Pw * exp(-(n-a) * (T / AHT))
    """
    if a <= 0:
        return 1.0
    servers = _whole_servers(n)
    if servers <= a:
        return 0.0

    T = max(float(service_time_seconds), 0.0)
    pw = erlang_c_wait_probability(a, servers)
    expo = math.exp(-(servers - a) * (T / float(aht_seconds)))
    sl = 1.0 - pw * expo
    # Clamp for safety
    return max(0.0, min(1.0, float(sl)))


def occupancy(a: float, n: float) -> float:
    """Agent utilisation a/n, clamped to [0, 1]."""
    if n <= 0:
        return 0.0
    return max(0.0, min(1.0, float(a) / float(n)))


def erlang_agents(
    target_sl: float,
    service_time_seconds: float,
    a: float,
    aht_seconds: float,
    max_extra_agents: int = MAX_SEARCH_AGENTS,
) -> ErlangAgentsResult:
    """
    Find the minimum whole N such that SL(a, N, T, AHT) >= target_sl.

    target_sl is a fraction in (0, 1]. Service level is non-decreasing in N,
    so the search brackets exponentially from the smallest stable N and then
    bisects. If the target is still missed at floor(a) + max_extra_agents the
    ceiling is returned with target_met=False.
    """
    if a <= 0:
        return ErlangAgentsResult(agents=0, service_level=1.0, target_met=True)

    low = int(math.floor(a)) + 1
    ceiling = max(low, int(math.floor(a)) + int(max_extra_agents))

    def meets(n: int) -> bool:
        return service_level_erlang_c(a, n, aht_seconds, service_time_seconds) >= target_sl

    # 1) Exponential bracketing to find a feasible high
    high = low
    step = 1
    while high < ceiling and not meets(high):
        high = min(high + step, ceiling)
        step *= 2

    if not meets(high):
        sl = service_level_erlang_c(a, ceiling, aht_seconds, service_time_seconds)
        logger.warning(
            "SLA target %.3f unreachable for %.2f Erlangs within %d agents (SL %.4f)",
            target_sl,
            a,
            ceiling,
            sl,
        )
        return ErlangAgentsResult(agents=ceiling, service_level=sl, target_met=False)

    # 2) Binary search in [low, high] for minimal feasible n
    lo, hi = low, high
    while lo < hi:
        mid = (lo + hi) // 2
        if meets(mid):
            hi = mid
        else:
            lo = mid + 1

    n = int(lo)
    return ErlangAgentsResult(
        agents=n,
        service_level=service_level_erlang_c(a, n, aht_seconds, service_time_seconds),
        target_met=True,
    )


__all__ = [
    "MAX_SEARCH_AGENTS",
    "ErlangAgentsResult",
    "offered_load_erlangs",
    "erlang_c_wait_probability",
    "asa_erlang_c",
    "service_level_erlang_c",
    "occupancy",
    "erlang_agents",
]
