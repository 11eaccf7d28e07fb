from __future__ import annotations

from collections import Counter
from threading import Lock
from typing import Dict

from prometheus_client import Counter as PromCounter

# Named counters (in-process snapshot)
_NAMED = Counter()
_LOCK = Lock()

_PROM_PARTITIONS = PromCounter(
    "variantkit_partitions_total",
    "Total variant partition calls",
)

_PROM_MATCHES = PromCounter(
    "variantkit_split_matches_total",
    "Total (variant, module split) pairs assigned by the matcher",
)

_PROM_VIOLATIONS = PromCounter(
    "variantkit_invariant_violations_total",
    "Total targeting invariant violations",
    ["reason"],
)

_PROM_BY_NAME = {
    "partitions": _PROM_PARTITIONS,
    "split_matches": _PROM_MATCHES,
}


def reset_metrics() -> None:
    """
    Test helper: clears the in-process counters to avoid cross-test leakage.
    Prometheus counters are monotonic and are left untouched.
    """
    with _LOCK:
        _NAMED.clear()


def inc_named(name: str, value: int = 1) -> None:
    if not name:
        return
    with _LOCK:
        _NAMED[name] += int(value)
    prom = _PROM_BY_NAME.get(name)
    if prom is not None and value > 0:
        prom.inc(value)


def inc_violation(reason: str) -> None:
    r = reason or "unknown"
    with _LOCK:
        _NAMED["invariant_violations"] += 1
        _NAMED[f"invariant_violations|{r}"] += 1
    _PROM_VIOLATIONS.labels(reason=r).inc()


def snapshot_named() -> Dict[str, int]:
    with _LOCK:
        return dict(_NAMED)
