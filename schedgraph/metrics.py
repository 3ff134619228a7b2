"""Operation counters and wall-clock timing for algorithm runs.

Every engine records into a `Metrics` instance it owns (or one the caller
passes in). Counters are a fixed enumerated set so that each engine's
contract is explicit; the string values are accepted too.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Dict, Optional, Union


class Counter(str, Enum):
    """Named operation counters recorded by the engines."""

    #: Vertex entered by a depth-first traversal.
    VISITS = "visits"
    #: Outgoing edge examined during a traversal.
    EDGES_EXPLORED = "edges_explored"
    #: Strongly connected component closed.
    COMPONENTS_FOUND = "components_found"
    #: Vertex enqueued on the Kahn frontier.
    PUSHES = "pushes"
    #: Vertex dequeued from the Kahn frontier.
    POPS = "pops"
    #: Edge relaxation attempted from a reached vertex.
    RELAXATIONS = "relaxations"


CounterKey = Union[Counter, str]


def _as_counter(name: CounterKey) -> Counter:
    if isinstance(name, Counter):
        return name
    try:
        return Counter(name)
    except ValueError:
        raise KeyError(f"Unknown counter '{name}'") from None


class Metrics:
    """Counters plus a start/stop timer for one algorithm invocation.

    Not shared across concurrent runs. ``reset()`` clears both the timer and
    the counters.
    """

    def __init__(self) -> None:
        self._counters: Dict[Counter, int] = {}
        self._start_ns: int = 0
        self._end_ns: int = 0

    def start_timer(self) -> None:
        self._start_ns = time.perf_counter_ns()

    def stop_timer(self) -> None:
        self._end_ns = time.perf_counter_ns()

    @property
    def elapsed_ns(self) -> int:
        """Elapsed time in nanoseconds (0 when the timer never stopped)."""
        return max(self._end_ns - self._start_ns, 0)

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_ns / 1_000_000.0

    def increment(self, counter: CounterKey, amount: int = 1) -> None:
        key = _as_counter(counter)
        self._counters[key] = self._counters.get(key, 0) + amount

    def get(self, counter: CounterKey) -> int:
        """Return the counter value.

        Unseen counters read as 0, and so do names outside the ``Counter``
        set: no engine records them, so their count is zero.
        """
        try:
            key = _as_counter(counter)
        except KeyError:
            return 0
        return self._counters.get(key, 0)

    def reset(self) -> None:
        self._counters.clear()
        self._start_ns = 0
        self._end_ns = 0

    def as_dict(self, elapsed: bool = True) -> Dict[str, Union[int, float]]:
        """Return counters keyed by name, in enum order.

        Args:
            elapsed: Include ``elapsed_ms`` in the mapping.
        """
        data: Dict[str, Union[int, float]] = {
            c.value: self._counters[c] for c in Counter if c in self._counters
        }
        if elapsed:
            data["elapsed_ms"] = self.elapsed_ms
        return data

    def summary(self, indent: Optional[str] = "  ") -> str:
        """Human-readable dump of elapsed time and all recorded counters."""
        pad = indent or ""
        lines = [f"Execution Time: {self.elapsed_ms:.3f} ms", "Counters:"]
        for counter in Counter:
            if counter in self._counters:
                lines.append(f"{pad}{counter.value}: {self._counters[counter]}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Metrics({self.as_dict(elapsed=False)}, elapsed_ms={self.elapsed_ms:.3f})"
