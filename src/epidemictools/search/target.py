from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Iterable, Optional

from epidemictools.config import DEFAULT_REPORT_EVERY, DEFAULT_TOLERANCE
from epidemictools.graph.adjacency import Graph
from epidemictools.spread import compute

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """
    Best graph found so far.

    graph:       candidate relabelled so the origin is vertex 0
    original:    candidate as it appeared in the catalog
    origin:      initially infected vertex in ``original``
    probability: probability of full infection from ``origin``
    index:       1-based position of the candidate in the catalog
    """

    graph: Graph
    original: Graph
    origin: int
    probability: float
    index: int


def _eta(elapsed: float, done: int, total: Optional[int]) -> str:
    if total is None or done == 0:
        return "unknown"
    left = elapsed / done * max(total - done, 0)
    return str(timedelta(seconds=round(left)))


def solve_catalog(
    graphs: Iterable[Graph],
    *,
    target: float,
    rate: float,
    days: int,
    algorithm: str,
    tolerance: float = DEFAULT_TOLERANCE,
    total: Optional[int] = None,
    on_improvement: Optional[Callable[[SearchResult], None]] = None,
    report_every: int = DEFAULT_REPORT_EVERY,
) -> Optional[SearchResult]:
    """
    Scan candidate graphs for the (graph, origin) pair closest to ``target``.

    A value is accepted only when it is within ``tolerance`` of the target
    and strictly closer than the best so far, so the first of several equally
    close candidates wins. Returns None if nothing came within tolerance.
    """
    best: Optional[SearchResult] = None
    start = time.monotonic()
    processed = 0

    for index, g in enumerate(graphs, start=1):
        for origin, value in enumerate(compute(g, algorithm, days, rate)):
            dist = abs(value - target)
            if dist >= tolerance:
                continue
            if best is not None and dist >= abs(best.probability - target):
                continue
            best = SearchResult(
                graph=g.pivot(origin),
                original=g,
                origin=origin,
                probability=value,
                index=index,
            )
            logger.debug("candidate %d origin %d: improved to %.10g", index, origin, value)
            if on_improvement is not None:
                on_improvement(best)

        processed += 1
        if report_every > 0 and processed % report_every == 0:
            logger.info(
                "processed %d%s, best: %s, eta: %s",
                processed,
                f"/{total}" if total is not None else "",
                f"{best.probability:g}" if best is not None else "none",
                _eta(time.monotonic() - start, processed, total),
            )

    logger.info(
        "scanned %d graphs in %s",
        processed, timedelta(seconds=round(time.monotonic() - start)),
    )
    return best
