"""
Probability that an outbreak from one vertex reaches a whole small contact graph.

  epidemictools compute --algorithm dp --graph 011,100,010 --days 5
  epidemictools solve --algorithm dp --graphs graphs8c.g6 --days 30 --target 0.70
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from epidemictools.config import (
    DEFAULT_RATE,
    DEFAULT_REPORT_EVERY,
    DEFAULT_TARGET,
    DEFAULT_TOLERANCE,
    SearchOptions,
    SpreadOptions,
    default_algorithm,
)
from epidemictools.errors import EpidemicToolsError
from epidemictools.io.catalog import count_catalog_lines, iter_catalog
from epidemictools.io.matrix import format_matrix, parse_matrix
from epidemictools.search.target import SearchResult, solve_catalog
from epidemictools.spread import ALGORITHMS, compute
from epidemictools.utils.reachability import can_saturate

logger = logging.getLogger("epidemictools")


def _non_negative_int(text: str) -> int:
    try:
        v = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if v < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {v}")
    return v


def _probability(text: str) -> float:
    try:
        v = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if not 0.0 <= v <= 1.0:
        raise argparse.ArgumentTypeError(f"must be in [0, 1]: {v}")
    return v


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="epidemictools",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    ap.add_argument("-q", "--quiet", action="store_true", help="only log warnings")
    sub = ap.add_subparsers(dest="command", required=True)

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument("--algorithm", choices=sorted(ALGORITHMS), default=default_algorithm(),
                       help="solver (default: %(default)s)")
        p.add_argument("--rate", type=_probability, default=DEFAULT_RATE,
                       help="daily probability for infection to pass along an edge (default: %(default)s)")
        p.add_argument("--days", type=_non_negative_int, required=True,
                       help="number of days")
        p.add_argument("--draw", metavar="PATH", default=None,
                       help="save a drawing of the (best) graph to PATH")

    p = sub.add_parser("compute", help="Compute probability for a given graph.")
    add_common(p)
    p.add_argument("--graph", required=True,
                   help='comma separated rows, e.g. "011,100,010"')
    p.add_argument("--all-vertices", action="store_true",
                   help="report every vertex as origin, not just vertex 0")

    p = sub.add_parser("solve", help="Search a catalog for a graph hitting the target probability.")
    add_common(p)
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--graphs", metavar="PATH",
                     help="catalog file, one graph6 token or matrix per line")
    src.add_argument("--geng", metavar="N", type=_non_negative_int,
                     help="generate connected graphs on N vertices with nauty geng")
    p.add_argument("--target", type=_probability, default=DEFAULT_TARGET,
                   help="target probability (default: %(default)s)")
    p.add_argument("--tolerance", type=_probability, default=DEFAULT_TOLERANCE,
                   help="maximum distance from target (default: %(default)s)")
    p.add_argument("--report-every", type=_non_negative_int, default=DEFAULT_REPORT_EVERY,
                   help="log progress every K graphs, 0 to disable (default: %(default)s)")
    return ap


def _draw(path: str, result_graph, origin: int = 0) -> None:
    from epidemictools.viz.draw import draw_graph

    draw_graph(result_graph, origin=origin, save_path=path)
    logger.info("saved drawing to %s", path)


def run_compute(args: argparse.Namespace) -> int:
    opts = SpreadOptions(days=args.days, rate=args.rate, algorithm=args.algorithm)
    g = parse_matrix(args.graph)

    origins = range(g.size) if args.all_vertices else [0]
    for v in origins:
        if not can_saturate(g, v):
            logger.warning("vertex %d cannot reach every vertex; probability is 0", v)

    r = compute(g, opts.algorithm, opts.days, opts.rate, first_only=not args.all_vertices)
    if args.all_vertices:
        for v, p in enumerate(r):
            print(f"vertex {v}: probability of all vertices infected after {opts.days} days: {p * 100.0:g}%")
    else:
        print(f"probability of all vertices infected after {opts.days} days: {r[0] * 100.0:g}%")

    if args.draw:
        _draw(args.draw, g)
    return 0


def _print_improvement(result: SearchResult) -> None:
    print(f"Improved solution! v={result.probability:g}")
    print(format_matrix(result.graph))


def run_solve(args: argparse.Namespace) -> int:
    opts = SearchOptions(
        spread=SpreadOptions(days=args.days, rate=args.rate, algorithm=args.algorithm),
        target=args.target,
        tolerance=args.tolerance,
        report_every=args.report_every,
    )

    if args.graphs is not None:
        total: Optional[int] = count_catalog_lines(args.graphs)
        graphs = iter_catalog(args.graphs)
        logger.info("scanning %d graphs from %s", total, args.graphs)
    else:
        from epidemictools.external.nauty import geng_graphs

        total = None
        graphs = geng_graphs(args.geng, connected=True)
        logger.info("scanning connected graphs on %d vertices from geng", args.geng)

    best = solve_catalog(
        graphs,
        target=opts.target,
        rate=opts.spread.rate,
        days=opts.spread.days,
        algorithm=opts.spread.algorithm,
        tolerance=opts.tolerance,
        total=total,
        on_improvement=_print_improvement,
        report_every=opts.report_every,
    )

    if best is None:
        print("no solution within tolerance")
        return 0

    print("best solution")
    print(format_matrix(best.graph))
    if args.draw:
        _draw(args.draw, best.graph)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "compute":
            return run_compute(args)
        return run_solve(args)
    except EpidemicToolsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
