"""Command-line report on a road graph file."""

from __future__ import annotations

import argparse
import sys

from roadgraph.graph import load_graph

DEFAULT_GRAPH = "graph_dc_area.2022-03-11.txt"
DEFAULT_HOPS = [(19791, 50179), (73964, 272851)]
DEFAULT_LENGTH = (73964, 272851)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roadgraph",
        description="Report bounds, centre and shortest paths of a road graph.",
    )
    parser.add_argument("graph", nargs="?", default=DEFAULT_GRAPH, help="graph file to read")
    parser.add_argument(
        "--hops",
        nargs=2,
        type=int,
        action="append",
        metavar=("ID1", "ID2"),
        help="report the unweighted path length between two nodes (repeatable)",
    )
    parser.add_argument(
        "--length",
        nargs=2,
        type=int,
        metavar=("ID1", "ID2"),
        help="report the weighted shortest path length between two nodes",
    )
    return parser


def _message(exc: Exception) -> str:
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    return str(exc)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    hops = [tuple(pair) for pair in args.hops] if args.hops else DEFAULT_HOPS
    id1, id2 = args.length if args.length else DEFAULT_LENGTH

    try:
        graph = load_graph(args.graph)
    except (OSError, ValueError, LookupError) as exc:
        print(f"roadgraph: {_message(exc)}", file=sys.stderr)
        return 1

    b = graph.bounds()
    print(f"Latitude max = {b.lat_max:g} latitude min = {b.lat_min:g}")
    print(f"Longitude max = {b.lon_max:g} longitude min = {b.lon_min:g}")

    plan = graph.plan()
    print("The middle point of the map is:  ")
    print(f"LAT: {plan.middle_lat:g}")
    print(f"LON: {plan.middle_lon:g}")

    try:
        for source, target in hops:
            count = graph.hop_count(source, target)
            print(f"The number of nodes between the nodes {source} and {target} is {count} nodes")
        print(f"dist[t] = {graph.dijkstra_length(id1, id2):g}")
    except LookupError as exc:
        print(f"roadgraph: {_message(exc)}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())