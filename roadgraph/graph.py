"""A directed road graph with breadth-first and weighted shortest paths."""

from __future__ import annotations

import heapq
import math
import os
from collections import deque
from dataclasses import dataclass
from typing import Iterable

from roadgraph.model import ArcInfo, NodeInfo, Plan


class NoPathError(LookupError):
    """Raised when the target node cannot be reached from the source."""


@dataclass(frozen=True)
class Bounds:
    """Extremes of the coordinates seen while adding nodes."""

    lon_min: float
    lon_max: float
    lat_min: float
    lat_max: float


class RoadGraph:
    """Directed graph whose nodes are keyed by integer identifiers."""

    def __init__(self) -> None:
        self.nodes: dict[int, NodeInfo] = {}
        self.arcs: list[ArcInfo] = []
        self._vertex: dict[int, int] = {}
        self._out: list[list[tuple[int, float]]] = []
        self._lon_max = -100.0
        self._lon_min = 0.0
        self._lat_max = 0.0
        self._lat_min = 100.0

    def __len__(self) -> int:
        return len(self.nodes)

    def add_node(self, node_id: int, lat: float, lon: float) -> NodeInfo:
        """Add a node; reusing an identifier replaces it with a fresh, unconnected node."""
        self._vertex[node_id] = len(self._out)
        self._out.append([])
        info = NodeInfo(lat=lat, lon=lon)
        self.nodes[node_id] = info
        if lat > self._lat_max:
            self._lat_max = lat
        if lat < self._lat_min:
            self._lat_min = lat
        if lon > self._lon_max:
            self._lon_max = lon
        if lon < self._lon_min:
            self._lon_min = lon
        return info

    def add_arc(self, id1: int, id2: int, distance: float) -> ArcInfo:
        """Add a directed arc from id1 to id2 with the given length."""
        source = self._vertex_of(id1)
        target = self._vertex_of(id2)
        self._out[source].append((target, distance))
        arc = ArcInfo(id1, id2, distance)
        self.arcs.append(arc)
        return arc

    def bounds(self) -> Bounds:
        return Bounds(self._lon_min, self._lon_max, self._lat_min, self._lat_max)

    def plan(self) -> Plan:
        b = self.bounds()
        return Plan(b.lon_min, b.lon_max, b.lat_min, b.lat_max)

    def hop_count(self, id1: int, id2: int) -> int:
        """Number of arcs on a shortest unweighted path from id1 to id2."""
        source = self._vertex_of(id1)
        target = self._vertex_of(id2)
        dist = {source: 0}
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            if vertex == target:
                return dist[vertex]
            for succ, _ in self._out[vertex]:
                if succ not in dist:
                    dist[succ] = dist[vertex] + 1
                    queue.append(succ)
        raise NoPathError(f"node {id2} is not reachable from node {id1}")

    def dijkstra_length(self, id1: int, id2: int) -> float:
        """Total length of a shortest weighted path from id1 to id2."""
        source = self._vertex_of(id1)
        target = self._vertex_of(id2)
        best = {source: 0.0}
        heap = [(0.0, source)]
        done: set[int] = set()
        while heap:
            length, vertex = heapq.heappop(heap)
            if vertex in done:
                continue
            if vertex == target:
                return length
            done.add(vertex)
            for succ, weight in self._out[vertex]:
                candidate = length + weight
                if candidate < best.get(succ, math.inf):
                    best[succ] = candidate
                    heapq.heappush(heap, (candidate, succ))
        raise NoPathError(f"node {id2} is not reachable from node {id1}")

    def _vertex_of(self, node_id: int) -> int:
        try:
            return self._vertex[node_id]
        except KeyError:
            raise KeyError(f"unknown node {node_id}") from None


def _fields(line: str, kind: str, number: int) -> list[str]:
    parts = line.split(",")
    if len(parts) < 4 or parts[0] != kind:
        raise ValueError(f"line {number}: malformed {kind} record: {line!r}")
    return parts[1:4]


def parse_graph(lines: Iterable[str]) -> RoadGraph:
    """Build a graph from V,id,lon,lat and E,id1,id2,distance records.

    Lines starting with '#' and lines of any other kind are ignored.
    """
    graph = RoadGraph()
    for number, raw in enumerate(lines, 1):
        line = raw.rstrip("\r\n")
        if not line:
            continue
        kind = line[0]
        if kind == "V":
            node_id, lon, lat = _fields(line, "V", number)
            try:
                graph.add_node(int(node_id), lat=float(lat), lon=float(lon))
            except ValueError:
                raise ValueError(f"line {number}: malformed V record: {line!r}") from None
        elif kind == "E":
            id1, id2, distance = _fields(line, "E", number)
            try:
                values = int(id1), int(id2), float(distance)
            except ValueError:
                raise ValueError(f"line {number}: malformed E record: {line!r}") from None
            graph.add_arc(*values)
    return graph


def load_graph(path: str | os.PathLike[str]) -> RoadGraph:
    """Read a graph file from disk."""
    with open(path, encoding="utf-8") as handle:
        return parse_graph(handle)