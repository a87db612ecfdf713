"""Records for road-graph nodes and arcs, and the map plane they project onto."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping

EARTH_RADIUS = 6378137.0
"""Equatorial earth radius in metres."""


@dataclass(frozen=True)
class NodeInfo:
    """Geographic position of a graph node, in degrees."""

    lat: float = 0.0
    lon: float = 0.0


@dataclass(frozen=True)
class ArcInfo:
    """A directed road segment between two node identifiers."""

    id1: int = 0
    id2: int = 0
    distance: float = 0.0
    street: str = "???"


def _log2(value: float) -> float:
    """Base-2 logarithm following IEEE rules: -inf at zero, nan below it."""
    if value > 0:
        return math.log2(value)
    if value == 0:
        return -math.inf
    return math.nan


def _lookup(nodes: Mapping[int, NodeInfo], node_id: int) -> NodeInfo:
    try:
        return nodes[node_id]
    except KeyError:
        raise KeyError(f"unknown node {node_id}") from None


@dataclass(frozen=True)
class Plan:
    """A bounding box whose centre is the origin of a flat projection."""

    lon_min: float
    lon_max: float
    lat_min: float
    lat_max: float

    @property
    def middle_lon(self) -> float:
        return (self.lon_max + self.lon_min) / 2

    @property
    def middle_lat(self) -> float:
        return (self.lat_max + self.lat_min) / 2

    def x(self, nodes: Mapping[int, NodeInfo], node_id: int) -> float:
        """East-west offset of a node from the centre, in metres."""
        info = _lookup(nodes, node_id)
        return (
            EARTH_RADIUS
            * math.cos(math.radians(self.middle_lat))
            * math.radians(info.lon - self.middle_lon)
        )

    def y(self, nodes: Mapping[int, NodeInfo], node_id: int) -> float:
        """Mercator-style north-south coordinate of a node relative to the centre."""
        info = _lookup(nodes, node_id)
        angle = math.radians((info.lat - self.middle_lat) / 2.0 + 45.0)
        return EARTH_RADIUS * _log2(math.tan(angle))


def flat_x(
    nodes: Mapping[int, NodeInfo], node_id: int, middle_lat: float, middle_lon: float
) -> float:
    """East-west offset with the centre latitude taken as radians and no degree conversion."""
    info = _lookup(nodes, node_id)
    return EARTH_RADIUS * math.cos(middle_lat) * (info.lon - middle_lon)


def flat_y(
    nodes: Mapping[int, NodeInfo], node_id: int, middle_lat: float, middle_lon: float
) -> float:
    """North-south coordinate computed as log2(tan(delta_lat / 2 * pi / 4))."""
    info = _lookup(nodes, node_id)
    angle = ((info.lat - middle_lat) / 2) * (math.pi / 4)
    return EARTH_RADIUS * _log2(math.tan(angle))