# roadgraph

`roadgraph` reads a road network from a simple comma-separated text file and
stores it as a directed graph. It reports the extent of the network and the
middle point of the map. It also answers two routing questions between nodes:

- how many arcs lie on the shortest unweighted path (breadth-first search);
- how long the shortest weighted path is (Dijkstra).

## Input format

Each line holds one record:

```
# vertices: V,<id>,<longitude>,<latitude>
V,1,-77.03,38.90
V,2,-77.02,38.91
# edges: E,<from id>,<to id>,<distance>
E,1,2,152.4
```

- Blank lines are skipped.
- Lines that start with `#` are skipped.
- Lines that start with any character other than `V` or `E` are skipped.
- Any fields after the fourth are ignored.

The loader raises `ValueError` when a `V` or `E` record has too few fields or
a field that is not a number. It raises `KeyError` when an edge names a node
that has not been defined yet. If a `V` record reuses an identifier, that
identifier is given a new node with no arcs.

## Command line

```
pip install .
roadgraph [GRAPH] [--hops ID1 ID2]... [--length ID1 ID2]
```

- `GRAPH` is the file to read. The default is `graph_dc_area.2022-03-11.txt`
  in the current directory.
- `--hops ID1 ID2` reports the unweighted path length between two nodes. You
  can repeat the option. The default pairs are 19791 → 50179 and
  73964 → 272851.
- `--length ID1 ID2` reports the weighted shortest path length. The default
  pair is 73964 → 272851.

Example output:

```
Latitude max = 38.92 latitude min = 38.9
Longitude max = -77.01 longitude min = -77.03
The middle point of the map is:  
LAT: 38.91
LON: -77.02
The number of nodes between the nodes 1 and 3 is 2 nodes
dist[t] = 150
```

The command exits with status 1 and prints a message to standard error in
these cases:

- the file cannot be read or parsed;
- a node is unknown;
- the target cannot be reached from the source.

## Library use

```python
from roadgraph.graph import RoadGraph, NoPathError, load_graph, parse_graph

graph = parse_graph([
    "V,1,-77.03,38.90",
    "V,2,-77.02,38.91",
    "V,3,-77.01,38.92",
    "E,1,2,100.0",
    "E,2,3,50.0",
])
graph.hop_count(1, 3)         # 2
graph.dijkstra_length(1, 3)   # 150.0
graph.bounds()                # Bounds(lon_min=..., lon_max=..., lat_min=..., lat_max=...)
plan = graph.plan()           # Plan over those bounds
plan.middle_lat, plan.middle_lon
plan.x(graph.nodes, 2), plan.y(graph.nodes, 2)
```

### `roadgraph.graph`

- `RoadGraph` builds a graph by hand with `add_node(node_id, lat, lon)` and
  `add_arc(id1, id2, distance)`.
  - `graph.nodes` maps each identifier to a `NodeInfo`.
  - `graph.arcs` lists the `ArcInfo` records in the order they were added.
  - `len(graph)` is the number of node identifiers.
- `hop_count` and `dijkstra_length` raise:
  - `KeyError` for an unknown node;
  - `NoPathError`, a `LookupError`, when the target cannot be reached.
- `bounds()` returns the extremes of the coordinates that have been added.
  Tracking does not start from the first node. It starts from fixed seed
  values: latitude max 0, latitude min 100, longitude max -100 and longitude
  min 0. A seed value stays in the result unless the nodes go beyond it.
- `parse_graph(lines)` builds a graph from any iterable of lines.
  `load_graph(path)` does the same for a UTF-8 file.

### `roadgraph.model`

- `NodeInfo(lat, lon)` and `ArcInfo(id1, id2, distance, street)` are frozen
  records. `street` defaults to `"???"`.
- `Plan(lon_min, lon_max, lat_min, lat_max)` is a bounding box.
  - `x` gives a node's east–west offset from the centre, in metres.
  - `y` gives `R · log2(tan((Δlat/2 + 45)°))` for the node, where `R` is
    6378137.0.
- `flat_x` and `flat_y` compute a simpler projection around a middle point
  that you supply. `flat_x` takes the middle latitude as radians and applies
  no degree conversion to the longitude difference.

Unknown node identifiers raise `KeyError`.

## Limitations

- Only path lengths are computed. The routes themselves are not returned.
- Street names are not read from the input.

## Tests

```
pip install .[test]
pytest
```