import pytest

from roadgraph.cli import main
from roadgraph.graph import load_graph

SAMPLE = """\
# test network
V,19791,-77.0,38.5
V,50179,-76.5,39.5
V,73964,-77.5,39.0
V,272851,-76.0,38.0
V,1,-77.2,38.8
E,19791,1,10.5
E,1,50179,20.25
E,73964,272851,100.0
E,73964,19791,5.0
E,50179,272851,3.0
"""


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


def test_default_report(graph_file, capsys):
    assert main([str(graph_file)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Latitude max = 39.5 latitude min = 38"
    assert lines[1] == "Longitude max = -76 longitude min = -77.5"
    assert lines[2] == "The middle point of the map is:  "
    assert "The number of nodes between the nodes 19791 and 50179 is 2 nodes" in lines
    assert "The number of nodes between the nodes 73964 and 272851 is 1 nodes" in lines
    assert lines[-1] == "dist[t] = 38.75"


def test_middle_point_matches_plan(graph_file, capsys):
    assert main([str(graph_file)]) == 0
    lines = capsys.readouterr().out.splitlines()
    plan = load_graph(graph_file).plan()
    assert lines[3] == f"LAT: {plan.middle_lat:g}"
    assert lines[4] == f"LON: {plan.middle_lon:g}"


def test_custom_pairs(graph_file, capsys):
    assert main([str(graph_file), "--hops", "73964", "50179", "--length", "19791", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "The number of nodes between the nodes 73964 and 50179 is 3 nodes" in lines
    assert lines[-1] == "dist[t] = 10.5"


def test_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "roadgraph:" in capsys.readouterr().err


def test_unreachable_pair_fails(graph_file, capsys):
    assert main([str(graph_file), "--hops", "272851", "19791"]) == 1
    assert "not reachable" in capsys.readouterr().err


def test_unknown_node_fails(graph_file, capsys):
    assert main([str(graph_file), "--length", "19791", "424242"]) == 1
    assert "unknown node 424242" in capsys.readouterr().err