"""Tests for the whitespace-separated road network repository."""

from pathlib import Path

import pytest

from roadgraph.adapters.network import TextNetworkRepository
from roadgraph.config import RoadmapConfig
from roadgraph.domain.errors import NetworkLoadError
from roadgraph.graph import GraphType
from roadgraph.graph.geodesy import GeoNode

EDGES = """\
0 1 2 1.5
1 2 3 2.0
2 1 3 10.0
3 3 4 0.5
"""

NODES = """\
1 -121.904167 41.974556
2 -121.902153 41.974766
3 -121.896790 41.988075
4 -121.889603 41.998032
"""


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    (tmp_path / "edges.txt").write_text(EDGES, encoding="utf-8")
    (tmp_path / "nodes_lon_lat.txt").write_text(NODES, encoding="utf-8")
    return tmp_path


@pytest.fixture
def repository(data_dir: Path) -> TextNetworkRepository:
    return TextNetworkRepository(RoadmapConfig(data_dir=data_dir))


def test_load_builds_undirected_graph(repository):
    network = repository.load()
    graph = network.graph

    assert graph.graph_type is GraphType.UNDIRECTED
    assert graph.order() == 4
    assert graph.size() == 8
    assert graph.adjacent(2, 1) and graph.adjacent(1, 2)


def test_weight_function_reads_distances_both_ways(repository):
    network = repository.load()

    assert network.weight(1, 2) == 1.5
    assert network.weight(2, 1) == 1.5
    assert network.weight(3, 1) == 10.0
    assert network.weight(1, 4) == 0.0


def test_locations_are_loaded(repository):
    network = repository.load()

    assert network.locate(1) == GeoNode(-121.904167, 41.974556)
    assert network.locate(99) is None


def test_shortest_path_uses_loaded_distances(repository):
    network = repository.load()

    assert network.graph.shortest_path(1, 4, network.weight) == [1, 2, 3, 4]


def test_load_is_cached_until_cleared(repository, data_dir):
    first = repository.load()
    assert repository.load() is first

    (data_dir / "edges.txt").write_text("0 7 8 1.0\n", encoding="utf-8")
    assert repository.load() is first

    repository.clear_cache()
    reloaded = repository.load()
    assert reloaded is not first
    assert reloaded.graph.nodes() == [7, 8]


def test_explicit_paths_override_config(tmp_path, data_dir):
    edges = tmp_path / "other_edges.txt"
    edges.write_text("0 5 6 1.0\n", encoding="utf-8")

    repository = TextNetworkRepository(
        RoadmapConfig(data_dir=data_dir), edges_path=edges
    )

    assert repository.load().graph.nodes() == [5, 6]


def test_records_may_span_lines(tmp_path):
    (tmp_path / "edges.txt").write_text("0 1\n2 4.0 1 2 3\n1.0", encoding="utf-8")
    (tmp_path / "nodes_lon_lat.txt").write_text("", encoding="utf-8")

    network = TextNetworkRepository(RoadmapConfig(data_dir=tmp_path)).load()

    assert network.graph.nodes() == [1, 2, 3]
    assert network.weight(2, 3) == 1.0


def test_reading_stops_at_first_malformed_record(tmp_path):
    (tmp_path / "edges.txt").write_text(
        "0 1 2 1.0\nid start end distance\n1 3 4 1.0\n", encoding="utf-8"
    )
    (tmp_path / "nodes_lon_lat.txt").write_text("", encoding="utf-8")

    network = TextNetworkRepository(RoadmapConfig(data_dir=tmp_path)).load()

    assert network.graph.nodes() == [1, 2]


def test_first_distance_wins_for_duplicate_edges(tmp_path):
    (tmp_path / "edges.txt").write_text(
        "0 1 2 1.0\n1 2 1 9.0\n", encoding="utf-8"
    )
    (tmp_path / "nodes_lon_lat.txt").write_text("", encoding="utf-8")

    network = TextNetworkRepository(RoadmapConfig(data_dir=tmp_path)).load()

    assert network.graph.size() == 2
    assert network.weight(1, 2) == network.weight(2, 1) == 1.0


def test_missing_file_raises_network_load_error(tmp_path):
    repository = TextNetworkRepository(RoadmapConfig(data_dir=tmp_path))

    with pytest.raises(NetworkLoadError) as excinfo:
        repository.load()

    assert excinfo.value.file_path == str(tmp_path / "edges.txt")
    assert isinstance(excinfo.value.cause, OSError)


def test_unset_paths_fall_back_to_config(tmp_path, data_dir):
    nodes = tmp_path / "other_nodes.txt"
    nodes.write_text("1 5.0 6.0\n", encoding="utf-8")

    repository = TextNetworkRepository(
        RoadmapConfig(data_dir=data_dir), nodes_path=nodes
    )
    network = repository.load()

    assert repository.edges_path is None
    assert network.graph.order() == 4
    assert network.locate(1) == GeoNode(5.0, 6.0)
    assert network.locate(2) is None


def test_out_of_range_coordinates_abort_loading(tmp_path):
    (tmp_path / "edges.txt").write_text("0 1 2 1.0\n", encoding="utf-8")
    (tmp_path / "nodes_lon_lat.txt").write_text(
        "1 10.0 50.0\n2 10.0 95.0\n", encoding="utf-8"
    )

    with pytest.raises(NetworkLoadError) as excinfo:
        TextNetworkRepository(RoadmapConfig(data_dir=tmp_path)).load()

    assert excinfo.value.file_path == str(tmp_path / "nodes_lon_lat.txt")
    assert isinstance(excinfo.value.cause, ValueError)
