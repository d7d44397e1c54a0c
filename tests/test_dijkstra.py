from concurrent.futures import ThreadPoolExecutor

import pytest

from roadgraph.graph import (
    Graph,
    GraphType,
    path_weight,
    shortest_path,
    shortest_paths,
)

#
# 1--2--5--8
#  \     \/
#   10---6---7
#
EDGES = [(1, 2), (2, 5), (5, 6), (5, 8), (8, 6), (1, 10), (10, 6), (6, 7)]


def difference(x: int, y: int) -> int:
    return abs(x - y)


def build(graph_type: GraphType) -> Graph[int]:
    graph: Graph[int] = Graph(graph_type)
    for tile, head in EDGES:
        graph.add_edge(tile, head)
    return graph


@pytest.fixture(params=[GraphType.DIRECTED, GraphType.UNDIRECTED])
def graph(request) -> Graph[int]:
    return build(request.param)


def test_empty_graph_has_no_paths():
    graph: Graph[int] = Graph()

    assert graph.shortest_path(1, 2, difference) == []
    assert graph.shortest_paths(1, difference) == []


def test_scenario_sizes():
    assert build(GraphType.DIRECTED).size() == 8
    assert build(GraphType.UNDIRECTED).size() == 16
    assert build(GraphType.UNDIRECTED).order() == 7


def test_shortest_path_prefers_lower_total_weight(graph):
    path = graph.shortest_path(1, 6, difference)

    assert path == [1, 2, 5, 6]
    assert path_weight(path, difference) == 5
    assert path_weight([1, 10, 6], difference) == 13


def test_shortest_path_missing_target(graph):
    assert graph.shortest_path(1, 222, difference) == []


def test_shortest_path_missing_source(graph):
    assert graph.shortest_path(222, 1, difference) == []


def test_shortest_path_to_isolated_node_is_empty(graph):
    graph.add_node(42)

    assert graph.shortest_path(1, 42, difference) == []


def test_shortest_path_to_itself():
    graph = build(GraphType.UNDIRECTED)

    assert graph.shortest_path(6, 6, difference) == [6]


def test_directed_edges_are_one_way():
    graph = build(GraphType.DIRECTED)

    assert graph.shortest_path(7, 1, difference) == []
    assert build(GraphType.UNDIRECTED).shortest_path(7, 1, difference) == [
        7,
        6,
        5,
        2,
        1,
    ]


def test_shortest_paths_from_source(graph):
    paths = graph.shortest_paths(1, difference)

    assert len(paths) == graph.order()
    assert paths == [
        [1],
        [1, 2],
        [1, 2, 5],
        [1, 2, 5, 6],
        [1, 2, 5, 6, 7],
        [1, 2, 5, 8],
        [1, 10],
    ]


def test_shortest_paths_start_and_end_at_expected_nodes(graph):
    for path in graph.shortest_paths(5, difference):
        assert path[0] == 5
        assert graph.shortest_path(5, path[-1], difference) == path


def test_shortest_paths_skip_unreachable_nodes():
    graph = build(GraphType.DIRECTED)
    graph.add_node(42)

    destinations = [path[-1] for path in graph.shortest_paths(5, difference)]

    assert destinations == [5, 6, 7, 8]


def test_shortest_paths_missing_source(graph):
    assert graph.shortest_paths(99, difference) == []


def test_equal_weights_keep_first_discovered_path():
    graph: Graph[str] = Graph()
    # Insert the "c" branch first: iteration order must not depend on it
    graph.add_edge("a", "c")
    graph.add_edge("c", "d")
    graph.add_edge("a", "b")
    graph.add_edge("b", "d")

    assert graph.shortest_path("a", "d", lambda x, y: 1) == ["a", "b", "d"]


def test_cheaper_path_found_later_replaces_earlier_one():
    graph: Graph[str] = Graph()
    weights = {("s", "a"): 1, ("s", "t"): 10, ("a", "t"): 2}
    for tile, head in weights:
        graph.add_edge(tile, head)

    assert graph.shortest_path("s", "t", lambda x, y: weights[(x, y)]) == [
        "s",
        "a",
        "t",
    ]


def test_zero_weight_edges():
    graph: Graph[int] = Graph(GraphType.UNDIRECTED)
    graph.add_edge(1, 2)
    graph.add_edge(2, 3)
    graph.add_edge(1, 3)

    assert graph.shortest_path(1, 3, lambda x, y: 0) == [1, 3]
    assert graph.shortest_paths(1, lambda x, y: 0.0) == [[1], [1, 2], [1, 3]]


def test_float_weights():
    graph: Graph[str] = Graph()
    weights = {("a", "b"): 0.1, ("b", "c"): 0.2, ("a", "c"): 0.30000001}
    for tile, head in weights:
        graph.add_edge(tile, head)

    path = graph.shortest_path("a", "c", lambda x, y: weights[(x, y)])

    assert path == ["a", "b", "c"]
    assert path_weight(path, lambda x, y: weights[(x, y)]) == pytest.approx(0.3)


def test_asymmetric_weights_on_undirected_graph():
    graph: Graph[str] = Graph(GraphType.UNDIRECTED)
    graph.add_edge("a", "b")
    graph.add_edge("b", "c")
    graph.add_edge("a", "c")

    def uphill(x: str, y: str) -> int:
        # Going "down" the alphabet is expensive
        return 1 if x < y else 5

    assert graph.shortest_path("a", "c", uphill) == ["a", "c"]
    assert graph.shortest_path("c", "a", uphill) == ["c", "a"]
    assert graph.shortest_path("b", "a", uphill) == ["b", "a"]


def test_weight_function_called_with_traversed_edges():
    graph: Graph[int] = Graph()
    graph.add_edge(1, 2)
    graph.add_edge(2, 3)
    calls = []

    def weight(x: int, y: int) -> int:
        calls.append((x, y))
        return 1

    assert graph.shortest_path(1, 2, weight) == [1, 2]
    # The search stops as soon as the target is popped
    assert calls == [(1, 2)]


def test_weight_function_not_called_for_missing_target():
    graph = build(GraphType.UNDIRECTED)
    calls = []

    def weight(x: int, y: int) -> int:
        calls.append((x, y))
        return 1

    assert graph.shortest_path(1, 1000, weight) == []
    assert calls == []


def test_module_functions_match_methods(graph):
    assert shortest_path(graph, 1, 7, difference) == graph.shortest_path(
        1, 7, difference
    )
    assert shortest_paths(graph, 1, difference) == graph.shortest_paths(
        1, difference
    )


def test_queries_do_not_mutate_graph(graph):
    order, size = graph.order(), graph.size()

    graph.shortest_paths(1, difference)
    graph.shortest_path(1, 7, difference)

    assert (graph.order(), graph.size()) == (order, size)


def test_concurrent_queries_agree():
    graph = build(GraphType.UNDIRECTED)
    expected = graph.shortest_paths(1, difference)

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(
            pool.map(lambda _: graph.shortest_paths(1, difference), range(16))
        )

    assert all(result == expected for result in results)


def test_path_weight_of_short_paths_is_zero():
    assert path_weight([], difference) == 0
    assert path_weight([3], difference) == 0
    assert path_weight([1, 2, 5, 6, 7], difference) == 6
