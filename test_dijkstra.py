"""Tests for the dense-matrix Dijkstra engine."""

import networkx as nx
import numpy as np
import pytest

from dense_sssp.algorithms import (
    UNREACHED,
    compute_shortest_paths,
    compute_shortest_paths_with_order,
    dijkstra_distances,
)
from dense_sssp.examples import EXPECTED_DISTANCES, example_graph, generate_random_graph


@pytest.mark.parametrize("name", ["example1", "example2", "example3"])
def test_reference_graphs(name):
    distances = compute_shortest_paths(example_graph(name), 0)
    assert distances.tolist() == EXPECTED_DISTANCES[name]


def test_wikipedia_graph_with_asymmetric_cell():
    # 5 -> 2 weighs 12 while 2 -> 5 weighs 2; only rows of settled nodes are read
    matrix = example_graph("example3")
    matrix[5][2] = 12
    assert compute_shortest_paths(matrix, 0).tolist() == [0, 7, 9, 20, 20, 11]


def test_single_node():
    distances, order = compute_shortest_paths_with_order([[0]], 0)
    assert distances.tolist() == [0.0]
    assert order.tolist() == [-1]


def test_disconnected_node_stays_unreached():
    matrix = [
        [0, 1, 0],
        [1, 0, 0],
        [0, 0, 0],
    ]
    distances, order = compute_shortest_paths_with_order(matrix, 0)
    assert distances.tolist() == [0.0, 1.0, UNREACHED]
    assert order.tolist() == [0, 1, -1]


def test_isolated_source_skips_rounds():
    matrix = [
        [0, 1, 0],
        [1, 0, 0],
        [0, 0, 0],
    ]
    distances, order = compute_shortest_paths_with_order(matrix, 2)
    assert distances[2] == 0.0
    assert np.isinf(distances[0]) and np.isinf(distances[1])
    assert order.tolist() == [2, -1, -1]


def test_ties_settle_lowest_index_first():
    distances, order = compute_shortest_paths_with_order(example_graph("example2"), 0)
    # nodes 1 and 2 both sit at distance 4 after node 3 is settled
    assert order.tolist() == [0, 3, 1, -1]
    assert distances.tolist() == [0, 4, 4, 1]


def test_settlement_order_on_wikipedia_graph():
    _, order = compute_shortest_paths_with_order(example_graph("example3"), 0)
    assert order.tolist() == [0, 1, 2, 5, 3, -1]


def test_zero_weight_edge_when_explicit():
    inf = np.inf
    matrix = [
        [0, 0, inf],
        [0, 0, 5],
        [inf, 5, 0],
    ]
    assert compute_shortest_paths(matrix, 0, zero_means_no_edge=False).tolist() == [0, 0, 5]
    assert compute_shortest_paths(matrix, 0).tolist() == [0, inf, inf]


def test_none_marks_missing_edge():
    matrix = [
        [None, 2, None],
        [2, None, 3],
        [None, 3, None],
    ]
    assert compute_shortest_paths(matrix, 2, zero_means_no_edge=False).tolist() == [5, 3, 0]


def test_result_is_read_only_and_input_untouched():
    matrix = example_graph("example3")
    snapshot = [list(row) for row in matrix]
    distances = compute_shortest_paths(matrix, 0)
    assert matrix == snapshot
    with pytest.raises(ValueError):
        distances[0] = 1.0


def test_numpy_input_untouched():
    adj = generate_random_graph(n_nodes=8, seed=3)
    snapshot = adj.copy()
    compute_shortest_paths(adj, 0)
    np.testing.assert_array_equal(adj, snapshot)


def test_repeated_calls_identical():
    adj = generate_random_graph(n_nodes=15, edge_probability=0.2, seed=11)
    first = compute_shortest_paths(adj, 4)
    second = compute_shortest_paths(adj, 4)
    np.testing.assert_array_equal(first, second)


def test_kernel_on_weight_matrix():
    weights = np.full((3, 3), np.inf)
    weights[0, 1] = weights[1, 0] = 2.5
    weights[1, 2] = weights[2, 1] = 0.5
    dist, order = dijkstra_distances(weights, 0)
    np.testing.assert_allclose(dist, [0.0, 2.5, 3.0])
    assert order.tolist() == [0, 1, -1]


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_matches_networkx(seed):
    adj = generate_random_graph(n_nodes=20, edge_probability=0.15, seed=seed)
    G = nx.from_numpy_array(adj)
    for source in (0, 7, 19):
        lengths = nx.single_source_dijkstra_path_length(G, source, weight="weight")
        expected = [lengths.get(node, np.inf) for node in range(20)]
        assert compute_shortest_paths(adj, source).tolist() == expected


@pytest.mark.parametrize("seed", [5, 6])
def test_bounds_on_every_source(seed):
    adj = generate_random_graph(n_nodes=12, edge_probability=0.3, seed=seed)
    total_weight = float(np.sum(np.triu(adj)))
    for source in range(12):
        distances = compute_shortest_paths(adj, source)
        assert distances[source] == 0.0
        assert np.all(distances >= 0.0)
        assert np.all(distances <= total_weight)


def test_disconnected_random_graph_against_networkx():
    adj = generate_random_graph(n_nodes=25, edge_probability=0.05, seed=9, connected=False)
    G = nx.from_numpy_array(adj)
    reachable = nx.node_connected_component(G, 0)
    distances = compute_shortest_paths(adj, 0)
    for node in range(25):
        assert np.isfinite(distances[node]) == (node in reachable)


def test_symmetric_distances():
    adj = generate_random_graph(n_nodes=10, edge_probability=0.35, seed=21)
    rows = np.vstack([compute_shortest_paths(adj, source) for source in range(10)])
    np.testing.assert_array_equal(rows, rows.T)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_generated_graph_is_connected(seed):
    adj = generate_random_graph(n_nodes=30, edge_probability=0.02, seed=seed)
    assert nx.is_connected(nx.from_numpy_array(adj))
