"""Dijkstra shortest distances using dense adjacency matrix."""

import numpy as np
from numba import njit

from .weights import build_weight_matrix, validate_source

UNREACHED = np.inf


@njit
def dijkstra_distances(weights: np.ndarray, source: int) -> tuple:
    """Compute single-source distances using O(n^2) Dijkstra.

    ``weights[u, v] == np.inf`` means there is no edge from u to v.
    Returns ``(dist, order)`` where ``order`` lists settled nodes, padded with -1.
    """

    n_nodes = weights.shape[0]
    dist = np.full(n_nodes, np.inf)
    visited = np.zeros(n_nodes, dtype=np.bool_)
    order = np.full(n_nodes, -1, dtype=np.int64)

    dist[source] = 0.0
    n_settled = 0

    for _ in range(n_nodes - 1):
        # lowest index wins on ties
        u = -1
        min_val = np.inf
        for i in range(n_nodes):
            if (not visited[i]) and (dist[i] < min_val):
                min_val = dist[i]
                u = i

        # remaining nodes are unreachable
        if u == -1:
            continue

        visited[u] = True
        order[n_settled] = u
        n_settled += 1

        row = weights[u]
        for v in range(n_nodes):
            weight = row[v]
            if visited[v] or weight == np.inf:
                continue
            alt = dist[u] + weight
            if alt < dist[v]:
                dist[v] = alt

    return dist, order


def compute_shortest_paths_with_order(
    graph,
    source: int,
    zero_means_no_edge: bool = True,
) -> tuple[np.ndarray, np.ndarray]:
    """Validate inputs, then return read-only ``(distances, settlement_order)``."""

    weights = build_weight_matrix(graph, zero_means_no_edge=zero_means_no_edge)
    source = validate_source(source, weights.shape[0])

    dist, order = dijkstra_distances(weights, source)
    dist.flags.writeable = False
    order.flags.writeable = False
    return dist, order


def compute_shortest_paths(
    graph,
    source: int,
    zero_means_no_edge: bool = True,
) -> np.ndarray:
    """
    Shortest distance from ``source`` to every node of a dense non-negative graph.

    Args:
        graph: n x n adjacency matrix. ``graph[i][j]`` is the weight of edge i-j;
            0 (unless ``zero_means_no_edge`` is False), None and inf mean no edge.
        source: node index in [0, n).
        zero_means_no_edge: see ``build_weight_matrix``.

    Returns:
        Read-only float64 array of length n. Unreachable nodes hold ``UNREACHED``.

    Raises:
        InvalidInputError: empty, ragged or non-square matrix, non-numeric, NaN or
            negative weight, or source outside [0, n).
    """

    dist, _ = compute_shortest_paths_with_order(graph, source, zero_means_no_edge)
    return dist
