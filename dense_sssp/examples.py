"""Reference graphs and synthetic graph generation."""

from typing import Dict, List, Tuple

import networkx as nx
import numpy as np

# (0) --4-- (1) --3-- (2)
_EXAMPLE1_EDGES = [(0, 1, 4), (1, 2, 3)]

#     /--4-- (1) --3--\
# (0)                  (2)
#     \--1-- (3) --3--/
_EXAMPLE2_EDGES = [(0, 1, 4), (0, 3, 1), (1, 2, 3), (2, 3, 3)]

# https://en.wikipedia.org/wiki/Dijkstra%27s_algorithm animation graph
_EXAMPLE3_EDGES = [
    (0, 1, 7), (0, 2, 9), (0, 5, 14),
    (1, 2, 10), (1, 3, 15),
    (2, 3, 11), (2, 5, 2),
    (3, 4, 6),
    (4, 5, 9),
]


def matrix_from_edges(n_nodes: int, edges: List[Tuple[int, int, float]]) -> List[List[float]]:
    """Build a symmetric zero-encoded adjacency matrix from (u, v, weight) triples."""

    G = nx.Graph()
    G.add_nodes_from(range(n_nodes))
    G.add_weighted_edges_from(edges)
    adj = nx.to_numpy_array(G, nodelist=list(range(n_nodes)), weight="weight", nonedge=0.0)
    return adj.tolist()


EXAMPLE_GRAPHS: Dict[str, List[List[float]]] = {
    "example1": matrix_from_edges(3, _EXAMPLE1_EDGES),
    "example2": matrix_from_edges(4, _EXAMPLE2_EDGES),
    "example3": matrix_from_edges(6, _EXAMPLE3_EDGES),
}

# Distances from node 0.
EXPECTED_DISTANCES: Dict[str, List[float]] = {
    "example1": [0, 4, 7],
    "example2": [0, 4, 4, 1],
    "example3": [0, 7, 9, 20, 20, 11],
}


def example_graph(name: str) -> List[List[float]]:
    """Return a fresh copy of a named example matrix."""

    return [list(row) for row in EXAMPLE_GRAPHS[name]]


def generate_random_graph(
    n_nodes: int = 10,
    edge_probability: float = 0.3,
    weight_low: int = 1,
    weight_high: int = 20,
    seed: int = 42,
    connected: bool = True,
) -> np.ndarray:
    """Generate a symmetric zero-encoded adjacency matrix with random integer weights."""

    rng = np.random.default_rng(seed)
    G = nx.gnp_random_graph(n_nodes, edge_probability, seed=seed)

    # bridge components in discovery order
    if connected and n_nodes > 1:
        comps = [sorted(c) for c in nx.connected_components(G)]
        for prev_comp, comp in zip(comps[:-1], comps[1:]):
            G.add_edge(prev_comp[0], comp[0])

    adj = np.zeros((n_nodes, n_nodes), dtype=float)
    for u, v in G.edges():
        w = float(rng.integers(weight_low, weight_high + 1))
        adj[u, v] = adj[v, u] = w

    return adj
