"""Shortest-path algorithms over dense adjacency matrices."""

from .dijkstra import (
    UNREACHED,
    compute_shortest_paths,
    compute_shortest_paths_with_order,
    dijkstra_distances,
)
from .weights import InvalidInputError, build_weight_matrix, validate_source

__all__ = [
    "UNREACHED",
    "compute_shortest_paths",
    "compute_shortest_paths_with_order",
    "dijkstra_distances",
    "InvalidInputError",
    "build_weight_matrix",
    "validate_source",
]
