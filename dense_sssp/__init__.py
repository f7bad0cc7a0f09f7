"""Single-source shortest distances over dense adjacency matrices."""

from .algorithms import (
    UNREACHED,
    InvalidInputError,
    compute_shortest_paths,
    compute_shortest_paths_with_order,
)
from .examples import EXAMPLE_GRAPHS, EXPECTED_DISTANCES, example_graph, generate_random_graph
from .presenter import build_distance_table_figure, format_distance, present
from .presenter_html import export_distance_tables_html

__all__ = [
    "UNREACHED",
    "InvalidInputError",
    "compute_shortest_paths",
    "compute_shortest_paths_with_order",
    "EXAMPLE_GRAPHS",
    "EXPECTED_DISTANCES",
    "example_graph",
    "generate_random_graph",
    "build_distance_table_figure",
    "format_distance",
    "present",
    "export_distance_tables_html",
]
