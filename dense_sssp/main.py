"""Main entry point: run the reference graphs through the shortest-path engine."""

import os
import sys
from typing import Optional

import numpy as np

from .algorithms import compute_shortest_paths
from .examples import EXAMPLE_GRAPHS, EXPECTED_DISTANCES
from .presenter import build_distance_table_figure, present
from .presenter_html import export_distance_tables_html


def main(output_path: Optional[str] = None) -> dict:
    # ============================================================
    # 1. Parameters
    # ============================================================
    source = 0
    labels = {
        "example1": "Example1",
        "example2": "Example2",
        "example3": "Example3",
    }

    # ============================================================
    # 2. Compute distances
    # ============================================================
    print("=== Computing Shortest Paths ===")
    results = {}
    for name, matrix in EXAMPLE_GRAPHS.items():
        distances = compute_shortest_paths(matrix, source)
        expected = np.asarray(EXPECTED_DISTANCES[name], dtype=float)
        if not np.array_equal(distances, expected):
            raise RuntimeError(
                f"{name}: got {distances.tolist()}, expected {expected.tolist()}"
            )
        results[name] = distances
        present(distances, labels[name])

    # ============================================================
    # 3. Export tables
    # ============================================================
    if output_path is not None:
        print("\n=== Building Tables ===")
        tables = [
            (labels[name], build_distance_table_figure(distances, labels[name]))
            for name, distances in results.items()
        ]
        export_distance_tables_html(
            tables,
            output_path,
            title=f"Dijkstra: distances from node {source}",
        )

    return results


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else os.path.join(os.getcwd(), "results.html"))
