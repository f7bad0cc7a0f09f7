"""Console and plotly rendering of distance arrays."""

from typing import Sequence

import numpy as np
import plotly.graph_objects as go


def format_distance(value: float) -> str:
    """Render one distance; integral values drop the trailing ``.0``."""

    value = float(value)
    if value == np.inf:
        return "inf"
    if value.is_integer():
        return str(int(value))
    return f"{value:g}"


def present(distances: Sequence[float], label: str) -> None:
    """In bảng khoảng cách từ nguồn tới từng đỉnh."""
    print(f"\n{'=' * 40}")
    print(f"  {label}")
    print(f"{'=' * 40}")
    print(f"  {'Node':<8} {'Distance':<12}")
    print(f"  {'-' * 20}")
    for node, value in enumerate(distances):
        print(f"  {node:<8} {format_distance(value):<12}")

    n_unreached = int(np.sum(np.asarray(distances, dtype=float) == np.inf))
    if n_unreached:
        print(f"  {'-' * 20}")
        print(f"  Unreached nodes: {n_unreached}")


def build_distance_table_figure(distances: Sequence[float], label: str) -> go.Figure:
    """Two-column plotly table of node index and distance."""

    nodes = list(range(len(distances)))
    values = [format_distance(d) for d in distances]
    fill = ["#fdecea" if v == "inf" else "#ffffff" for v in values]

    fig = go.Figure(
        data=[
            go.Table(
                header=dict(
                    values=["Node", "Distance"],
                    fill_color="#4CAF50",
                    font=dict(color="white", size=14),
                    align="center",
                ),
                cells=dict(
                    values=[nodes, values],
                    fill_color=[fill, fill],
                    align="center",
                    height=28,
                ),
            )
        ]
    )
    fig.update_layout(title=label, margin=dict(l=20, r=20, t=50, b=20))
    return fig
