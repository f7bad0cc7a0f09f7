"""Validation and conversion of caller matrices into dense weight matrices."""

import numbers

import numpy as np


class InvalidInputError(ValueError):
    """Raised when a graph matrix or source index cannot be used."""


def _check_rows(graph) -> int:
    try:
        n_nodes = len(graph)
    except TypeError:
        raise InvalidInputError(f"graph is not a sequence of rows: {graph!r}") from None
    if n_nodes == 0:
        raise InvalidInputError("graph must have at least one node")

    for i in range(n_nodes):
        row = graph[i]
        try:
            row_len = len(row)
        except TypeError:
            raise InvalidInputError(f"row {i} is not a sequence") from None
        if row_len != n_nodes:
            raise InvalidInputError(
                f"graph must be square: row {i} has {row_len} entries, expected {n_nodes}"
            )

    return n_nodes


def _weights_from_array(adjacency: np.ndarray, zero_means_no_edge: bool) -> np.ndarray:
    """Vectorised conversion for 2-D numeric arrays."""

    n_nodes = adjacency.shape[0]
    if n_nodes == 0:
        raise InvalidInputError("graph must have at least one node")
    if adjacency.shape[1] != n_nodes:
        raise InvalidInputError(f"graph must be square, got shape {adjacency.shape}")

    weights = adjacency.astype(np.float64)

    bad = np.argwhere(np.isnan(weights))
    if bad.size:
        i, j = bad[0]
        raise InvalidInputError(f"cell ({i}, {j}) is NaN")
    bad = np.argwhere(weights < 0.0)
    if bad.size:
        i, j = bad[0]
        raise InvalidInputError(f"cell ({i}, {j}) has negative weight {weights[i, j]}")

    if zero_means_no_edge:
        weights[weights == 0.0] = np.inf
    np.fill_diagonal(weights, np.inf)
    return weights


def build_weight_matrix(graph, zero_means_no_edge: bool = True) -> np.ndarray:
    """
    Convert an adjacency matrix into a float64 matrix where absent edges are np.inf.

    Args:
        graph: n x n sequence of sequences (or 2-D array) of non-negative weights.
            None and inf cells never denote an edge.
        zero_means_no_edge: treat 0 as "no edge" (legacy encoding). When False,
            a 0 cell is a real zero-weight edge.

    Returns:
        New array; the caller's matrix is never modified. The diagonal is set to
        np.inf since a self loop cannot shorten any path.
    """

    if isinstance(graph, np.ndarray) and graph.ndim != 2:
        raise InvalidInputError(f"graph must be 2-dimensional, got {graph.ndim} dimensions")

    if isinstance(graph, np.ndarray) and graph.dtype.kind in "iuf":
        return _weights_from_array(graph, zero_means_no_edge)

    n_nodes = _check_rows(graph)
    weights = np.empty((n_nodes, n_nodes), dtype=np.float64)

    for i in range(n_nodes):
        row = graph[i]
        for j in range(n_nodes):
            value = row[j]
            if value is None:
                weights[i, j] = np.inf
                continue
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
                raise InvalidInputError(f"cell ({i}, {j}) is not a number: {value!r}")
            weight = float(value)
            if np.isnan(weight):
                raise InvalidInputError(f"cell ({i}, {j}) is NaN")
            if weight < 0.0:
                raise InvalidInputError(f"cell ({i}, {j}) has negative weight {weight}")
            if weight == 0.0 and zero_means_no_edge:
                weight = np.inf
            weights[i, j] = weight

    np.fill_diagonal(weights, np.inf)
    return weights


def validate_source(source, n_nodes: int) -> int:
    """Return source as a plain int, or raise InvalidInputError if it is not a node index."""

    if isinstance(source, (bool, np.bool_)) or not isinstance(source, numbers.Integral):
        raise InvalidInputError(f"source must be an integer node index, got {source!r}")
    source = int(source)
    if source < 0 or source >= n_nodes:
        raise InvalidInputError(f"source {source} out of range for graph with {n_nodes} nodes")
    return source
