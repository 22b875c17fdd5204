"""
Reading graphs from the edge-list text format and rendering adjacency dumps.

Input format, whitespace separated integers:
    vertex_count edge_count [weighted_flag]      (first non-empty line)
    source destination [weight]                  (edge_count times)

A weighted_flag of 0, or no flag at all, means unweighted; weights are then
absent from the edge tuples. Edge tuples may be split across or share lines.
"""

import logging
import os

from graphs.core import Graph, directed_graph, undirected_graph
from graphs.types import EdgeInput

logger = logging.getLogger(__name__)


class GraphFormatError(ValueError):
    """The text does not describe a graph in the edge-list format."""


def _integers(tokens: list[str], where: str) -> list[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError as error:
        raise GraphFormatError(f"Non-integer token in {where}: {error}") from error


def parse_graph(text: str, directed: bool = False) -> Graph:
    """
    Parse the edge-list format.

    Args:
        text: Whole input, header line first.
        directed: Build a directed graph instead of an undirected one.

    Returns:
        The graph, with edges in input order.

    Raises:
        GraphFormatError: If the header is malformed, a token is not an
            integer, the edge token count does not match the header, or an
            edge names a vertex outside the graph.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise GraphFormatError("Empty input: expected 'vertex_count edge_count [weighted]'")

    header = _integers(lines[0].split(), "header")
    if len(header) not in (2, 3):
        raise GraphFormatError(
            f"Header must hold 2 or 3 integers, got {len(header)}: {lines[0]!r}"
        )
    vertex_count, edge_count = header[0], header[1]
    weighted = len(header) == 3 and header[2] != 0
    if vertex_count < 0 or edge_count < 0:
        raise GraphFormatError(f"Negative count in header: {lines[0]!r}")

    values = _integers([token for line in lines[1:] for token in line.split()], "edges")
    arity = 3 if weighted else 2
    if len(values) != arity * edge_count:
        raise GraphFormatError(
            f"Expected {edge_count} edges of {arity} integers "
            f"({arity * edge_count} tokens), got {len(values)} tokens"
        )

    edges: list[EdgeInput] = [
        tuple(values[index : index + arity])  # type: ignore[misc]
        for index in range(0, len(values), arity)
    ]
    logger.debug(
        f"Parsed header: {vertex_count} vertices, {edge_count} edges, "
        f"{'weighted' if weighted else 'unweighted'}"
    )

    build = directed_graph if directed else undirected_graph
    try:
        return build(vertex_count, edges, weighted=weighted)
    except ValueError as error:
        raise GraphFormatError(str(error)) from error


def read_graph(path: str | os.PathLike[str], directed: bool = False) -> Graph:
    """Read and parse an edge-list file."""
    with open(path, "r") as file:
        text = file.read()
    logger.debug(f"Read {len(text)} characters from {path}")
    return parse_graph(text, directed=directed)


def format_adjacency(graph: Graph) -> str:
    """
    Diagnostic rendering, one line per vertex in increasing order.

    Unweighted graphs render as "i | n1, n2", weighted ones as
    "i | n1 - w1, n2 - w2".
    """
    lines = []
    for vertex, neighbors in enumerate(graph.adjacency):
        if graph.weighted:
            entries = ", ".join(f"{neighbor} - {weight}" for neighbor, weight in neighbors)
        else:
            entries = ", ".join(str(neighbor) for neighbor, _ in neighbors)
        lines.append(f"{vertex} | {entries}".rstrip())
    return "\n".join(lines)


__all__ = ["GraphFormatError", "format_adjacency", "parse_graph", "read_graph"]
