"""
Command line entry point.

    graphs toposort FILE            - Topological order of a directed graph
    graphs dump FILE [--directed]   - Adjacency dump
    graphs report FILE [--directed] - Degrees and structural properties
"""

import argparse
import logging
import pathlib

from graphs.components import (
    connected_components,
    is_connected,
    is_strongly_connected,
    topological_sort,
)
from graphs.constants import LOG_FORMAT
from graphs.core import Graph
from graphs.degree import density, max_degree, min_degree
from graphs.io import GraphFormatError, format_adjacency, read_graph
from graphs.lowlink import (
    articulation_points,
    is_biconnected,
    strongly_connected_components,
)
from graphs.properties import (
    is_bipartite,
    is_complete,
    is_eulerian,
    is_hamiltonian,
    is_regular,
)
from graphs.spanning import minimum_spanning_tree

logger = logging.getLogger(__name__)


def _setup_logging(debug: bool, quiet: bool) -> None:
    if quiet:
        level = logging.WARNING
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


def _load(parser: argparse.ArgumentParser, path: pathlib.Path, directed: bool) -> Graph:
    try:
        graph = read_graph(path, directed=directed)
    except OSError as error:
        parser.error(f"cannot read {path}: {error.strerror}")
    except GraphFormatError as error:
        parser.error(f"invalid graph file {path}: {error}")
    logger.info(
        f"Loaded {path.name}: {graph.vertex_count} vertices, {graph.edge_count} edges"
    )
    return graph


def toposort(graph: Graph) -> None:
    for vertex in topological_sort(graph):
        print(vertex)


def dump(graph: Graph) -> None:
    print(format_adjacency(graph))


def _report_lines(graph: Graph) -> list[tuple[str, object]]:
    rows: list[tuple[str, object]] = [
        ("vertices", graph.vertex_count),
        ("edges", graph.edge_count),
        ("weighted", graph.weighted),
        ("density", f"{density(graph):.3f}"),
        ("min degree", min_degree(graph)),
        ("max degree", max_degree(graph)),
        ("complete", is_complete(graph)),
        ("regular", is_regular(graph)),
    ]
    if graph.directed:
        rows += [
            ("strongly connected", is_strongly_connected(graph)),
            (
                "strongly connected components",
                len(strongly_connected_components(graph)),
            ),
        ]
        return rows

    rows += [
        ("connected", is_connected(graph)),
        ("components", len(connected_components(graph))),
        ("bipartite", is_bipartite(graph)),
        ("eulerian", is_eulerian(graph)),
        ("hamiltonian (Dirac)", is_hamiltonian(graph)),
        ("biconnected", is_biconnected(graph)),
        ("articulation points", list(articulation_points(graph))),
        ("spanning tree cost", minimum_spanning_tree(graph).cost),
    ]
    return rows


def report(graph: Graph) -> None:
    """Print degree statistics and the structural properties of the graph's kind."""
    rows = _report_lines(graph)
    width = max(len(name) for name, _ in rows)
    for name, value in rows:
        print(f"{name:<{width}} : {value}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphs", description="Classical graph algorithms over edge-list files"
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--debug", action="store_true", help="Enable debug logging")
    verbosity.add_argument(
        "--quiet", "-q", action="store_true", help="Only log warnings and errors"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    toposort_parser = commands.add_parser(
        "toposort", help="Topological order of a directed acyclic graph"
    )
    toposort_parser.add_argument("path", type=pathlib.Path, help="Edge-list file")
    toposort_parser.set_defaults(handler=toposort, directed=True)

    for name, handler, help_text in (
        ("dump", dump, "Adjacency list of every vertex"),
        ("report", report, "Degree statistics and structural properties"),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("path", type=pathlib.Path, help="Edge-list file")
        command.add_argument(
            "--directed", "-d", action="store_true", help="Read the edges as directed"
        )
        command.set_defaults(handler=handler)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.debug, args.quiet)

    graph = _load(parser, args.path, args.directed)
    args.handler(graph)


if __name__ == "__main__":
    main()
