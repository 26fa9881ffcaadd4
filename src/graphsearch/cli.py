"""Command Line Interface for graph search queries.

This module provides a CLI that loads a graph document and answers one query
against it. The graph is given either as a direct JSON string or as a file path
prefixed with '@' (absolute, or relative to the current directory).

The CLI supports the following commands:
    - reachable: Report whether the end vertex can be reached
    - shortest: Find a path with the fewest edges
    - cheapest: Find a path with the lowest total weight

Results are printed as a JSON object. The exit status is 0 when a path exists,
1 when it does not, and 2 on invalid input.

Example Usage:
    graphsearch @data/flights.json cheapest SEA MIA
    python -m graphsearch '{"edges": [{"from": "A", "to": "B"}]}' shortest A B
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from graphsearch.core.config import SearchConfig
from graphsearch.core.exceptions import ConfigurationError, ValidationError
from graphsearch.core.graph.searchable import SearchableGraph
from graphsearch.utils.serialization import load_graph

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2


def parse_json_input(json_str: str) -> Any:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.

    Returns:
        Parsed JSON data.

    Raises:
        ValueError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")

        with open(file_path, "r") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {file_path}: {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}")


def resolve_vertex(graph: SearchableGraph, name: str) -> Any:
    """Map a command-line vertex name to a vertex of the graph.

    Vertex names always arrive as strings; a name that is not a vertex but
    parses as an integer vertex is mapped to that integer.
    """
    if graph.has_vertex(name):
        return name
    try:
        number = int(name)
    except ValueError:
        return name
    return number if graph.has_vertex(number) else name


def run_query(graph: SearchableGraph, command: str, start: Any, end: Any) -> Dict[str, Any]:
    """Run one query and describe its outcome.

    Returns:
        Dict[str, Any]: JSON-serializable result with a boolean ``found`` key
    """
    if command == "reachable":
        reachable = graph.is_reachable(start, end)
        return {"query": command, "from": start, "to": end, "found": reachable}

    if command == "shortest":
        result = graph.find_shortest_path(start, end)
    else:
        result = graph.find_minimum_weight_path(start, end)

    output: Dict[str, Any] = {"query": command, "from": start, "to": end, "found": result is not None}
    if result is not None:
        output["path"] = result.vertices
        output["hops"] = result.length
        output["weight"] = result.total_weight
    return output


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(
        prog="graphsearch", description="Reachability and path queries over a graph"
    )
    parser.add_argument("graph", help="JSON string or @filename containing the graph document")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--max-memory-mb", type=float, default=None, help="Abort queries above this memory growth"
    )
    parser.add_argument(
        "--validate", action="store_true", help="Validate found paths against the graph"
    )
    parser.add_argument("--timings", action="store_true", help="Log query durations")

    subparsers = parser.add_subparsers(dest="command", help="Commands")
    for name, help_text in (
        ("reachable", "Check whether TO can be reached from FROM"),
        ("shortest", "Find a path with the fewest edges"),
        ("cheapest", "Find a path with the lowest total weight"),
    ):
        query = subparsers.add_parser(name, help=help_text)
        query.add_argument("start", metavar="FROM", help="Start vertex")
        query.add_argument("end", metavar="TO", help="End vertex")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Process exit status
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if not args.command:
        parser.print_help()
        return EXIT_INVALID

    try:
        config = SearchConfig(
            max_memory_mb=args.max_memory_mb,
            validate_results=args.validate,
            log_timings=args.timings,
        )
        graph = load_graph(parse_json_input(args.graph), config)
        start = resolve_vertex(graph, args.start)
        end = resolve_vertex(graph, args.end)
        output = run_query(graph, args.command, start, end)
    except (ConfigurationError, ValidationError, ValueError) as e:
        logger.debug("Query failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID

    print(json.dumps(output))
    if graph.last_metrics is not None:
        logger.debug("Metrics: %s", graph.last_metrics.to_dict())
    return EXIT_FOUND if output["found"] else EXIT_NOT_FOUND


if __name__ == "__main__":
    sys.exit(main())
