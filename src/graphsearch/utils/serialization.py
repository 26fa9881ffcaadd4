"""
Graph document serialization.

Graphs are exchanged as JSON documents of the form::

    {
        "directed": true,
        "weighted": true,
        "vertices": ["SEA", "PDX", "SFO"],
        "edges": [
            {"from": "SEA", "to": "PDX", "weight": 120},
            {"from": "PDX", "to": "SFO", "weight": 180}
        ]
    }

``vertices`` lists vertices in addition to the edge endpoints, which is how
isolated vertices are expressed. Vertex identities are strings or integers.
Documents are checked against ``GRAPH_SCHEMA`` before any graph is built.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from ..core.config import SearchConfig
from ..core.exceptions import InvalidArgumentError, ValidationError
from ..core.graph.base import BaseGraph
from ..core.graph.searchable import SearchableGraph

logger = logging.getLogger(__name__)

VERTEX_SCHEMA: Dict[str, Any] = {"type": ["string", "integer"]}

GRAPH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "directed": {"type": "boolean"},
        "weighted": {"type": "boolean"},
        "vertices": {"type": "array", "items": VERTEX_SCHEMA},
        "edges": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "from": VERTEX_SCHEMA,
                    "to": VERTEX_SCHEMA,
                    "weight": {"type": "number", "minimum": 0},
                },
                "required": ["from", "to"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["edges"],
    "additionalProperties": False,
}


def validate_document(data: Any) -> None:
    """
    Validate a graph document against ``GRAPH_SCHEMA``.

    Raises:
        ValidationError: If the document does not match the schema
    """
    try:
        json_validate(instance=data, schema=GRAPH_SCHEMA)
    except JsonSchemaError as e:
        location = "/".join(str(part) for part in e.absolute_path) or "<root>"
        raise ValidationError(f"Invalid graph document at {location}: {e.message}")


def load_graph(data: Dict[str, Any], config: Optional[SearchConfig] = None) -> SearchableGraph:
    """
    Build a searchable graph from a graph document.

    Args:
        data: Parsed JSON graph document
        config: Search configuration for the returned graph

    Returns:
        SearchableGraph: Graph over a new ``BaseGraph``

    Raises:
        ValidationError: If the document is malformed, including weights that
            do not match the ``weighted`` flag
    """
    validate_document(data)

    storage = BaseGraph(
        directed=data.get("directed", False),
        weighted=data.get("weighted", False),
    )
    storage.add_vertices(data.get("vertices", []))
    for index, edge in enumerate(data["edges"]):
        try:
            storage.add_edge(edge["from"], edge["to"], edge.get("weight"))
        except InvalidArgumentError as e:
            raise ValidationError(f"Invalid graph document at edges/{index}: {e.args[0]}")

    logger.debug(
        "Loaded graph with %d vertices and %d edges",
        storage.get_vertex_count(),
        storage.get_edge_count(),
    )
    return SearchableGraph(storage, config=config)


def load_graph_file(path: Union[str, Path], config: Optional[SearchConfig] = None) -> SearchableGraph:
    """
    Load a graph document from a JSON file.

    Raises:
        ValidationError: If the file is not valid JSON or not a valid document
    """
    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON in {path}: {e}")
    return load_graph(data, config)


def dump_graph(graph: Union[BaseGraph, SearchableGraph]) -> Dict[str, Any]:
    """
    Convert a graph to a graph document.

    Every vertex is listed under ``vertices`` so isolated ones survive a
    round trip; weights are only written for weighted graphs.
    """
    storage = graph.storage if isinstance(graph, SearchableGraph) else graph
    if not isinstance(storage, BaseGraph):
        raise InvalidArgumentError(f"Cannot serialize {type(storage).__name__} storage")

    edges = []
    for from_vertex, to_vertex, weight in storage.get_edges():
        edge: Dict[str, Any] = {"from": from_vertex, "to": to_vertex}
        if storage.weighted:
            edge["weight"] = weight
        edges.append(edge)

    return {
        "directed": storage.directed,
        "weighted": storage.weighted,
        "vertices": storage.get_vertices(),
        "edges": edges,
    }
