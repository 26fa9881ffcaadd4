"""
Tests for the command line interface.
"""

import json

import pytest

from graphsearch.cli import create_parser, main, parse_json_input


@pytest.fixture
def graph_arg(graph_document) -> str:
    return json.dumps(graph_document)


def run(capsys, argv):
    status = main(argv)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_cheapest(capsys, graph_arg):
    status, out, _ = run(capsys, [graph_arg, "cheapest", "SEA", "LAX"])
    assert status == 0
    assert json.loads(out) == {
        "query": "cheapest",
        "from": "SEA",
        "to": "LAX",
        "found": True,
        "path": ["SEA", "PDX", "SFO", "LAX"],
        "hops": 3,
        "weight": 320,
    }


def test_shortest(capsys, graph_arg):
    status, out, _ = run(capsys, [graph_arg, "shortest", "SEA", "LAX"])
    assert status == 0
    result = json.loads(out)
    assert result["path"] == ["SEA", "SFO", "LAX"]
    assert result["weight"] == 390


def test_not_found(capsys, graph_arg):
    status, out, _ = run(capsys, [graph_arg, "shortest", "LAX", "SEA"])
    assert status == 1
    assert json.loads(out) == {"query": "shortest", "from": "LAX", "to": "SEA", "found": False}


def test_reachable(capsys, graph_arg):
    status, out, _ = run(capsys, ["--validate", graph_arg, "reachable", "PDX", "LAX"])
    assert status == 0
    assert json.loads(out)["found"] is True

    status, out, _ = run(capsys, [graph_arg, "reachable", "SEA", "HNL"])
    assert status == 1
    assert json.loads(out)["found"] is False


def test_integer_vertices(capsys):
    document = json.dumps({"edges": [{"from": 1, "to": 2}, {"from": 2, "to": 3}]})
    status, out, _ = run(capsys, [document, "shortest", "1", "3"])
    assert status == 0
    assert json.loads(out)["path"] == [1, 2, 3]


def test_integer_weight_beyond_float_range(capsys):
    huge = 10**400
    document = json.dumps(
        {
            "directed": True,
            "weighted": True,
            "edges": [
                {"from": "A", "to": "B", "weight": huge},
                {"from": "B", "to": "C", "weight": 1},
            ],
        }
    )
    status, out, _ = run(capsys, [document, "cheapest", "A", "C"])
    assert status == 0
    assert json.loads(out)["weight"] == huge + 1


def test_graph_from_file(capsys, tmp_path, monkeypatch, graph_document):
    path = tmp_path / "flights.json"
    path.write_text(json.dumps(graph_document))

    status, out, _ = run(capsys, [f"@{path}", "cheapest", "SEA", "SFO"])
    assert status == 0
    assert json.loads(out)["weight"] == 230

    monkeypatch.chdir(tmp_path)
    status, _, _ = run(capsys, ["@flights.json", "reachable", "SEA", "SFO"])
    assert status == 0


def test_unknown_vertex(capsys, graph_arg):
    status, out, err = run(capsys, [graph_arg, "cheapest", "SEA", "JFK"])
    assert status == 2
    assert out == ""
    assert "End vertex 'JFK' not found" in err


@pytest.mark.parametrize(
    "graph, message",
    [
        ("{broken", "Invalid JSON input"),
        ("@/does/not/exist.json", "File not found"),
        ('{"edges": [{"from": "A", "to": "B", "weight": -2}]}', "edges/0/weight"),
    ],
)
def test_invalid_graph(capsys, graph, message):
    status, _, err = run(capsys, [graph, "shortest", "A", "B"])
    assert status == 2
    assert err.startswith("Error: ")
    assert message in err


def test_invalid_memory_limit(capsys, graph_arg):
    status, _, err = run(capsys, ["--max-memory-mb", "-5", graph_arg, "shortest", "SEA", "LAX"])
    assert status == 2
    assert "max_memory_mb must be positive" in err


def test_missing_command(capsys, graph_arg):
    status, out, _ = run(capsys, [graph_arg])
    assert status == 2
    assert "usage: graphsearch" in out


def test_parser_requires_two_vertices():
    with pytest.raises(SystemExit):
        create_parser().parse_args(["{}", "shortest", "A"])


def test_parse_json_input_bad_file(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[1,")
    with pytest.raises(ValueError, match="Invalid JSON in"):
        parse_json_input(f"@{path}")
