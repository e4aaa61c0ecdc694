"""Tests for the ``structures_demo`` CLI demonstration script."""

from __future__ import annotations

import json

import pytest

import structures_demo


def test_cli_outputs_expected_demo_lines(capsys: pytest.CaptureFixture[str]) -> None:
    assert structures_demo.main([]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[:5] == [
        "== heap",
        "min heap: [1,3,8,5]",
        "max heap: [8,5,1,3]",
        "extract top: 8",
        "after extract: [5,3,1]",
    ]
    assert "rotation after inserts: Left rotation on node 10" in lines
    assert "after remove 10: [20:1:0,30:2:0,40:1:0,50:0:0]" in lines
    assert "dijkstra 0: [0,1,3,4]" in lines
    assert "prim: [0-1:1,1-2:2,2-3:1]" in lines
    assert "without vertex 1: [[0,5,0],[5,0,1],[0,1,0]]" in lines
    assert "table: [[],[11:20,1:99],[],[-3:5],[],[],[],[],[],[]]" in lines
    assert lines[-1] == "search 7: -1"


def test_cli_single_structure_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert structures_demo.main(["--structure", "graph", "--output-format", "json"]) == 0
    payload = json.loads(capsys.readouterr().out)

    assert list(payload) == ["graph"]
    assert payload["graph"]["bfs 0"] == "[0,1,2,3]"
    assert payload["graph"]["dfs 0"] == "[0,1,2,3]"
    assert payload["graph"]["matrix"] == "[[0,1,5,0],[1,0,2,0],[5,2,0,1],[0,0,1,0]]"


def test_collect_rejects_unknown_structure() -> None:
    with pytest.raises(ValueError):
        structures_demo.collect("trie")


def test_cli_rejects_unknown_choice() -> None:
    with pytest.raises(SystemExit):
        structures_demo.main(["--structure", "trie"])
