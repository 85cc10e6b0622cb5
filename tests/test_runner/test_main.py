"""Tests for the runner entry point."""

import io
import json

from modglobal.runner.__main__ import main


def _run(monkeypatch, capsys, stdin):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    code = main()
    return code, json.loads(capsys.readouterr().out)


def test_success(monkeypatch, capsys):
    script = {
        "config": {"thread_name": "runner-test"},
        "operations": [
            {"op": "set", "namespace": "ns", "key": "k", "value": [1, 2]},
            {"op": "get", "namespace": "ns", "key": "k"},
        ],
    }
    code, output = _run(monkeypatch, capsys, json.dumps(script))

    assert code == 0
    assert output["success"] is True
    assert output["results"][1]["result"] == [1, 2]


def test_invalid_json(monkeypatch, capsys):
    code, output = _run(monkeypatch, capsys, "not json")

    assert code == 1
    assert output["success"] is False
    assert output["error_type"] == "ValidationError"


def test_unknown_operation(monkeypatch, capsys):
    script = {"operations": [{"op": "incr", "namespace": "ns", "key": "k"}]}
    code, output = _run(monkeypatch, capsys, json.dumps(script))

    assert code == 1
    assert output["error_type"] == "ValidationError"
