"""CLI tests using saved query results."""

import json

import pytest

from org_graph import cli


def test_offline_build_writes_graph(tmp_path, farm_records, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    circles, people = farm_records
    circles_path = tmp_path / "circles.json"
    people_path = tmp_path / "people.json"
    circles_path.write_text(json.dumps({"results": circles}), encoding="utf-8")
    people_path.write_text(json.dumps(people), encoding="utf-8")
    output_path = tmp_path / "out" / "graph.json"

    exit_code = cli.main(
        [
            "build",
            "--circles-json",
            str(circles_path),
            "--people-json",
            str(people_path),
            "--output-path",
            str(output_path),
        ]
    )

    assert exit_code == 0
    graph = json.loads(output_path.read_text(encoding="utf-8"))
    assert graph["meta"]["circleCount"] == 3
    assert graph["meta"]["edgeCount"] == 7
    assert "circles=3 people=3 edges=7" in capsys.readouterr().out


def test_load_records_rejects_other_payloads(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps("nope"), encoding="utf-8")
    with pytest.raises(ValueError, match="expected a list"):
        cli.load_records(str(path))


def test_command_is_required():
    with pytest.raises(SystemExit):
        cli.parse_args([])


def test_serve_defaults():
    args = cli.parse_args(["serve"])
    assert args.host == "0.0.0.0"
    assert args.port is None
