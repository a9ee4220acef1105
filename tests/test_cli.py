"""
CLI Tests
=========
`dp-engine` subcommands print JSON and map invalid input to exit code 2.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from dp_engine.cli import EXIT_INVALID_INPUT, EXIT_OK, main

REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("DP_ENGINE_FIBONACCI_MAX_N", "DP_ENGINE_MAX_CAPACITY", "DP_ENGINE_MAX_TARGET"):
        monkeypatch.delenv(key, raising=False)


def run(capsys, argv):
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured


class TestCommands:

    def test_fib(self, capsys):
        code, out = run(capsys, ["fib", "6", "--curve"])
        assert code == EXIT_OK
        data = json.loads(out.out)
        assert data["value"] == 8
        assert len(data["trace"]) == 11
        assert data["curve"][-1] == {"x": 6, "y": 8}

    def test_knapsack_defaults(self, capsys):
        code, out = run(capsys, ["knapsack", "--capacity", "10"])
        assert code == EXIT_OK
        data = json.loads(out.out)
        assert data["max_value"] == 175
        assert "table" not in data
        assert len(data["items"]) == 8

    def test_knapsack_items_file(self, capsys, tmp_path):
        path = tmp_path / "items.json"
        path.write_text(json.dumps([
            {"id": 1, "name": "a", "weight": 3, "value": 4},
            {"id": 2, "name": "b", "weight": 5, "value": 6},
        ]), encoding="utf-8")
        code, out = run(capsys, ["knapsack", "--capacity", "8", "--items", str(path), "--table"])
        assert code == EXIT_OK
        data = json.loads(out.out)
        assert data["max_value"] == 10
        assert data["utilization"] == 100.0
        assert len(data["table"]) == 3

    def test_lcs(self, capsys):
        code, out = run(capsys, ["lcs"])
        assert code == EXIT_OK
        assert json.loads(out.out)["lcs"] == "GTAB"

    def test_coins(self, capsys):
        code, out = run(capsys, ["coins", "23"])
        assert code == EXIT_OK
        data = json.loads(out.out)
        assert data["min_coins"] == 5
        assert data["counts"] == {"1": 3, "5": 0, "10": 2, "25": 0}

    def test_coins_unreachable_is_not_an_error(self, capsys):
        code, out = run(capsys, ["coins", "3", "--coins", "5"])
        assert code == EXIT_OK
        assert json.loads(out.out)["min_coins"] is None


class TestErrors:

    def test_bad_env_override_is_invalid_input(self, capsys, monkeypatch):
        monkeypatch.setenv("DP_ENGINE_MAX_TARGET", "lots")
        code, out = run(capsys, ["coins", "23"])
        assert code == EXIT_INVALID_INPUT
        assert "DP_ENGINE_MAX_TARGET must be an integer" in out.err
        assert out.out == ""

    def test_bad_env_override_subprocess(self):
        env = dict(os.environ, DP_ENGINE_MAX_TARGET="lots")
        proc = subprocess.run(
            [sys.executable, "-m", "dp_engine", "coins", "23"],
            cwd=REPO_ROOT,
            env=env,
            capture_output=True,
            text=True,
        )
        assert proc.returncode == EXIT_INVALID_INPUT
        assert "Traceback" not in proc.stderr
        assert "DP_ENGINE_MAX_TARGET" in proc.stderr

    def test_fib_out_of_range(self, capsys):
        code, out = run(capsys, ["fib", "31"])
        assert code == EXIT_INVALID_INPUT
        assert "n must be <= 30" in out.err
        assert out.out == ""

    def test_bad_items_file(self, capsys, tmp_path):
        path = tmp_path / "items.json"
        path.write_text("{not json", encoding="utf-8")
        code, out = run(capsys, ["knapsack", "--items", str(path)])
        assert code == EXIT_INVALID_INPUT
        assert "cannot read items" in out.err

    def test_missing_subcommand(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 2
