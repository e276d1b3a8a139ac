"""Tests for CLI functionality."""

import json
from unittest.mock import patch

import pytest

from ai_footprint import cli
from ai_footprint.green_hosting import GreenCheckResult


@pytest.fixture(autouse=True)
def _no_stdin(monkeypatch):
    monkeypatch.setattr(cli, "_read_stdin", lambda: None)


@pytest.fixture
def scenario_file(tmp_path, scenario):
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(scenario), encoding="utf-8")
    return path


def test_cli_main_no_args(capsys):
    """The CLI needs a scenario from --input or stdin."""
    assert cli.main([]) == 1
    assert "No input provided" in capsys.readouterr().err


def test_cli_main_help(capsys):
    assert cli.main(["--help"]) == 0
    assert "usage:" in capsys.readouterr().out.lower()


def test_cli_invalid_args():
    assert cli.main(["--version"]) == 1


def test_cli_list(capsys):
    assert cli.main(["--list"]) == 0
    listing = json.loads(capsys.readouterr().out)
    assert "GPT-3" in listing["models"]
    assert "West Europe" in listing["providers"]["Microsoft"]
    assert "text-generation" in listing["tasks"]
    assert listing["devices"] == ["smartphone", "laptop", "desktop", "tablet"]


def test_cli_estimates_input_file(capsys, scenario_file):
    assert cli.main(["--input", str(scenario_file)]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["schema_version"] == "1.0.0"
    assert report["label"] == "G"
    assert report["phases"]["hosting"]["operational_kg"] == pytest.approx(80.0)
    assert report["green_hosting"] is None


def test_cli_reads_stdin(capsys, monkeypatch, scenario):
    monkeypatch.setattr(cli, "_read_stdin", lambda: json.dumps(scenario))
    assert cli.main([]) == 0
    assert json.loads(capsys.readouterr().out)["total_kg"] > 0


def test_cli_writes_output_file(capsys, tmp_path, scenario_file):
    target = tmp_path / "out" / "report.json"
    target.parent.mkdir()
    assert cli.main(["-i", str(scenario_file), "-o", str(target)]) == 0
    assert capsys.readouterr().out == ""
    assert json.loads(target.read_text(encoding="utf-8"))["kind"] == "ai_footprint"


def test_cli_quiet(capsys, scenario_file):
    assert cli.main(["-q", "-i", str(scenario_file)]) == 0
    assert capsys.readouterr().out == ""


def test_cli_bad_scenario(capsys, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert cli.main(["--input", str(path)]) == 1
    assert "mapping" in capsys.readouterr().err


def test_cli_check_green(capsys, scenario_file):
    verdict = GreenCheckResult(url="https://chat.gemeente.example", green=True, hosted_by="Azure")
    with patch("ai_footprint.cli.GreenHostingClient") as mock_cls:
        mock_cls.return_value.check.return_value = verdict
        assert cli.main(["--check-green", "-i", str(scenario_file)]) == 0
    mock_cls.return_value.check.assert_called_once_with("https://chat.gemeente.example")
    report = json.loads(capsys.readouterr().out)
    assert report["green_hosting"] == verdict.to_dict()


def test_cli_check_green_failure_is_advisory(capsys, scenario_file):
    with patch("ai_footprint.cli.GreenHostingClient") as mock_cls:
        mock_cls.return_value.check.return_value = None
        assert cli.main(["--check-green", "-i", str(scenario_file)]) == 0
    assert json.loads(capsys.readouterr().out)["green_hosting"] is None


def test_cli_json_logs(capsys, scenario_file):
    assert cli.main(["-i", str(scenario_file), "--log-level", "INFO", "--log-format", "json"]) == 0
    err_lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    records = [json.loads(line) for line in err_lines]
    assert any(record["message"] == "Footprint estimated" for record in records)


def test_cli_accepts_oversized_numbers(capsys, tmp_path):
    path = tmp_path / "huge.json"
    path.write_text(
        '{"inference": {"inferencesPerYear": ' + "9" * 400 + ', "inferenceDuration": 5}}',
        encoding="utf-8",
    )
    assert cli.main(["--input", str(path)]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["per_inference_g"] is None
    assert report["inputs"]["inference"]["inferences_per_year"] == 0.0
