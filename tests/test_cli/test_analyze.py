"""Tests for the analysis command line."""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "cli"))

from analyze import main


def write_log(log, path):
    """Write an in-memory log back to CSV."""
    lines = [",".join(log.header)]
    lines += [",".join(row) for row in log.data.values.tolist()]
    path.write_text("\n".join(lines) + "\n")
    return path


def run(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["analyze.py", *args])
    return main()


def test_stats_report(monkeypatch, capsys, tmp_path, make_stats_log, profile):
    path = write_log(make_stats_log(profile), tmp_path / "log.csv")

    assert run(monkeypatch, "--log", str(path)) == 0

    out = capsys.readouterr().out
    assert f"Processados {len(profile)} pontos de dados" in out
    assert "0-60 mph (s): 6.000" in out
    assert "Velocidade máxima (mph): 160.00" in out


def test_stats_json(monkeypatch, capsys, tmp_path, make_stats_log, profile):
    path = write_log(make_stats_log(profile), tmp_path / "log.csv")

    assert run(monkeypatch, "--log", str(path), "--json") == 0

    captured = capsys.readouterr()
    result = json.loads(captured.out)
    assert result["stats"][:2] == ["800", "AWD"]
    assert result["leaderboard"] is None
    assert f"Processados {len(profile)} pontos de dados" in captured.err


def test_leaderboard_with_catalog(monkeypatch, capsys, tmp_path, make_stats_log, profile):
    path = write_log(make_stats_log(profile), tmp_path / "log.csv")
    catalog = tmp_path / "ordinals.csv"
    catalog.write_text("2352,Ford,GT,2017,USA,Hypercar,Modern Supercar,RWD,Mid,V6,Twin Turbo,3.5L,1000000\n")

    assert run(monkeypatch, "--log", str(path), "--catalog", str(catalog), "--json") == 0

    row = json.loads(capsys.readouterr().out)["leaderboard"]
    assert row[0] == "Ford GT"
    assert len(row) == 29


def test_race_json(monkeypatch, capsys, tmp_path, make_race_log):
    path = write_log(make_race_log(), tmp_path / "race.csv")

    assert run(monkeypatch, "--log", str(path), "--race", "--json") == 0

    best_lap, top_speed, sectors = json.loads(capsys.readouterr().out)
    assert best_lap == "01:32.250"
    assert top_speed == "109.50"
    assert sectors[0] == "00:00:29.000"


def test_ordinals_json(monkeypatch, capsys, tmp_path, make_stats_log):
    log = make_stats_log([0.0] * 4, ordinals=["12", "12", "40", "12"])
    path = write_log(log, tmp_path / "log.csv")

    assert run(monkeypatch, "--log", str(path), "--ordinals", "--json") == 0

    assert json.loads(capsys.readouterr().out) == [["12"], ["40"], ["12"]]


def test_missing_log_fails_without_partial_output(monkeypatch, capsys, tmp_path):
    assert run(monkeypatch, "--log", str(tmp_path / "missing.csv")) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "missing.csv" in captured.err


def test_missing_column_fails(monkeypatch, capsys, tmp_path):
    path = tmp_path / "log.csv"
    path.write_text("TimestampMS,Gear\n0,1\n")

    assert run(monkeypatch, "--log", str(path)) == 1

    assert "Speed" in capsys.readouterr().err


def test_race_and_ordinals_are_exclusive(monkeypatch):
    with pytest.raises(SystemExit):
        run(monkeypatch, "--race", "--ordinals")
