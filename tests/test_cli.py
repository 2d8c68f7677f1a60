"""
Tests for the command line interface.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from runviz import cli


class TestParseExperimentList:
    """Tests for parse_experiment_list."""

    def test_none(self) -> None:
        assert cli.parse_experiment_list(None) is None

    def test_splits_and_strips(self) -> None:
        assert cli.parse_experiment_list(" run1, run2 ,,run3") == ["run1", "run2", "run3"]

    def test_empty_string(self) -> None:
        assert cli.parse_experiment_list("") == []


class TestRunSummary:
    """Tests for the summary subcommand."""

    def test_prints_every_experiment_by_default(self, table_file: Path, capsys) -> None:
        cli.run_summary(str(table_file))

        out = capsys.readouterr().out
        assert "run1" in out
        assert "run2" in out
        assert "run3" in out
        assert "accuracy" in out

    def test_selected_experiments(self, table_file: Path, capsys) -> None:
        cli.run_summary(str(table_file), experiments="run3")

        out = capsys.readouterr().out
        assert "run3" in out
        assert "run1" not in out

    def test_reports_skipped_rows(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "partial.csv"
        path.write_text("experiment_id,metric_name,step,value\nrun1,loss,1,0.5\nrun1,loss\n")

        cli.run_summary(str(path))

        assert "Skipped 1 malformed row(s)" in capsys.readouterr().out

    def test_missing_file_exits(self, tmp_path: Path, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.run_summary(str(tmp_path / "missing.csv"))

        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().out

    def test_bad_table_exits(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.csv"
        path.write_text("a,b,c\n1,2,3\n")

        with pytest.raises(SystemExit) as exc_info:
            cli.run_summary(str(path))

        assert exc_info.value.code == 1


class TestRunTui:
    """Tests for the tui subcommand error handling."""

    def test_missing_file_exits(self, tmp_path: Path, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.run_tui(str(tmp_path / "missing.csv"))

        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().out


class TestRunDashboard:
    """Tests for run_dashboard."""

    @pytest.fixture
    def uvicorn_calls(self, monkeypatch) -> list[tuple[str, dict]]:
        calls: list[tuple[str, dict]] = []
        monkeypatch.setattr(cli.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
        # Registered so monkeypatch restores them after run_dashboard sets them
        monkeypatch.delenv("RUNVIZ_PRELOAD_FILE", raising=False)
        monkeypatch.delenv("RUNVIZ_DEV_MODE", raising=False)
        return calls

    def test_starts_uvicorn(self, uvicorn_calls) -> None:
        cli.run_dashboard(host="0.0.0.0", port=8000)

        assert uvicorn_calls == [("runviz.dashboard.main:app", {"host": "0.0.0.0", "port": 8000, "reload": False})]
        assert "RUNVIZ_PRELOAD_FILE" not in os.environ

    def test_preload_file_and_dev_mode(self, uvicorn_calls, table_file: Path) -> None:
        cli.run_dashboard(file=str(table_file), dev=True)

        assert os.environ["RUNVIZ_PRELOAD_FILE"] == os.path.abspath(table_file)
        assert os.environ["RUNVIZ_DEV_MODE"] == "1"
        assert uvicorn_calls[0][1]["reload"] is True


class TestMain:
    """Tests for argument dispatch in main."""

    def test_summary_command(self, table_file: Path, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.argv", ["runviz", "summary", str(table_file), "--experiments", "run2"])

        cli.main()

        out = capsys.readouterr().out
        assert "run2" in out
        assert "run1" not in out

    def test_serve_command(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(cli, "run_dashboard", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setattr("sys.argv", ["runviz", "serve", "--port", "9000"])

        cli.main()

        assert calls == [{"host": "127.0.0.1", "port": 9000, "file": None, "dev": False}]

    def test_tui_command(self, table_file: Path, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(cli, "run_tui", calls.append)
        monkeypatch.setattr("sys.argv", ["runviz", "tui", str(table_file)])

        cli.main()

        assert calls == [str(table_file)]

    def test_no_command_serves_on_free_port(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(cli, "find_available_port", lambda start_port: 4000)
        monkeypatch.setattr(cli, "run_dashboard", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setattr("sys.argv", ["runviz"])

        cli.main()

        assert calls == [{"port": 4000}]
