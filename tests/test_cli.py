"""CLI tests."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from floatsize import __version__
from floatsize.dispatch import LoggingDispatcher, ZellijDispatcher
from floatsize.config.ui_config import get_theme
from floatsize.main import app

from factories import snapshot_document

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_ui_config(tmp_path, monkeypatch):
    monkeypatch.setattr(
        "floatsize.config.ui_config.get_ui_config_path",
        lambda: tmp_path / "ui_config.json",
    )


class TestCLIBasics:
    def test_cli_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Usage:" in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_env_lists_variables(self):
        result = runner.invoke(app, ["env"])
        assert result.exit_code == 0
        assert "FLOATSIZE_SNAPSHOT" in result.stdout


class TestPanesCommand:
    def test_json_output(self, snapshot_file):
        result = runner.invoke(app, ["panes", "--snapshot", str(snapshot_file), "--json"])
        assert result.exit_code == 0
        rows = json.loads(result.stdout)
        assert [(row["key"], row["pane_ref"]) for row in rows] == [(1, "terminal_2"), (2, "plugin_7")]
        assert rows[1]["tab"] == "logs"

    def test_table_output(self, snapshot_file):
        result = runner.invoke(app, ["panes", "--snapshot", str(snapshot_file)])
        assert result.exit_code == 0
        assert "htop" in result.stdout
        assert "strider" in result.stdout
        assert "not mine" not in result.stdout

    def test_bracketed_names_print_literally(self, tmp_path):
        document = snapshot_document()
        main = document["sessions"][1]
        main["panes"]["0"][1]["title"] = "vim [/tmp]"
        main["tabs"][1]["name"] = "log [/]"
        path = tmp_path / "brackets.json"
        path.write_text(json.dumps(document))

        result = runner.invoke(app, ["panes", "--snapshot", str(path)])
        assert result.exit_code == 0
        assert "vim [/tmp]" in result.stdout
        assert "log [/]" in result.stdout

    def test_no_floating_panes(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps([{"is_current_session": True, "tabs": [], "panes": {}}]))
        result = runner.invoke(app, ["panes", "--snapshot", str(path)])
        assert result.exit_code == 0
        assert "No floating panes" in result.stdout

    def test_missing_file_fails(self, tmp_path):
        result = runner.invoke(app, ["panes", "--snapshot", str(tmp_path / "absent.json")])
        assert result.exit_code == 1

    def test_no_current_session_fails(self, tmp_path):
        path = tmp_path / "nocurrent.json"
        path.write_text(json.dumps([{"is_current_session": False}]))
        result = runner.invoke(app, ["panes", "--snapshot", str(path)])
        assert result.exit_code == 1
        assert "No current session" in result.stdout


class TestRunCommand:
    @patch("floatsize.main.setup_logging")
    @patch("floatsize.ui.app.FloatsizeApp.run")
    def test_dry_run_uses_logging_dispatcher(self, mock_run, _mock_logging, snapshot_file):
        with patch("floatsize.ui.app.FloatsizeApp.__init__", return_value=None) as mock_init:
            result = runner.invoke(
                app, ["run", "--snapshot", str(snapshot_file), "--dry-run", "--poll", "0.5"]
            )
        assert result.exit_code == 0
        source, dispatcher = mock_init.call_args.args
        assert source.path == snapshot_file
        assert isinstance(dispatcher, LoggingDispatcher)
        assert mock_init.call_args.kwargs["poll_interval"] == 0.5
        mock_run.assert_called_once()

    @patch("floatsize.main.setup_logging")
    @patch("floatsize.ui.app.FloatsizeApp.run")
    def test_default_dispatcher_is_zellij(self, mock_run, _mock_logging, snapshot_file, monkeypatch):
        monkeypatch.delenv("FLOATSIZE_DISPATCHER", raising=False)
        with patch("floatsize.ui.app.FloatsizeApp.__init__", return_value=None) as mock_init:
            result = runner.invoke(app, ["run", "--snapshot", str(snapshot_file)])
        assert result.exit_code == 0
        assert isinstance(mock_init.call_args.args[1], ZellijDispatcher)

    @patch("floatsize.main.setup_logging")
    def test_invalid_env_fails_cleanly(self, _mock_logging, snapshot_file, monkeypatch):
        monkeypatch.setenv("FLOATSIZE_DISPATCHER", "tmux")
        result = runner.invoke(app, ["run", "--snapshot", str(snapshot_file)])
        assert result.exit_code == 1
        assert "FLOATSIZE_DISPATCHER" in result.stdout

    @patch("floatsize.main.setup_logging")
    @patch("floatsize.ui.app.FloatsizeApp.run")
    def test_save_theme_persists_choice(self, _mock_run, _mock_logging, snapshot_file):
        with patch("floatsize.ui.app.FloatsizeApp.__init__", return_value=None) as mock_init:
            result = runner.invoke(
                app,
                ["run", "--snapshot", str(snapshot_file), "--theme", "floatsize-light", "--save-theme"],
            )
        assert result.exit_code == 0
        assert get_theme() == "floatsize-light"
        assert mock_init.call_args.kwargs["theme_name"] == "floatsize-light"

    @patch("floatsize.main.setup_logging")
    @pytest.mark.parametrize("extra", [[], ["--theme", "nope"]])
    def test_save_theme_needs_known_theme(self, _mock_logging, extra, snapshot_file):
        result = runner.invoke(app, ["run", "--snapshot", str(snapshot_file), "--save-theme", *extra])
        assert result.exit_code == 1
        assert "floatsize-dark" in result.stdout
        assert get_theme() == "floatsize-dark"
