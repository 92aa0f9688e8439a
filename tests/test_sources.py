"""Tests for snapshot parsing and the JSON file source."""

import json
import os

import pytest

from floatsize.exceptions import SnapshotFormatError
from floatsize.models.snapshot import PaneGeometry, current_session
from floatsize.sources import JsonFileSnapshotSource, load_palette, load_sessions, read_snapshot_file

from factories import snapshot_document


class TestLoadSessions:
    def test_parses_document(self):
        sessions = load_sessions(snapshot_document())
        session = current_session(sessions)

        assert session.name == "main"
        assert [tab.name for tab in session.tabs] == ["code", "logs"]
        htop = session.panes[0][1]
        assert htop.title == "htop"
        assert htop.is_floating
        assert htop.geometry == PaneGeometry(x=10, y=5, columns=100, rows=30)
        assert session.panes[1][0].is_plugin

    def test_accepts_bare_list(self):
        sessions = load_sessions(snapshot_document()["sessions"])
        assert len(sessions) == 2

    def test_optional_fields_default(self):
        sessions = load_sessions(
            [{"is_current_session": True, "tabs": [{"position": 2}], "panes": {"2": [{"id": 4}]}}]
        )
        tab = sessions[0].tabs[0]
        pane = sessions[0].panes[2][0]
        assert tab.identity == 2
        assert not pane.is_floating
        assert pane.title == ""
        assert pane.geometry == PaneGeometry()

    def test_explicit_tab_id_is_kept(self):
        sessions = load_sessions([{"tabs": [{"position": 0, "tab_id": 42}]}])
        assert sessions[0].tabs[0].identity == 42

    @pytest.mark.parametrize(
        "document",
        [
            {"sessions": "nope"},
            {"nothing": []},
            ["not a session"],
            [{"tabs": "nope"}],
            [{"tabs": [{"name": "no position"}]}],
            [{"tabs": [], "panes": {"zero": []}}],
            [{"tabs": [], "panes": {"0": {"id": 1}}}],
            [{"tabs": [], "panes": {"0": [{"id": "one"}]}}],
            [{"tabs": [], "panes": {"0": [{"id": True}]}}],
        ],
    )
    def test_malformed_documents_raise(self, document):
        with pytest.raises(SnapshotFormatError):
            load_sessions(document)


class TestPalette:
    def test_palette_is_optional(self):
        assert load_palette(snapshot_document()) == {}
        assert load_palette([]) == {}

    def test_palette_values_are_strings(self):
        assert load_palette({"palette": {"fg": "#fff"}}) == {"fg": "#fff"}

    def test_palette_must_be_object(self):
        with pytest.raises(SnapshotFormatError):
            load_palette({"palette": ["#fff"]})


class TestFileSource:
    def test_reads_file(self, snapshot_file):
        event = read_snapshot_file(snapshot_file)
        assert current_session(event.sessions).name == "main"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{")
        with pytest.raises(SnapshotFormatError) as exc_info:
            read_snapshot_file(path)
        assert str(path) in str(exc_info.value)

    def test_non_utf8_file_is_a_format_error(self, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe{}")
        with pytest.raises(SnapshotFormatError, match="UTF-8"):
            read_snapshot_file(path)
        with pytest.raises(SnapshotFormatError):
            JsonFileSnapshotSource(path).poll()

    def test_poll_reports_only_changes(self, snapshot_file):
        source = JsonFileSnapshotSource(snapshot_file)
        assert source.poll() is not None
        assert source.poll() is None

        snapshot_file.write_text(json.dumps(snapshot_document(palette={"fg": "#abcdef"})))
        stat = snapshot_file.stat()
        os.utime(snapshot_file, ns=(stat.st_atime_ns, stat.st_mtime_ns + 1_000_000_000))

        event = source.poll()
        assert event is not None
        assert event.palette == {"fg": "#abcdef"}

    def test_missing_file_is_not_an_error(self, tmp_path):
        source = JsonFileSnapshotSource(tmp_path / "absent.json")
        assert source.poll() is None

    def test_broken_file_is_reported_once(self, tmp_path):
        path = tmp_path / "snapshot.json"
        path.write_text("not json")
        source = JsonFileSnapshotSource(path)
        with pytest.raises(SnapshotFormatError):
            source.poll()
        assert source.poll() is None
