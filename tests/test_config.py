"""Tests for settings resolution and hosts path defaults."""

from pathlib import Path

import pytest

from hostsync import DEFAULT_URL, END_MARKER, START_MARKER
from hostsync.config import Settings, load_config_file, load_settings
from hostsync.paths import default_hosts_path, hosts_path

FIXTURES = Path(__file__).parent / "fixtures"


class TestPaths:
    def test_posix_default(self):
        assert default_hosts_path("Linux") == Path("/etc/hosts")
        assert default_hosts_path("Darwin") == Path("/etc/hosts")

    def test_windows_default(self, monkeypatch):
        monkeypatch.setenv("SystemRoot", "C:\\Windows")
        path = default_hosts_path("Windows")
        assert path.name == "hosts"
        assert path.parent.name == "etc"
        assert "drivers" in path.parts

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOSTSYNC_HOSTS_FILE", str(tmp_path / "hosts"))
        assert hosts_path() == tmp_path / "hosts"


class TestLoadConfigFile:
    def test_reads_fixture(self):
        data = load_config_file(FIXTURES / "hostsync.yaml")
        assert data["url"] == "https://hosts.example.org/lab/hosts"
        assert data["connect_timeout"] == 5

    def test_empty_file(self, tmp_path):
        cfg = tmp_path / "empty.yaml"
        cfg.write_text("")
        assert load_config_file(cfg) == {}

    def test_rejects_non_mapping(self, tmp_path):
        cfg = tmp_path / "list.yaml"
        cfg.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="not a YAML mapping"):
            load_config_file(cfg)

    def test_rejects_unknown_keys(self, tmp_path):
        cfg = tmp_path / "bad.yaml"
        cfg.write_text("url: http://x\nretries: 3\n")
        with pytest.raises(ValueError, match="retries"):
            load_config_file(cfg)

    def test_rejects_invalid_yaml(self, tmp_path):
        cfg = tmp_path / "broken.yaml"
        cfg.write_text("url: [unclosed\n")
        with pytest.raises(ValueError, match="not valid YAML"):
            load_config_file(cfg)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config_file(tmp_path / "nope.yaml")


class TestLoadSettings:
    def test_defaults(self):
        s = load_settings()
        assert s.url == DEFAULT_URL
        assert s.start_marker == START_MARKER
        assert s.end_marker == END_MARKER
        assert s.connect_timeout == 10
        assert s.total_timeout == 30
        assert s.backup_dir is None

    def test_file_layer(self):
        s = load_settings(FIXTURES / "hostsync.yaml")
        assert s.url == "https://hosts.example.org/lab/hosts"
        assert s.connect_timeout == 5.0
        assert s.total_timeout == 12.5

    def test_config_from_env(self, monkeypatch):
        monkeypatch.setenv("HOSTSYNC_CONFIG", str(FIXTURES / "hostsync.yaml"))
        assert load_settings().url == "https://hosts.example.org/lab/hosts"

    def test_env_beats_file(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOSTSYNC_URL", "https://env.example.org/hosts")
        monkeypatch.setenv("HOSTSYNC_BACKUP_DIR", str(tmp_path))
        s = load_settings(FIXTURES / "hostsync.yaml")
        assert s.url == "https://env.example.org/hosts"
        assert s.backup_dir == tmp_path

    def test_overrides_beat_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOSTSYNC_URL", "https://env.example.org/hosts")
        s = load_settings(url="https://cli.example.org/hosts", hosts_file=str(tmp_path / "h"))
        assert s.url == "https://cli.example.org/hosts"
        assert s.hosts_file == tmp_path / "h"

    def test_none_override_is_unset(self):
        assert load_settings(url=None).url == DEFAULT_URL

    def test_rejects_bad_timeout(self, tmp_path):
        cfg = tmp_path / "t.yaml"
        cfg.write_text("total_timeout: -1\n")
        with pytest.raises(ValueError, match="positive"):
            load_settings(cfg)

    def test_rejects_same_markers(self, tmp_path):
        cfg = tmp_path / "m.yaml"
        cfg.write_text("start_marker: '#x'\nend_marker: '#x'\n")
        with pytest.raises(ValueError, match="must differ"):
            load_settings(cfg)

    def test_empty_values_are_unset(self, tmp_path):
        cfg = tmp_path / "e.yaml"
        cfg.write_text("hosts_file:\nurl:\ntotal_timeout:\n")
        s = load_settings(cfg)
        assert s.hosts_file == Path("/etc/hosts")
        assert s.url == DEFAULT_URL
        assert s.total_timeout == 30

    def test_rejects_blank_path(self, tmp_path):
        cfg = tmp_path / "b.yaml"
        cfg.write_text("hosts_file: '  '\n")
        with pytest.raises(ValueError, match="must be a path"):
            load_settings(cfg)

    def test_unknown_override(self):
        with pytest.raises(ValueError, match="unknown setting"):
            load_settings(retries=3)

    def test_settings_dataclass_defaults(self):
        assert Settings().url == DEFAULT_URL
