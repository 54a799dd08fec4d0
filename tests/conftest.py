"""Shared test fixtures for hostsync."""

from pathlib import Path

import pytest

from hostsync.config import Settings

FIXTURES = Path(__file__).parent / "fixtures"

LOCAL_HOSTS = (
    "127.0.0.1\tlocalhost\n"
    "::1\tlocalhost ip6-localhost\n"
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("HOSTSYNC_URL", "HOSTSYNC_HOSTS_FILE", "HOSTSYNC_BACKUP_DIR", "HOSTSYNC_CONFIG"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def remote_text():
    return (FIXTURES / "remote-hosts.txt").read_text()


@pytest.fixture
def hosts_file(tmp_path):
    path = tmp_path / "hosts"
    path.write_text(LOCAL_HOSTS)
    return path


@pytest.fixture
def settings(hosts_file):
    return Settings(url="https://hosts.example.org/hosts", hosts_file=hosts_file)
