"""Runtime settings.

Layered lowest to highest: built-in defaults, YAML config file,
HOSTSYNC_* environment variables, explicit overrides (CLI flags).

Config file (all keys optional):

    url: https://example.org/hosts
    hosts_file: /etc/hosts
    backup_dir: /var/backups/hosts
    start_marker: "# <-- COOL-LAB HOSTS BEGIN -->"
    end_marker: "# <-- COOL-LAB HOSTS END -->"
    connect_timeout: 10
    total_timeout: 30
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from hostsync import DEFAULT_URL, END_MARKER, START_MARKER
from hostsync import paths
from hostsync.fetch import DEFAULT_CONNECT_TIMEOUT, DEFAULT_TOTAL_TIMEOUT


@dataclass
class Settings:
    url: str = DEFAULT_URL
    hosts_file: Path = paths.default_hosts_path()
    backup_dir: Path | None = None
    start_marker: str = START_MARKER
    end_marker: str = END_MARKER
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    total_timeout: float = DEFAULT_TOTAL_TIMEOUT


_KEYS = {f.name for f in fields(Settings)}
_PATH_KEYS = {"hosts_file", "backup_dir"}
_FLOAT_KEYS = {"connect_timeout", "total_timeout"}


def load_config_file(path: Path | str) -> dict:
    """Read a YAML config file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: Malformed YAML, not a mapping, or unknown keys.
    """
    config_path = Path(path)
    with open(config_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"config at {config_path} is not valid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"config at {config_path} is not a YAML mapping")

    unknown = sorted(str(k) for k in data if k not in _KEYS)
    if unknown:
        raise ValueError(f"config at {config_path} has unknown keys: {', '.join(unknown)}")
    return data


def _coerce(key: str, value):
    if key in _PATH_KEYS:
        if not str(value).strip():
            raise ValueError(f"{key} must be a path, got {value!r}")
        return Path(str(value)).expanduser()
    if key in _FLOAT_KEYS:
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"{key} must be a number, got {value!r}") from None
        if number <= 0:
            raise ValueError(f"{key} must be positive, got {value!r}")
        return number
    if not isinstance(value, str) or not value:
        raise ValueError(f"{key} must be a non-empty string, got {value!r}")
    return value


def load_settings(config_path: Path | str | None = None, **overrides) -> Settings:
    """Build Settings from every layer.

    Args:
        config_path: YAML config file. Falls back to HOSTSYNC_CONFIG.
        **overrides: Setting values from the command line; None means unset.

    Returns:
        Resolved Settings.
    """
    values: dict = {"hosts_file": paths.hosts_path(), "backup_dir": paths.backup_dir()}

    cfg = config_path or paths.config_path()
    if cfg:
        file_values = load_config_file(cfg)
        for key, value in file_values.items():
            # empty keys (`hosts_file:`) leave the default in place
            if value is not None:
                values[key] = _coerce(key, value)

    env_url = os.environ.get("HOSTSYNC_URL")
    if env_url:
        values["url"] = env_url
    if os.environ.get("HOSTSYNC_HOSTS_FILE"):
        values["hosts_file"] = paths.hosts_path()
    if os.environ.get("HOSTSYNC_BACKUP_DIR"):
        values["backup_dir"] = paths.backup_dir()

    for key, value in overrides.items():
        if key not in _KEYS:
            raise ValueError(f"unknown setting: {key}")
        if value is not None:
            values[key] = _coerce(key, value)

    if values.get("start_marker", START_MARKER) == values.get("end_marker", END_MARKER):
        raise ValueError("start_marker and end_marker must differ")

    return Settings(**values)
