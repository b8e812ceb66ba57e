"""Runtime configuration for the bridge analyzer.

Values come from environment variables first, then from
``$BRIDGE_HOME/config.toml``, then from the defaults below.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict

import toml

logger = logging.getLogger(__name__)

BASE_DIR = Path(os.environ.get("BRIDGE_HOME", str(Path.home() / ".bridge-analyzer"))).expanduser()
CONFIG_FILE = BASE_DIR / "config.toml"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_MAX_FILE_BYTES = 512 * 1024

SKIP_DIRS = frozenset({
    ".git", ".hg", ".svn", "node_modules", ".next", ".venv", "venv",
    "__pycache__", ".tox", ".pytest_cache", ".mypy_cache", ".ruff_cache",
    "build", "dist", "target", "vendor", "coverage", ".turbo",
})


def load_full_config(path: Path = CONFIG_FILE) -> Dict[str, Any]:
    """Load the whole TOML file; a missing or broken file yields ``{}``."""
    if not path.exists():
        return {}
    try:
        return toml.load(path)
    except (OSError, toml.TomlDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        logger.warning("Ignoring non-table [%s] in config", name)
        return {}
    return section


def _as_int(value: Any, default: int, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Invalid %s %r, using %d", name, value, default)
        return default


def load_config(path: Path = CONFIG_FILE) -> Dict[str, Any]:
    """Merge defaults, the TOML file and environment overrides."""
    data = load_full_config(path)
    server = _section(data, "server")
    snapshot = _section(data, "snapshot")

    port = os.environ.get("PORT") or server.get("port") or DEFAULT_PORT
    max_file_bytes = snapshot.get("max_file_bytes", DEFAULT_MAX_FILE_BYTES)
    extra_skip = snapshot.get("skip_dirs", [])
    if not isinstance(extra_skip, list):
        extra_skip = []

    return {
        "host": os.environ.get("BRIDGE_HOST") or server.get("host") or DEFAULT_HOST,
        "port": _as_int(port, DEFAULT_PORT, "port"),
        "max_file_bytes": _as_int(max_file_bytes, DEFAULT_MAX_FILE_BYTES, "max_file_bytes"),
        "skip_dirs": SKIP_DIRS | frozenset(str(d) for d in extra_skip),
    }


_config = load_config()

HOST: str = _config["host"]
PORT: int = _config["port"]
MAX_FILE_BYTES: int = _config["max_file_bytes"]
SNAPSHOT_SKIP_DIRS = _config["skip_dirs"]
