"""Configuration for the hexworld service."""

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

# Paths
HEXWORLD_ROOT = Path(__file__).parent
WEB_DIR = HEXWORLD_ROOT / "web"
UI_PATH = Path(os.environ.get("HEXWORLD_UI_PATH", WEB_DIR / "ui.html"))

# World
WORLD_SEED = int(os.environ.get("HEXWORLD_SEED", "0"))

# Server
HOST = os.environ.get("HEXWORLD_HOST", "0.0.0.0")
PORT = int(os.environ.get("HEXWORLD_PORT", "24999"))

# Client
API_URL = os.environ.get("HEXWORLD_API_URL", f"http://localhost:{PORT}")

# Logging
LOG_LEVEL = os.environ.get("HEXWORLD_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


@dataclass(frozen=True)
class ServerConfig:
    """Settings for one server run."""
    seed: int = WORLD_SEED
    host: str = HOST
    port: int = PORT
    ui_path: Path = UI_PATH
    cache: bool = True


def load_server_config(path: Optional[str | Path] = None) -> ServerConfig:
    """Load server settings, overriding env defaults with a TOML file.

    The file may contain a ``[server]`` table with any of ``seed``, ``host``,
    ``port``, ``ui_path`` and ``cache``. Unknown keys are rejected.
    """
    server_config = ServerConfig()
    if path is None:
        return server_config

    with open(path, "rb") as f:
        data = tomllib.load(f).get("server", {})

    unknown = set(data) - set(ServerConfig.__dataclass_fields__)
    if unknown:
        raise ValueError(f"Unknown [server] keys in {path}: {sorted(unknown)}")
    if "ui_path" in data:
        data["ui_path"] = Path(data["ui_path"])
    return replace(server_config, **data)
