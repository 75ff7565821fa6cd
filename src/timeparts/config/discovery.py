"""Config file discovery and loading.

Walk-up finder locates timeparts.toml, the way git finds .git/.
The TIMEPARTS_CONFIG env var and the --config CLI flag override it.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from timeparts.config.models import TimepartsConfig

CONFIG_FILENAME = "timeparts.toml"
CONFIG_ENV_VAR = "TIMEPARTS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for timeparts.toml.

    Returns the path to the config file, or None if not found.
    Checks TIMEPARTS_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config(path: Path | None = None, cwd: Path | None = None) -> TimepartsConfig:
    """Load and validate config from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns default TimepartsConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return TimepartsConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return TimepartsConfig.model_validate(data)
