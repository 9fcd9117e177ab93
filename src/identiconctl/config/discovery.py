"""Config file discovery and loading.

Walk-up finder locates identiconctl.toml, similar to how git finds .git/.
Supports the IDENTICONCTL_CONFIG env var and the --config CLI flag.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from identiconctl.config.models import IdenticonctlConfig

CONFIG_FILENAME = "identiconctl.toml"
CONFIG_ENV_VAR = "IDENTICONCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for identiconctl.toml.

    Checks IDENTICONCTL_CONFIG first; a set but missing path yields None
    rather than falling back to the walk-up.
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


def load_config(path: Path | None = None, cwd: Path | None = None) -> IdenticonctlConfig:
    """Load and validate config from a TOML file.

    Returns the defaults when no file is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return IdenticonctlConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return IdenticonctlConfig.model_validate(data)
