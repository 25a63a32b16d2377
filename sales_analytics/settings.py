"""
Runtime configuration.

Settings live in ``config.yaml`` next to this module. Callers may point
``load_config`` at another file (e.g. per-environment copies).
"""

from pathlib import Path
from typing import Any, Optional

import yaml

CONFIG_PATH = Path(__file__).parent / "config.yaml"


def load_config(path: Optional[Path] = None) -> dict[str, Any]:
    config_path = Path(path) if path else CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        config = yaml.safe_load(f) or {}

    config.setdefault("data", {})
    config.setdefault("output", {})
    config["reports"] = config.get("reports") or []
    return config
