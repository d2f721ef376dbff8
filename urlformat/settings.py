# urlformat/settings.py
import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .encoding import SPACE_CONVENTIONS

ENV_VAR = "URLFORMAT_CONFIG"

DEFAULTS = {
    "template": {"strict": False},  # True => unused substitutions raise
    "query": {"space": "%20"},      # "%20" | "+"
}


def _config_path() -> Optional[Path]:
    value = os.environ.get(ENV_VAR)
    return Path(value) if value else None


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """Defaults merged with a JSON settings file, if one is given or named by $URLFORMAT_CONFIG."""
    data = copy.deepcopy(DEFAULTS)
    p = Path(path) if path is not None else _config_path()
    if p is None:
        return data
    _merge(data, json.loads(p.read_text()))
    space = data["query"]["space"]
    if space not in SPACE_CONVENTIONS:
        raise ValueError(f"Unknown query space convention in {p}: {space!r}")
    return data
