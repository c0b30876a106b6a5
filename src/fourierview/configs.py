"""YAML output helpers and the OmegaConf handle shared by the config schema."""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any

import yaml

try:
    OmegaConf = importlib.import_module("omegaconf").OmegaConf
except ModuleNotFoundError as exc:
    raise RuntimeError(
        "fourierview requires 'omegaconf'. Install it with `pip install omegaconf`."
    ) from exc


def dump_yaml(data: dict[str, Any]) -> str:
    """Render a mapping as YAML text, keeping key order."""
    return yaml.safe_dump(data, sort_keys=False)


def save_yaml(path: str | Path, data: dict[str, Any]) -> None:
    """Write dictionary data to a YAML file, creating parent directories."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(dump_yaml(data), encoding="utf-8")
