"""Logging setup and JSONL records for analysis results."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

import numpy as np


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


def configure_logging(level: str) -> None:
    """Configure logging format and level for CLI commands."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def _to_builtin(value: Any) -> Any:
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, Path):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JsonlLogger:
    """Append analysis records to a JSON Lines file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def write(self, record: Mapping[str, Any]) -> None:
        line = json.dumps(dict(record), ensure_ascii=False, default=_to_builtin)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")


def log_summaries_jsonl(path: str | Path, records: Iterable[Mapping[str, Any]]) -> None:
    """Write many summary dictionaries to JSONL."""
    logger = JsonlLogger(path)
    for record in records:
        logger.write(record)
