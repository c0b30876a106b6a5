"""Audio file input."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import soundfile as sf


LOGGER = logging.getLogger(__name__)


def load_signal(path: str | Path) -> tuple[np.ndarray, float]:
    """Load the first channel of an audio file as ``(samples, sample_rate)``."""
    audio, sample_rate = sf.read(Path(path), always_2d=True, dtype="float64")
    if audio.shape[0] == 0:
        raise ValueError(f"Audio file contains no samples: {path}")
    if audio.shape[1] > 1:
        LOGGER.info(
            "%s has %d channels; analysing channel 0 only", path, audio.shape[1]
        )
    return np.ascontiguousarray(audio[:, 0]), float(sample_rate)
