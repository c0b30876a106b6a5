"""Peak ranking and spectrum-derived quantities."""

from __future__ import annotations

import logging
import operator

import numpy as np
from numpy.typing import ArrayLike

from .phase import unwrap_phase


LOGGER = logging.getLogger(__name__)


class SpectrumError(ValueError):
    """Raised when a spectrum cannot be ranked (NaN power)."""


def _as_spectrum(spectrum: ArrayLike) -> np.ndarray:
    data = np.asarray(spectrum, dtype=np.complex128)
    if data.ndim != 1:
        raise ValueError(f"spectrum must be 1-D, got ndim={data.ndim}")
    return data


def _require_bins(data: np.ndarray) -> np.ndarray:
    if data.shape[0] == 0:
        raise ValueError("spectrum must contain at least one bin")
    return data


def _check_count(k: int) -> int:
    k = operator.index(k)
    if k < 0:
        raise ValueError(f"peak count must be non-negative, got {k}")
    return k


def power_spectrum(spectrum: ArrayLike) -> np.ndarray:
    """Squared magnitude of the non-redundant half ``[0, N // 2)``."""
    data = _as_spectrum(spectrum)
    half = data[: data.shape[0] // 2]
    return half.real**2 + half.imag**2


def rank_bins(spectrum: ArrayLike) -> np.ndarray:
    """Indices of the first-half bins ordered by descending power.

    Equal powers keep ascending bin order.
    """
    power = power_spectrum(spectrum)
    if np.isnan(power).any():
        raise SpectrumError(
            f"spectrum contains NaN power at bins {np.flatnonzero(np.isnan(power)).tolist()}"
        )
    return np.argsort(-power, kind="stable")


def peak_frequencies(spectrum: ArrayLike, sample_rate: float, k: int) -> np.ndarray:
    """Frequencies in Hz of the ``k`` strongest bins, strongest first."""
    data = _require_bins(_as_spectrum(spectrum))
    k = _check_count(k)
    if sample_rate <= 0:
        raise ValueError(f"sample_rate must be > 0, got {sample_rate}")
    df = float(sample_rate) / data.shape[0]
    ranked = rank_bins(data)[:k]
    return ranked * df


def peak_phases(spectrum: ArrayLike, k: int) -> np.ndarray:
    """Unwrapped phases of the ``k`` strongest bins, strongest first.

    Unwrapping runs along rank order, so neighbouring entries may belong to
    bins that are far apart in frequency.
    """
    data = _require_bins(_as_spectrum(spectrum))
    k = _check_count(k)
    ranked = rank_bins(data)[:k]
    phases = np.angle(data[ranked])
    LOGGER.debug("peak_phases: bins=%s", ranked.tolist())
    return unwrap_phase(phases)


def phase_spectrum(spectrum: ArrayLike) -> np.ndarray:
    """Phase over frequency, unwrapped across all bins, first half returned."""
    data = _as_spectrum(spectrum)
    phases = unwrap_phase(np.angle(data))
    return phases[: data.shape[0] // 2]


def frequency_axis(size: int, sample_rate: float) -> np.ndarray:
    """Centre frequency of each bin in ``[0, size // 2)``."""
    size = operator.index(size)
    if size < 1:
        raise ValueError(f"FFT size must be a positive integer, got {size}")
    if sample_rate <= 0:
        raise ValueError(f"sample_rate must be > 0, got {sample_rate}")
    return np.arange(size // 2) * (float(sample_rate) / size)
