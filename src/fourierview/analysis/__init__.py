"""Spectral analysis on computed spectra."""

from .peaks import (
    SpectrumError,
    frequency_axis,
    peak_frequencies,
    peak_phases,
    phase_spectrum,
    power_spectrum,
    rank_bins,
)
from .phase import unwrap_phase

__all__ = [
    "SpectrumError",
    "frequency_axis",
    "peak_frequencies",
    "peak_phases",
    "phase_spectrum",
    "power_spectrum",
    "rank_bins",
    "unwrap_phase",
]
