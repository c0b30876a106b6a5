"""Stateful analysis session over one loaded signal."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from .analysis import peaks
from .signal import WindowShape, transform


LOGGER = logging.getLogger(__name__)


class FourierViewer:
    """Hold a signal and at most one single-frame spectrum computed from it.

    Parameters
    ----------
    signal:
        Real-valued samples. A read-only ``float64`` copy is kept.
    sample_rate:
        Sampling rate in Hz. Must be positive.
    """

    def __init__(self, signal: ArrayLike, sample_rate: float) -> None:
        samples = np.array(signal, dtype=np.float64)
        if samples.ndim != 1:
            raise ValueError(f"signal must be a 1-D array, got ndim={samples.ndim}")
        if not sample_rate > 0:
            raise ValueError(f"sample_rate must be > 0, got {sample_rate}")
        samples.setflags(write=False)
        self._signal = samples
        self._sample_rate = float(sample_rate)
        self._spectrum: np.ndarray | None = None
        self._window: WindowShape | None = None

    @property
    def signal(self) -> np.ndarray:
        return self._signal

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @property
    def duration(self) -> float:
        """Signal length in seconds."""
        return self._signal.shape[0] / self._sample_rate

    @property
    def spectrum(self) -> np.ndarray | None:
        return self._spectrum

    @property
    def has_spectrum(self) -> bool:
        return self._spectrum is not None

    @property
    def fft_size(self) -> int | None:
        return None if self._spectrum is None else self._spectrum.shape[0]

    @property
    def window(self) -> WindowShape | None:
        return self._window

    def run_transform(self, size: int, window: str | WindowShape) -> None:
        """Replace the current spectrum with a new ``size``-point transform."""
        shape = WindowShape.parse(window)
        spectrum = transform(self._signal, size, shape)
        spectrum.setflags(write=False)
        self._spectrum = spectrum
        self._window = shape
        LOGGER.debug(
            "run_transform: size=%d window=%s bin_width=%.6g Hz",
            spectrum.shape[0],
            shape.value,
            self._sample_rate / spectrum.shape[0],
        )

    def reset(self) -> None:
        """Drop the current spectrum."""
        self._spectrum = None
        self._window = None

    def peak_frequencies(self, count: int) -> np.ndarray | None:
        """Frequencies of the ``count`` strongest bins, or ``None``."""
        if self._spectrum is None:
            return None
        return peaks.peak_frequencies(self._spectrum, self._sample_rate, count)

    def peak_phases(self, count: int) -> np.ndarray | None:
        """Rank-order unwrapped phases of the ``count`` strongest bins, or ``None``."""
        if self._spectrum is None:
            return None
        return peaks.peak_phases(self._spectrum, count)

    def power_spectrum(self) -> np.ndarray | None:
        if self._spectrum is None:
            return None
        return peaks.power_spectrum(self._spectrum)

    def phase_spectrum(self) -> np.ndarray | None:
        if self._spectrum is None:
            return None
        return peaks.phase_spectrum(self._spectrum)

    def frequency_axis(self) -> np.ndarray | None:
        if self._spectrum is None:
            return None
        return peaks.frequency_axis(self._spectrum.shape[0], self._sample_rate)

    def time_axis(self) -> np.ndarray:
        """Sample times in seconds."""
        return np.arange(self._signal.shape[0]) / self._sample_rate

    def analyzed_span(self) -> tuple[int, int] | None:
        """Sample range ``(start, stop)`` covered by the current frame."""
        if self._spectrum is None:
            return None
        return 0, self._spectrum.shape[0]

    def summary(self, count: int) -> dict[str, Any] | None:
        """Plain-Python description of the current spectrum and its peaks."""
        if self._spectrum is None or self._window is None:
            return None
        size = self._spectrum.shape[0]
        return {
            "sample_rate": self._sample_rate,
            "n_samples": int(self._signal.shape[0]),
            "fft_size": int(size),
            "window": self._window.value,
            "bin_width": self._sample_rate / size,
            "peak_frequencies": peaks.peak_frequencies(
                self._spectrum, self._sample_rate, count
            ).tolist(),
            "peak_phases": peaks.peak_phases(self._spectrum, count).tolist(),
        }
