"""FFT planning, single-frame transform and sliding-window STFT."""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from functools import lru_cache

import numpy as np
import scipy.fft
from numpy.lib.stride_tricks import sliding_window_view
from numpy.typing import ArrayLike

from .windows import WindowShape, generate_window


LOGGER = logging.getLogger(__name__)

_DIRECTIONS = ("forward", "inverse")


@dataclass(frozen=True)
class FFTPlan:
    """Complex FFT of a fixed length and direction.

    A plan is applied along the last axis, so the same plan serves a single
    buffer of shape ``(size,)`` and a batch of frames ``(n_frames, size)``.
    """

    size: int
    direction: str = "forward"

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"FFT size must be a positive integer, got {self.size}")
        if self.direction not in _DIRECTIONS:
            raise ValueError(
                f"direction must be one of {_DIRECTIONS}, got {self.direction!r}"
            )

    def execute(self, buffer: np.ndarray) -> np.ndarray:
        """Transform ``buffer`` along its last axis."""
        data = np.asarray(buffer, dtype=np.complex128)
        if data.shape[-1] != self.size:
            raise ValueError(
                f"buffer length {data.shape[-1]} does not match plan size {self.size}"
            )
        if self.direction == "forward":
            return scipy.fft.fft(data, n=self.size, axis=-1)
        return scipy.fft.ifft(data, n=self.size, axis=-1)


@lru_cache(maxsize=32)
def _cached_plan(size: int, direction: str) -> FFTPlan:
    return FFTPlan(size=size, direction=direction)


def get_fft_plan(size: int, direction: str = "forward") -> FFTPlan:
    """Return the cached plan for ``(size, direction)``."""
    return _cached_plan(operator.index(size), str(direction))


def _as_signal(signal: ArrayLike) -> np.ndarray:
    samples = np.asarray(signal, dtype=np.float64)
    if samples.ndim != 1:
        raise ValueError(f"signal must be a 1-D array, got ndim={samples.ndim}")
    return samples


def transform(
    signal: ArrayLike,
    size: int,
    window: str | WindowShape,
) -> np.ndarray:
    """Compute one windowed, zero-padded and centred spectrum of ``size`` bins.

    The first ``n = min(size, len(signal))`` samples are windowed with an
    ``n``-point window. The windowed slice is placed in a zero buffer of
    ``size`` samples starting at offset ``(size - n) // 2``, wrapping past the
    end of the buffer, and transformed with a forward complex FFT.
    """
    samples = _as_signal(signal)
    size = operator.index(size)
    plan = get_fft_plan(size, "forward")

    n_used = min(size, samples.shape[0])
    windowed = samples[:n_used] * generate_window(window, n_used)

    offset = (size - n_used) // 2
    buffer = np.zeros(size, dtype=np.complex128)
    buffer[(np.arange(n_used) + offset) % size] = windowed

    LOGGER.debug(
        "transform: size=%d used=%d offset=%d window=%s",
        size,
        n_used,
        offset,
        WindowShape.parse(window).value,
    )
    return plan.execute(buffer)


@dataclass(frozen=True)
class STFTPlan:
    """Sliding-window transform layout with a fixed 50% overlap."""

    fft_size: int
    window: str = "hann"

    @property
    def hop_size(self) -> int:
        return self.fft_size // 2

    def frame_count(self, n_samples: int) -> int:
        """Number of complete frames that fit in ``n_samples`` samples."""
        if n_samples < self.fft_size:
            return 0
        return (n_samples - self.fft_size) // self.hop_size + 1


def run_stft(
    signal: ArrayLike,
    size: int,
    window: str | WindowShape,
) -> np.ndarray:
    """Compute a spectrogram as a flat, frame-major ``(re, im)`` buffer.

    Frames of ``size`` samples advance by ``size // 2``; a trailing partial
    frame is not produced. The result holds ``n_frames * size * 2`` reals.
    """
    samples = _as_signal(signal)
    plan = STFTPlan(
        fft_size=operator.index(size), window=WindowShape.parse(window).value
    )
    fft_plan = get_fft_plan(plan.fft_size, "forward")
    if plan.hop_size == 0:
        raise ValueError(
            f"STFT size must be at least 2 to give a non-zero hop, got {plan.fft_size}"
        )

    n_frames = plan.frame_count(samples.shape[0])
    LOGGER.debug(
        "stft: size=%d hop=%d frames=%d window=%s",
        plan.fft_size,
        plan.hop_size,
        n_frames,
        plan.window,
    )
    if n_frames == 0:
        return np.zeros(0, dtype=np.float64)

    win = generate_window(plan.window, plan.fft_size)
    frames = sliding_window_view(samples, plan.fft_size)[:: plan.hop_size][:n_frames]
    spectra = fft_plan.execute(frames * win[None, :])

    flat = np.empty((n_frames, plan.fft_size, 2), dtype=np.float64)
    flat[..., 0] = spectra.real
    flat[..., 1] = spectra.imag
    return flat.reshape(-1)


def unflatten_spectrogram(flat: ArrayLike, size: int) -> np.ndarray:
    """Rebuild a complex ``(n_frames, size)`` spectrogram from a flat buffer."""
    data = np.asarray(flat, dtype=np.float64)
    size = operator.index(size)
    if data.ndim != 1:
        raise ValueError(f"flat spectrogram must be 1-D, got ndim={data.ndim}")
    if size < 1 or data.shape[0] % (2 * size) != 0:
        raise ValueError(
            f"flat buffer of length {data.shape[0]} is not a whole number of "
            f"frames of size {size}"
        )
    pairs = data.reshape(-1, size, 2)
    return pairs[..., 0] + 1j * pairs[..., 1]


def frame_times(n_frames: int, size: int, sample_rate: float) -> np.ndarray:
    """Start time in seconds of each STFT frame."""
    if sample_rate <= 0:
        raise ValueError(f"sample_rate must be > 0, got {sample_rate}")
    hop = operator.index(size) // 2
    return np.arange(operator.index(n_frames)) * hop / float(sample_rate)
