"""Signal processing utilities."""

from .transform import (
    FFTPlan,
    STFTPlan,
    frame_times,
    get_fft_plan,
    run_stft,
    transform,
    unflatten_spectrogram,
)
from .windows import WindowShape, generate_window

__all__ = [
    "FFTPlan",
    "STFTPlan",
    "WindowShape",
    "frame_times",
    "generate_window",
    "get_fft_plan",
    "run_stft",
    "transform",
    "unflatten_spectrogram",
]
