"""fourierview public API."""

from .analysis import (
    SpectrumError,
    peak_frequencies,
    peak_phases,
    phase_spectrum,
    power_spectrum,
    unwrap_phase,
)
from .config_schema import AnalysisConfig, load_analysis_config, parse_analysis_config
from .configs import save_yaml
from .logging_utils import JsonlLogger, log_summaries_jsonl
from .signal import (
    FFTPlan,
    STFTPlan,
    WindowShape,
    generate_window,
    get_fft_plan,
    run_stft,
    transform,
    unflatten_spectrogram,
)
from .viewer import FourierViewer

__all__ = [
    "FourierViewer",
    "WindowShape",
    "FFTPlan",
    "STFTPlan",
    "SpectrumError",
    "generate_window",
    "get_fft_plan",
    "transform",
    "run_stft",
    "unflatten_spectrogram",
    "peak_frequencies",
    "peak_phases",
    "power_spectrum",
    "phase_spectrum",
    "unwrap_phase",
    "AnalysisConfig",
    "load_analysis_config",
    "parse_analysis_config",
    "save_yaml",
    "JsonlLogger",
    "log_summaries_jsonl",
]
