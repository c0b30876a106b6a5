"""Typed OmegaConf schemas for analysis runs."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping

from .configs import OmegaConf
from .signal import WindowShape


@dataclass
class TransformConfig:
    """Single-frame transform options."""

    fft_size: int = 4096
    window: str = "hann"


@dataclass
class STFTConfig:
    """Sliding-window transform options. The hop is always ``fft_size // 2``."""

    enabled: bool = False
    fft_size: int = 1024
    window: str = "hann"


@dataclass
class PeakConfig:
    """Peak extraction options."""

    count: int = 5


@dataclass
class RuntimeConfig:
    """Runtime options."""

    log_level: str = "INFO"
    output_dir: str = "outputs"
    jsonl: str | None = None


@dataclass
class AnalysisConfig:
    """Top-level analysis configuration schema."""

    transform: TransformConfig = field(default_factory=TransformConfig)
    stft: STFTConfig = field(default_factory=STFTConfig)
    peaks: PeakConfig = field(default_factory=PeakConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)


def _validate(config: AnalysisConfig) -> AnalysisConfig:
    if config.transform.fft_size < 1:
        raise ValueError(
            f"transform.fft_size must be positive, got {config.transform.fft_size}"
        )
    if config.stft.fft_size < 2:
        raise ValueError(f"stft.fft_size must be >= 2, got {config.stft.fft_size}")
    if config.peaks.count < 0:
        raise ValueError(f"peaks.count must be non-negative, got {config.peaks.count}")
    config.transform.window = WindowShape.parse(config.transform.window).value
    config.stft.window = WindowShape.parse(config.stft.window).value
    return config


def _decode(*sources: Any) -> AnalysisConfig:
    merged = OmegaConf.merge(OmegaConf.structured(AnalysisConfig), *sources)
    decoded = OmegaConf.to_object(merged)
    if not isinstance(decoded, AnalysisConfig):
        raise TypeError("Failed to decode config as AnalysisConfig")
    return _validate(decoded)


def parse_analysis_config(data: Mapping[str, object]) -> AnalysisConfig:
    """Decode a mapping into :class:`AnalysisConfig`.

    Missing keys take their defaults; unknown keys are rejected by OmegaConf.
    """
    return _decode(OmegaConf.create(dict(data)))


def load_analysis_config(
    path: str | Path | None = None,
    *,
    overrides: Iterable[str] | None = None,
) -> AnalysisConfig:
    """Load an optional YAML file plus overrides into :class:`AnalysisConfig`."""
    sources = [] if path is None else [OmegaConf.load(Path(path))]
    override_list = [item for item in (overrides or []) if item]
    if override_list:
        sources.append(OmegaConf.from_dotlist(override_list))
    return _decode(*sources)


def analysis_config_to_dict(config: AnalysisConfig) -> dict[str, Any]:
    """Convert :class:`AnalysisConfig` to a plain dictionary."""
    return asdict(config)
