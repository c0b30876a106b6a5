from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

import numpy as np

from .audio_io import load_signal
from .config_schema import (
    AnalysisConfig,
    analysis_config_to_dict,
    load_analysis_config,
)
from .configs import dump_yaml
from .logging_utils import JsonlLogger, configure_logging
from .signal import STFTPlan, WindowShape, run_stft
from .viewer import FourierViewer


LOGGER = logging.getLogger(__name__)


def _resolve_config(args: argparse.Namespace) -> AnalysisConfig:
    overrides = list(args.set or [])
    # Explicit flags win over the YAML file and --set entries. Paths bypass
    # the dotlist so they are never parsed as YAML or interpolations.
    for key, value in (
        ("transform.fft_size", getattr(args, "fft_size", None)),
        ("transform.window", getattr(args, "window", None)),
        ("peaks.count", getattr(args, "peaks", None)),
        ("runtime.log_level", getattr(args, "log_level", None)),
    ):
        if value is not None:
            overrides.append(f"{key}={value}")
    if getattr(args, "stft", False):
        overrides.append("stft.enabled=true")
    cfg = load_analysis_config(args.config, overrides=overrides)
    output_dir = getattr(args, "output_dir", None)
    if output_dir is not None:
        cfg.runtime.output_dir = str(output_dir)
    jsonl = getattr(args, "jsonl", None)
    if jsonl is not None:
        cfg.runtime.jsonl = str(jsonl)
    return cfg


def _save_stft(
    path: Path, flat: np.ndarray, plan: STFTPlan, sample_rate: float
) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    np.savez(
        path,
        spectrogram=flat,
        fft_size=plan.fft_size,
        hop_size=plan.hop_size,
        window=plan.window,
        sample_rate=sample_rate,
    )


def analyze_command(args: argparse.Namespace) -> None:
    """Transform one audio file and report its dominant peaks."""
    cfg = _resolve_config(args)
    configure_logging(cfg.runtime.log_level)

    samples, sample_rate = load_signal(args.input)
    LOGGER.info(
        "Loaded %s: %d samples at %.1f Hz", args.input, samples.shape[0], sample_rate
    )

    viewer = FourierViewer(samples, sample_rate)
    viewer.run_transform(cfg.transform.fft_size, cfg.transform.window)
    summary = viewer.summary(cfg.peaks.count)
    if summary is None:
        raise RuntimeError("transform did not produce a spectrum")
    summary["input"] = str(args.input)

    if cfg.stft.enabled:
        plan = STFTPlan(fft_size=cfg.stft.fft_size, window=cfg.stft.window)
        flat = run_stft(samples, plan.fft_size, plan.window)
        n_frames = plan.frame_count(samples.shape[0])
        out_path = Path(cfg.runtime.output_dir) / f"{Path(args.input).stem}_stft.npz"
        _save_stft(out_path, flat, plan, sample_rate)
        LOGGER.info("Saved %d STFT frames to %s", n_frames, out_path)
        summary["stft"] = {
            "path": str(out_path),
            "fft_size": plan.fft_size,
            "hop_size": plan.hop_size,
            "n_frames": n_frames,
        }

    if cfg.runtime.jsonl:
        JsonlLogger(cfg.runtime.jsonl).write(summary)
        LOGGER.info("Appended summary to %s", cfg.runtime.jsonl)

    print(json.dumps(summary, indent=2))


def show_config_command(args: argparse.Namespace) -> None:
    """Print the fully resolved configuration."""
    cfg = _resolve_config(args)
    print(dump_yaml(analysis_config_to_dict(cfg)), end="")


def windows_command(args: argparse.Namespace) -> None:
    """Print available window names."""
    del args
    for shape in WindowShape:
        print(shape.value)


def _add_config_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional YAML analysis config.",
    )
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        help="Config override in dotlist form (e.g. transform.fft_size=8192).",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser for fourierview commands."""
    parser = argparse.ArgumentParser(
        prog="fourierview",
        description="Frequency-domain inspection of audio files",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    analyze_parser = sub.add_parser("analyze", help="Analyze one audio file.")
    analyze_parser.add_argument("input", type=Path, help="Path to an audio file.")
    _add_config_args(analyze_parser)
    analyze_parser.add_argument("--fft-size", type=int, default=None, help="FFT size.")
    analyze_parser.add_argument(
        "--window",
        type=str,
        default=None,
        choices=[shape.value for shape in WindowShape],
        help="Window shape.",
    )
    analyze_parser.add_argument(
        "--peaks", type=int, default=None, help="Number of peaks to report."
    )
    analyze_parser.add_argument(
        "--stft",
        action="store_true",
        help="Also compute the sliding-window spectrogram and save it as .npz.",
    )
    analyze_parser.add_argument(
        "--output-dir", type=Path, default=None, help="Directory for saved outputs."
    )
    analyze_parser.add_argument(
        "--jsonl", type=Path, default=None, help="Append the summary to this file."
    )
    analyze_parser.add_argument(
        "--log-level", type=str, default=None, help="Logging level (e.g. DEBUG)."
    )
    analyze_parser.set_defaults(func=analyze_command)

    config_parser = sub.add_parser("show-config", help="Print resolved config.")
    _add_config_args(config_parser)
    config_parser.set_defaults(func=show_config_command)

    windows_parser = sub.add_parser("windows", help="List window shapes.")
    windows_parser.set_defaults(func=windows_command)
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
