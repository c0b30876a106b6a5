"""Example: inspect a synthetic two-tone signal.

Usage
-----
``python examples/two_tone_report.py``

``python examples/two_tone_report.py --fft-size 2048 --window blackman --peaks 4``
"""

from __future__ import annotations

import argparse
from typing import Sequence

import numpy as np

from fourierview import FourierViewer, STFTPlan, run_stft, unflatten_spectrogram
from fourierview.signal import frame_times


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Report peaks of a two-tone signal.")
    parser.add_argument("--sample-rate", type=float, default=16000.0)
    parser.add_argument("--duration", type=float, default=1.0, help="Seconds.")
    parser.add_argument("--fft-size", type=int, default=4096)
    parser.add_argument("--stft-size", type=int, default=512)
    parser.add_argument("--window", type=str, default="hann")
    parser.add_argument("--peaks", type=int, default=3)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    t = np.arange(int(args.sample_rate * args.duration)) / args.sample_rate
    signal = np.sin(2 * np.pi * 440.0 * t) + 0.3 * np.sin(2 * np.pi * 1250.0 * t)

    viewer = FourierViewer(signal, args.sample_rate)
    viewer.run_transform(args.fft_size, args.window)
    freqs = viewer.peak_frequencies(args.peaks)
    phases = viewer.peak_phases(args.peaks)
    for rank, (freq, phase) in enumerate(zip(freqs, phases), start=1):
        print(f"#{rank}: {freq:8.2f} Hz  phase={phase:+.3f} rad")

    plan = STFTPlan(fft_size=args.stft_size, window=args.window)
    spec = unflatten_spectrogram(run_stft(signal, plan.fft_size, plan.window), plan.fft_size)
    times = frame_times(spec.shape[0], plan.fft_size, args.sample_rate)
    strongest = np.argmax(np.abs(spec[:, : plan.fft_size // 2]), axis=1)
    print(f"{spec.shape[0]} STFT frames, hop={plan.hop_size}")
    for start, bin_idx in list(zip(times, strongest))[:5]:
        print(f"t={start:.3f}s  strongest={bin_idx * args.sample_rate / plan.fft_size:.1f} Hz")


if __name__ == "__main__":
    main()
