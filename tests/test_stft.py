import numpy as np
import pytest

from fourierview import STFTPlan, generate_window, run_stft, unflatten_spectrogram
from fourierview.signal import frame_times


def test_stft_output_length_matches_frame_count() -> None:
    signal = np.random.default_rng(0).standard_normal(1000)
    flat = run_stft(signal, 128, "hann")
    n_frames = (1000 - 128) // 64 + 1
    assert n_frames == 14
    assert flat.shape == (n_frames * 128 * 2,)
    assert flat.dtype == np.float64


def test_stft_short_signal_gives_empty_output() -> None:
    flat = run_stft(np.ones(100), 128, "hann")
    assert flat.shape == (0,)


def test_stft_exact_fit_gives_single_frame() -> None:
    flat = run_stft(np.ones(64), 64, "rectangle")
    assert flat.shape == (64 * 2,)
    spec = unflatten_spectrogram(flat, 64)
    assert spec[0, 0] == pytest.approx(64.0)


def test_stft_frames_are_windowed_ffts_at_half_size_hops() -> None:
    rng = np.random.default_rng(3)
    signal = rng.standard_normal(96)
    size = 32
    win = generate_window("hamming", size)

    spec = unflatten_spectrogram(run_stft(signal, size, "hamming"), size)

    assert spec.shape == (5, size)
    for idx in range(spec.shape[0]):
        start = idx * (size // 2)
        expected = np.fft.fft(signal[start : start + size] * win)
        np.testing.assert_allclose(spec[idx], expected, atol=1e-10)


def test_stft_interleaves_real_and_imaginary_parts() -> None:
    signal = np.random.default_rng(4).standard_normal(16)
    flat = run_stft(signal, 8, "rectangle")
    first = np.fft.fft(signal[:8])
    np.testing.assert_allclose(flat[0:16:2], first.real, atol=1e-12)
    np.testing.assert_allclose(flat[1:16:2], first.imag, atol=1e-12)


def test_stft_odd_size_truncates_hop() -> None:
    plan = STFTPlan(fft_size=5)
    assert plan.hop_size == 2
    assert plan.frame_count(11) == 4
    assert run_stft(np.ones(11), 5, "hann").shape == (4 * 5 * 2,)


def test_stft_rejects_size_without_hop() -> None:
    with pytest.raises(ValueError, match="non-zero hop"):
        run_stft(np.ones(8), 1, "hann")


def test_stft_rejects_zero_size() -> None:
    with pytest.raises(ValueError, match="positive"):
        run_stft(np.ones(8), 0, "hann")


def test_unflatten_rejects_partial_frames() -> None:
    with pytest.raises(ValueError, match="whole number of frames"):
        unflatten_spectrogram(np.zeros(10), 4)


def test_frame_times_use_half_size_hop() -> None:
    np.testing.assert_allclose(frame_times(3, 100, 1000.0), [0.0, 0.05, 0.1])


def test_stft_rejects_non_integer_size() -> None:
    with pytest.raises(TypeError):
        run_stft(np.ones(64), 16.5, "hann")
