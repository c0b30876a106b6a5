import numpy as np
import pytest

from fourierview import SpectrumError, peak_frequencies, peak_phases, transform
from fourierview.analysis import (
    frequency_axis,
    phase_spectrum,
    power_spectrum,
    rank_bins,
)


def _spectrum_with(magnitudes, phases, size: int = 8) -> np.ndarray:
    spectrum = np.zeros(size, dtype=np.complex128)
    spectrum[: len(magnitudes)] = np.asarray(magnitudes) * np.exp(
        1j * np.asarray(phases)
    )
    return spectrum


def test_alternating_signal_peaks_at_quarter_rate() -> None:
    signal = [1, 0, -1, 0, 1, 0, -1, 0]
    spectrum = transform(signal, 8, "rectangle")
    np.testing.assert_allclose(peak_frequencies(spectrum, 8.0, 1), [2.0])


def test_peak_count_is_bounded_by_half_spectrum() -> None:
    rng = np.random.default_rng(0)
    spectrum = rng.standard_normal(10) + 1j * rng.standard_normal(10)
    assert peak_frequencies(spectrum, 10.0, 3).shape == (3,)
    assert peak_frequencies(spectrum, 10.0, 50).shape == (5,)
    assert peak_frequencies(spectrum, 10.0, 0).shape == (0,)


def test_peaks_are_ordered_by_descending_power() -> None:
    rng = np.random.default_rng(1)
    spectrum = rng.standard_normal(64) + 1j * rng.standard_normal(64)
    sample_rate = 640.0
    freqs = peak_frequencies(spectrum, sample_rate, 32)
    bins = np.rint(freqs / (sample_rate / 64)).astype(int)
    power = np.abs(spectrum[bins]) ** 2
    assert np.all(np.diff(power) <= 0.0)
    assert np.all(bins < 32)


def test_upper_half_is_ignored() -> None:
    spectrum = np.zeros(8, dtype=np.complex128)
    spectrum[6] = 100.0
    spectrum[1] = 1.0
    assert rank_bins(spectrum)[0] == 1
    np.testing.assert_allclose(peak_frequencies(spectrum, 8.0, 1), [1.0])


def test_equal_power_keeps_bin_order() -> None:
    spectrum = np.ones(8, dtype=np.complex128)
    np.testing.assert_array_equal(rank_bins(spectrum), [0, 1, 2, 3])
    np.testing.assert_allclose(peak_frequencies(spectrum, 16.0, 4), [0.0, 2.0, 4.0, 6.0])


def test_nan_power_is_fatal() -> None:
    spectrum = np.ones(8, dtype=np.complex128)
    spectrum[2] = np.nan
    with pytest.raises(SpectrumError, match="NaN"):
        peak_frequencies(spectrum, 8.0, 1)
    with pytest.raises(SpectrumError, match="NaN"):
        peak_phases(spectrum, 1)


def test_negative_count_rejected() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        peak_frequencies(np.ones(8), 8.0, -1)


def test_peak_phases_are_unwrapped_along_rank_order() -> None:
    # Rank order is bins [1, 3, 2, 0].
    spectrum = _spectrum_with([1.0, 4.0, 2.0, 3.0], [0.5, 0.0, -3.0, 3.0])
    phases = peak_phases(spectrum, 4)
    np.testing.assert_allclose(
        phases, [0.0, 3.0, -3.0 + 2.0 * np.pi, 0.5], atol=1e-12
    )


def test_peak_phases_respects_count() -> None:
    spectrum = _spectrum_with([1.0, 4.0, 2.0, 3.0], [0.5, 0.0, -3.0, 3.0])
    np.testing.assert_allclose(peak_phases(spectrum, 2), [0.0, 3.0], atol=1e-12)


def test_power_spectrum_covers_first_half() -> None:
    spectrum = np.array([1 + 1j, 2, 0, 1j, 5, 5], dtype=np.complex128)
    np.testing.assert_allclose(power_spectrum(spectrum), [2.0, 4.0, 0.0])


def test_phase_spectrum_is_unwrapped_across_bins() -> None:
    size = 16
    delay = 5
    impulse = np.zeros(size)
    impulse[delay] = 1.0
    spectrum = np.fft.fft(impulse)
    expected = -2.0 * np.pi * delay * np.arange(size // 2) / size
    np.testing.assert_allclose(phase_spectrum(spectrum), expected, atol=1e-9)


def test_frequency_axis_covers_first_half() -> None:
    np.testing.assert_allclose(frequency_axis(8, 80.0), [0.0, 10.0, 20.0, 30.0])
    np.testing.assert_allclose(frequency_axis(5, 50.0), [0.0, 10.0])


def test_empty_spectrum_rejected_by_both_peak_queries() -> None:
    empty = np.zeros(0, dtype=np.complex128)
    with pytest.raises(ValueError, match="at least one bin"):
        peak_frequencies(empty, 8.0, 1)
    with pytest.raises(ValueError, match="at least one bin"):
        peak_phases(empty, 1)


def test_non_integer_counts_rejected() -> None:
    spectrum = np.ones(8, dtype=np.complex128)
    with pytest.raises(TypeError):
        peak_frequencies(spectrum, 8.0, 1.5)
    with pytest.raises(TypeError):
        peak_phases(spectrum, 2.0)
    with pytest.raises(TypeError):
        frequency_axis(8.7, 80.0)
    np.testing.assert_allclose(peak_frequencies(spectrum, 8.0, np.int64(2)), [0.0, 1.0])
