import numpy as np
import pytest

from fourierview import WindowShape, generate_window


@pytest.mark.parametrize("shape", list(WindowShape))
@pytest.mark.parametrize("length", [1, 2, 7, 64])
def test_generate_window_length_and_range(shape: WindowShape, length: int) -> None:
    win = generate_window(shape, length)
    assert win.shape == (length,)
    assert np.all(win >= 0.0)
    assert np.all(win <= 1.0)


def test_rectangle_window_is_all_ones() -> None:
    np.testing.assert_array_equal(generate_window("rectangle", 5), np.ones(5))


def test_cosine_windows_match_periodic_formulas() -> None:
    n = 16
    i = np.arange(n)
    phase = 2.0 * np.pi * i / n
    np.testing.assert_allclose(
        generate_window("hann", n), 0.5 - 0.5 * np.cos(phase), atol=1e-12
    )
    np.testing.assert_allclose(
        generate_window("hamming", n), 0.54 - 0.46 * np.cos(phase), atol=1e-12
    )
    np.testing.assert_allclose(
        generate_window("blackman", n),
        0.42 - 0.5 * np.cos(phase) + 0.08 * np.cos(2.0 * phase),
        atol=1e-12,
    )


def test_single_point_windows_follow_formula() -> None:
    np.testing.assert_allclose(generate_window("hann", 1), [0.0], atol=1e-12)
    np.testing.assert_allclose(generate_window("hamming", 1), [0.08], atol=1e-12)
    np.testing.assert_allclose(generate_window("blackman", 1), [0.0], atol=1e-12)


def test_zero_length_window_is_empty() -> None:
    for shape in WindowShape:
        assert generate_window(shape, 0).shape == (0,)


def test_negative_length_rejected() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        generate_window("hann", -1)


def test_parse_window_names() -> None:
    assert WindowShape.parse("Hann") is WindowShape.HANN
    assert WindowShape.parse("BLACKMAN") is WindowShape.BLACKMAN
    assert WindowShape.parse("boxcar") is WindowShape.RECTANGLE
    assert WindowShape.parse(WindowShape.HAMMING) is WindowShape.HAMMING
    with pytest.raises(ValueError, match="Available windows"):
        WindowShape.parse("kaiser")


def test_non_integer_length_rejected() -> None:
    with pytest.raises(TypeError):
        generate_window("hann", 4.5)
    assert generate_window("hann", np.int32(4)).shape == (4,)
