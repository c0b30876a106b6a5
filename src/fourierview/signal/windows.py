"""Analysis window generation."""

from __future__ import annotations

import operator
from enum import Enum

import numpy as np
from scipy.signal.windows import general_cosine


class WindowShape(str, Enum):
    """Supported window envelopes."""

    RECTANGLE = "rectangle"
    HANN = "hann"
    HAMMING = "hamming"
    BLACKMAN = "blackman"

    @classmethod
    def parse(cls, value: str | WindowShape) -> WindowShape:
        """Resolve an enum member or a case-insensitive window name."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(shape.value for shape in cls)
            raise ValueError(
                f"Unknown window '{value}'. Available windows: {valid}"
            ) from None


_ALIASES = {
    "boxcar": "rectangle",
    "rect": "rectangle",
    "rectangular": "rectangle",
    "hanning": "hann",
}

# Cosine-sum coefficients a_k for w[i] = sum_k (-1)^k a_k cos(2 pi k i / L).
_COSINE_COEFFS: dict[WindowShape, tuple[float, ...]] = {
    WindowShape.HANN: (0.5, 0.5),
    WindowShape.HAMMING: (0.54, 0.46),
    WindowShape.BLACKMAN: (0.42, 0.5, 0.08),
}


def generate_window(shape: str | WindowShape, length: int) -> np.ndarray:
    """Return the periodic ``shape`` window with ``length`` weights.

    Weights follow ``w[i] = a0 - a1 cos(2 pi i / L) + a2 cos(4 pi i / L)``
    with the coefficients of the chosen shape, so ``length`` samples cover
    exactly one period of the envelope.
    """
    shape = WindowShape.parse(shape)
    length = operator.index(length)
    if length < 0:
        raise ValueError(f"window length must be non-negative, got {length}")
    if shape is WindowShape.RECTANGLE:
        return np.ones(length, dtype=np.float64)
    # Symmetric L+1 point window with the last point dropped is the periodic
    # window; scipy's own periodic path returns ones for L == 1.
    weights = general_cosine(length + 1, _COSINE_COEFFS[shape], sym=True)[:-1]
    # Blackman ends evaluate to about -1e-17.
    return np.clip(weights, 0.0, 1.0)
