"""Phase unwrapping."""

from __future__ import annotations

from typing import MutableSequence, TypeVar

import numpy as np


TPhases = TypeVar("TPhases", np.ndarray, MutableSequence[float])


def unwrap_phase(phases: TPhases) -> TPhases:
    r"""
    Remove artificial :math:`2\pi` jumps from ``phases`` in place.

    Each step :math:`d_i = \phi_i - \phi_{i-1}` with :math:`|d_i| \ge \pi` is
    folded into :math:`[-\pi, \pi)` and the difference between the folded and
    the raw step is accumulated:

    $$
       c_i = \sum_{j \le i} \big(\mathrm{fold}(d_j) - d_j\big), \quad
       \hat{\phi}_i = \phi_i + c_i
    $$

    A fold that lands on :math:`-\pi` for a positive step is taken as
    :math:`+\pi`. The first value is the reference and is never modified.

    Parameters
    ----------
    phases : ndarray or mutable sequence of float
        Phase trace in radians. NumPy arrays must have a floating dtype and
        are updated element-wise; other sequences go through slice assignment.

    Returns
    -------
    ndarray or mutable sequence of float
        ``phases`` itself, after correction.
    """
    if isinstance(phases, np.ndarray) and not np.issubdtype(phases.dtype, np.floating):
        raise ValueError(
            "phases must be a floating-point array to be corrected in place, "
            f"got dtype={phases.dtype}"
        )
    values = np.asarray(phases, dtype=np.float64)
    if values.ndim != 1:
        raise ValueError(f"phases must be 1-D, got ndim={values.ndim}")
    if values.shape[0] < 2:
        return phases

    diff = np.diff(values)
    folded = np.mod(diff + np.pi, 2.0 * np.pi) - np.pi
    folded[(folded == -np.pi) & (diff > 0)] = np.pi
    correction = folded - diff
    correction[np.abs(diff) < np.pi] = 0.0

    corrected = values[1:] + np.cumsum(correction)
    if isinstance(phases, np.ndarray):
        phases[1:] = corrected
    else:
        phases[1:] = corrected.tolist()
    return phases
