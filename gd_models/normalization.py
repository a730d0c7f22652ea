from __future__ import annotations

"""
Per-column feature scaling. Statistics are fitted once on the training matrix
and reapplied unchanged to every later row.
"""

from typing import NamedTuple

import numpy as np

from .data_prep import as_feature_matrix
from .errors import DimensionMismatchError, EmptyDatasetError


class ZScoreStats(NamedTuple):
    mean: np.ndarray
    std: np.ndarray

    def apply(self, X):
        # Zero-variance columns pass through unscaled (not shifted to zero).
        return _scale(X, self.mean, self.std)


class MinMaxStats(NamedTuple):
    min: np.ndarray
    max: np.ndarray

    def apply(self, X):
        return _scale(X, self.min, self.max - self.min)


def _scale(X, offset: np.ndarray, scale: np.ndarray):
    arr = np.asarray(X, dtype=float)
    single_row = arr.ndim <= 1
    rows = np.atleast_2d(arr)
    if rows.shape[1] != len(offset):
        raise DimensionMismatchError(
            f"Row has {rows.shape[1]} features, statistics cover {len(offset)}"
        )
    nonzero = scale != 0
    out = rows.copy()
    out[:, nonzero] = (rows[:, nonzero] - offset[nonzero]) / scale[nonzero]
    return out[0] if single_row else out


def fit_normalizer(X, method: str = "zscore"):
    """
    Compute per-column statistics from a training matrix.

    zscore uses the population standard deviation (ddof=0); minmax stores the
    column range.
    """
    arr = as_feature_matrix(X)
    if arr.shape[0] == 0:
        raise EmptyDatasetError("Cannot fit normalization statistics on zero samples.")

    if method == "zscore":
        return ZScoreStats(mean=arr.mean(axis=0), std=arr.std(axis=0))
    if method == "minmax":
        return MinMaxStats(min=arr.min(axis=0), max=arr.max(axis=0))
    raise ValueError(f"Unknown normalization method: {method}")


def apply_normalizer(stats, X):
    """Scale a single row (returns 1-D) or a matrix with previously fitted stats."""
    return stats.apply(X)
