from __future__ import annotations

"""
Dataset loading and shape checks. The numeric core accepts already-parsed
matrices; this module turns CSV files and loose Python rows into them.
"""

from pathlib import Path

import numpy as np
import pandas as pd
from sklearn.model_selection import train_test_split

from .errors import DimensionMismatchError, EmptyDatasetError


def as_feature_matrix(X) -> np.ndarray:
    """
    Coerce X into a 2-D float array of shape (n_samples, n_features).

    Nested sequences are checked row by row so that ragged input fails with
    DimensionMismatchError instead of numpy's generic error. A flat sequence
    is read as a single feature column.
    """
    if isinstance(X, (pd.DataFrame, pd.Series, np.ndarray)):
        arr = np.asarray(X, dtype=float)
    else:
        rows = [np.atleast_1d(np.asarray(row, dtype=float)) for row in X]
        widths = sorted({len(row) for row in rows})
        if len(widths) > 1:
            raise DimensionMismatchError(
                f"Rows have inconsistent feature counts: {widths}"
            )
        arr = np.array(rows, dtype=float) if rows else np.empty((0, 0))

    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    if arr.ndim != 2:
        raise DimensionMismatchError(f"Expected a 2-D feature matrix, got {arr.ndim} dims")
    return arr


def validate_dataset(X, y) -> tuple[np.ndarray, np.ndarray]:
    """Return (X, y) as float arrays, enforcing non-empty, equal-length rows."""
    X_arr = as_feature_matrix(X)
    if X_arr.shape[0] == 0:
        raise EmptyDatasetError("Dataset has no samples.")
    y_arr = np.asarray(y, dtype=float).ravel()
    if len(y_arr) != X_arr.shape[0]:
        raise DimensionMismatchError(
            f"Got {X_arr.shape[0]} feature rows but {len(y_arr)} labels"
        )
    return X_arr, y_arr


def load_dataset(csv_path: Path, header: bool = True):
    """
    Read a numeric CSV whose last column is the label.

    Returns (X, y, meta) with X as a DataFrame of features and y as a Series.
    """
    try:
        df = pd.read_csv(csv_path, header=0 if header else None)
    except pd.errors.EmptyDataError:
        raise EmptyDatasetError(f"No data in {csv_path}") from None

    if df.shape[1] < 2:
        raise ValueError(
            f"Data format error in {csv_path}: need at least one feature and a label column"
        )

    if df.empty:
        raise EmptyDatasetError(f"No samples in {csv_path}")

    numeric = df.apply(pd.to_numeric, errors="coerce")
    bad_cols = [str(c) for c in df.columns[numeric.isna().any().to_numpy()]]
    if bad_cols:
        raise ValueError(
            f"Data format error in {csv_path}: non-numeric or missing values in {bad_cols}"
        )

    if not header:
        numeric.columns = [f"x{i}" for i in range(numeric.shape[1] - 1)] + ["label"]

    X = numeric.iloc[:, :-1].astype(float)
    y = numeric.iloc[:, -1].astype(float)
    meta = {
        "num_samples": len(X),
        "feature_count": X.shape[1],
        "feature_names": [str(c) for c in X.columns],
        "label_name": str(y.name),
    }
    return X, y, meta


def parse_feature_vector(text: str) -> list[float]:
    """Parse a comma-separated CLI value such as "1000,2,2,1"."""
    parts = [p.strip() for p in text.split(",")]
    # one trailing comma is tolerated; any other gap would shift later columns
    if len(parts) > 1 and not parts[-1]:
        parts = parts[:-1]
    if not any(parts):
        raise ValueError("Empty feature vector")
    if not all(parts):
        raise ValueError(f"Empty value in feature vector: {text!r}")
    try:
        return [float(p) for p in parts]
    except ValueError:
        raise ValueError(f"Non-numeric value in feature vector: {text!r}") from None


def make_train_test_split(
    X,
    y,
    test_size: float = 0.2,
    random_state: int | None = 42,
    stratify: bool = False,
):
    """Split row positions into train/test index arrays (optionally stratified on y)."""
    positions = np.arange(len(y))
    train_ids, test_ids = train_test_split(
        positions,
        test_size=test_size,
        random_state=random_state,
        stratify=np.asarray(y) if stratify else None,
    )
    return np.sort(train_ids), np.sort(test_ids)
