from __future__ import annotations

"""
Per-column ensemble: one single-feature model per column, each trained
against the full label vector, combined by a plain average at predict time.
"""

from typing import Sequence

import numpy as np

from .constants import PIPELINE_DEFAULTS
from .data_prep import validate_dataset
from .errors import DimensionMismatchError
from .trainer import IDENTITY, SIGMOID, Link, Parameters, init_parameters, predict, train


class ColumnModel:
    """Scalar sub-model fitted on a single feature column."""

    def __init__(self, params: Parameters, link: Link):
        self.params = params
        self.link = link

    def predict(self, value: float) -> float:
        return predict(self.params, [value], self.link)

    def __repr__(self):
        return (
            f"ColumnModel(link={self.link.name}, bias={self.params.bias:.4f}, "
            f"weight={self.params.weights[0]:.4f})"
        )


class PerColumnEnsemble:
    """
    is_binary[j] picks the link for column j: logistic when True, linear
    otherwise. Columns are used raw, without normalization.
    """

    def __init__(
        self,
        is_binary: Sequence[bool],
        lr: float = PIPELINE_DEFAULTS[0],
        epochs: int = PIPELINE_DEFAULTS[1],
        random_state: int | None = None,
        verbose: bool = False,
    ):
        self.is_binary = [bool(flag) for flag in is_binary]
        self.lr = lr
        self.epochs = epochs
        self.random_state = random_state
        self.verbose = verbose
        self.models_: list[ColumnModel] = []
        self.history_: dict[int, list[tuple[int, float]]] = {}

    def fit(self, X, y):
        X_arr, y_arr = validate_dataset(X, y)
        if X_arr.shape[1] != len(self.is_binary):
            raise DimensionMismatchError(
                f"Got {X_arr.shape[1]} columns but {len(self.is_binary)} link tags"
            )

        self.models_ = []
        self.history_ = {}
        for j, binary in enumerate(self.is_binary):
            link = SIGMOID if binary else IDENTITY
            seed = None if self.random_state is None else self.random_state + j
            history = self.history_.setdefault(j, [])

            def record(epoch, metric, j=j, link=link, history=history):
                history.append((epoch, metric))
                if self.verbose:
                    print(f"[GD] column={j}, epoch={epoch}, {link.metric_name}={metric:.4f}")

            params = train(
                X_arr[:, [j]],
                y_arr,
                link=link,
                lr=self.lr,
                epochs=self.epochs,
                init=init_parameters(1, seed),
                callback=record,
            )
            self.models_.append(ColumnModel(params, link))
        return self

    def predict(self, row) -> float:
        """Arithmetic mean of each sub-model's prediction on its own column value."""
        if not self.models_:
            raise RuntimeError("Model is not fitted.")
        values = np.asarray(row, dtype=float).ravel()
        if len(values) != len(self.models_):
            raise DimensionMismatchError(
                f"Row has {len(values)} features, ensemble has {len(self.models_)} sub-models"
            )
        total = 0.0
        for model, value in zip(self.models_, values):
            total += model.predict(value)
        return total / len(values)

    def predict_many(self, X) -> np.ndarray:
        return np.array([self.predict(row) for row in np.atleast_2d(np.asarray(X, dtype=float))])
