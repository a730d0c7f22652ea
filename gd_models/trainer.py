from __future__ import annotations

"""
Batch gradient descent for generalized linear models. Linear and logistic
regression share one routine and differ only in the link function.
"""

from typing import Callable, NamedTuple

import numpy as np

from .constants import INIT_SCALE, LINEAR_DEFAULTS, LOGISTIC_DEFAULTS, REPORT_EVERY
from .data_prep import validate_dataset
from .errors import DimensionMismatchError
from .metrics import log_loss, mse
from .normalization import fit_normalizer


def sigmoid(z):
    # Not clipped: overflow in exp propagates exactly as numpy reports it.
    return 1.0 / (1.0 + np.exp(-z))


def identity(z):
    return z


class Link(NamedTuple):
    """Transform applied to bias + w.x, paired with the metric reported while training."""

    name: str
    forward: Callable
    metric: Callable
    metric_name: str


IDENTITY = Link("identity", identity, mse, "mse")
SIGMOID = Link("sigmoid", sigmoid, log_loss, "log_loss")


class Parameters(NamedTuple):
    bias: float
    weights: np.ndarray


def init_parameters(n_features: int, random_state: int | None = None) -> Parameters:
    """Zero parameters, or uniform in [-0.5, 0.5) when a seed is given."""
    if random_state is None:
        return Parameters(0.0, np.zeros(n_features))
    rng = np.random.default_rng(random_state)
    values = rng.random(n_features + 1) - INIT_SCALE
    return Parameters(float(values[0]), values[1:])


def train(
    X,
    y,
    link: Link = IDENTITY,
    lr: float = 0.01,
    epochs: int = 1000,
    init: Parameters | None = None,
    callback: Callable[[int, float], None] | None = None,
) -> Parameters:
    """
    Fit bias and weights with batch gradient descent.

    Runs epochs 0..epochs inclusive. Each update uses gradients computed from
    the parameters before that update. Every REPORT_EVERY epochs the link's
    metric is evaluated after the update and passed to callback(epoch, metric).
    """
    X_arr, y_arr = validate_dataset(X, y)
    n_samples, n_features = X_arr.shape

    if init is None:
        init = init_parameters(n_features)
    if len(init.weights) != n_features:
        raise DimensionMismatchError(
            f"Rows have {n_features} features, weight vector has {len(init.weights)}"
        )

    bias = float(init.bias)
    weights = np.array(init.weights, dtype=float)

    for epoch in range(epochs + 1):
        preds = link.forward(bias + X_arr @ weights)
        error = preds - y_arr
        grad_w = (X_arr.T @ error) / n_samples
        grad_b = float(np.mean(error))

        weights = weights - lr * grad_w
        bias = bias - lr * grad_b

        if callback is not None and epoch % REPORT_EVERY == 0:
            callback(epoch, link.metric(y_arr, link.forward(bias + X_arr @ weights)))

    return Parameters(bias, weights)


def predict(params: Parameters, X, link: Link = IDENTITY):
    """g(bias + w.x) for one row (returns float) or a matrix (returns array)."""
    arr = np.asarray(X, dtype=float)
    single_row = arr.ndim <= 1
    rows = np.atleast_2d(arr)
    if rows.shape[1] != len(params.weights):
        raise DimensionMismatchError(
            f"Row has {rows.shape[1]} features, weight vector has {len(params.weights)}"
        )
    out = link.forward(params.bias + rows @ params.weights)
    return float(out[0]) if single_row else out


class TrainedModel(NamedTuple):
    """Parameters plus the statistics and link they were fitted with."""

    params: Parameters
    stats: object | None
    link: Link

    def predict(self, X):
        if self.stats is not None:
            X = self.stats.apply(X)
        return predict(self.params, X, self.link)


class _GradientDescentModel:
    """
    Shared fit/predict surface. Features are normalized with statistics fitted
    on the training matrix and the same statistics are reused at predict time.
    """

    link: Link = IDENTITY

    def __init__(
        self,
        lr: float,
        epochs: int,
        normalize: str | None = "zscore",
        random_state: int | None = None,
        verbose: bool = False,
    ):
        self.lr = lr
        self.epochs = epochs
        self.normalize = normalize
        self.random_state = random_state
        self.verbose = verbose
        self.params_: Parameters | None = None
        self.stats_ = None
        self.history_: list[tuple[int, float]] = []

    def _record(self, epoch: int, metric: float):
        self.history_.append((epoch, metric))
        if self.verbose:
            print(f"[GD] epoch={epoch}, {self.link.metric_name}={metric:.4f}")

    def fit(self, X, y):
        """Train the model with batch gradient descent."""
        X_arr, y_arr = validate_dataset(X, y)
        self.stats_ = fit_normalizer(X_arr, self.normalize) if self.normalize else None
        X_train = self.stats_.apply(X_arr) if self.stats_ is not None else X_arr

        self.history_ = []
        self.params_ = train(
            X_train,
            y_arr,
            link=self.link,
            lr=self.lr,
            epochs=self.epochs,
            init=init_parameters(X_arr.shape[1], self.random_state),
            callback=self._record,
        )
        self.intercept_ = self.params_.bias
        self.coef_ = self.params_.weights.copy()
        return self

    def trained_model(self) -> TrainedModel:
        if self.params_ is None:
            raise RuntimeError("Model is not fitted.")
        return TrainedModel(self.params_, self.stats_, self.link)

    def _link_output(self, X):
        model = self.trained_model()
        arr = np.asarray(X, dtype=float)
        # A flat input to a one-feature model is a column of samples.
        if arr.ndim == 1 and len(model.params.weights) == 1 and len(arr) != 1:
            arr = arr.reshape(-1, 1)
        return model.predict(arr)

    def score(self, X, y) -> float:
        """Training metric (MSE or log loss) on the given data."""
        return self.link.metric(y, self._link_output(X))


class LinearRegressionGD(_GradientDescentModel):
    """Least-squares regression fitted by batch gradient descent."""

    link = IDENTITY

    def __init__(
        self,
        lr: float = LINEAR_DEFAULTS[0],
        epochs: int = LINEAR_DEFAULTS[1],
        normalize: str | None = "zscore",
        random_state: int | None = None,
        verbose: bool = False,
    ):
        super().__init__(lr, epochs, normalize, random_state, verbose)

    def predict(self, X):
        return self._link_output(X)


class LogisticRegressionGD(_GradientDescentModel):
    """
    Binary logistic regression trained with batch gradient descent on
    cross-entropy.
    """

    link = SIGMOID

    def __init__(
        self,
        lr: float = LOGISTIC_DEFAULTS[0],
        epochs: int = LOGISTIC_DEFAULTS[1],
        normalize: str | None = "zscore",
        random_state: int | None = None,
        verbose: bool = False,
    ):
        super().__init__(lr, epochs, normalize, random_state, verbose)

    def predict_proba(self, X):
        """Return P(y=1) for a row (float) or each row in X."""
        return self._link_output(X)

    def predict(self, X, threshold: float = 0.5):
        """Binary predictions using the provided threshold."""
        labels = (np.asarray(self.predict_proba(X)) >= threshold).astype(int)
        return int(labels) if labels.ndim == 0 else labels
