"""
Linear and logistic regression trained with batch gradient descent, a
per-column feature normalizer, and a per-column averaging ensemble.

The numeric core lives in normalization.py, trainer.py and ensemble.py;
data_prep.py, metrics.py and plots.py are the collaborators used by main.py.
"""

from .data_prep import load_dataset, make_train_test_split, parse_feature_vector, validate_dataset
from .ensemble import ColumnModel, PerColumnEnsemble
from .errors import DimensionMismatchError, EmptyDatasetError
from .metrics import compute_classification_metrics, compute_regression_metrics, summarize_coefficients
from .normalization import MinMaxStats, ZScoreStats, apply_normalizer, fit_normalizer
from .trainer import (
    IDENTITY,
    SIGMOID,
    LinearRegressionGD,
    Link,
    LogisticRegressionGD,
    Parameters,
    TrainedModel,
    predict,
    train,
)

__all__ = [
    "IDENTITY",
    "SIGMOID",
    "ColumnModel",
    "DimensionMismatchError",
    "EmptyDatasetError",
    "LinearRegressionGD",
    "Link",
    "LogisticRegressionGD",
    "MinMaxStats",
    "Parameters",
    "PerColumnEnsemble",
    "TrainedModel",
    "ZScoreStats",
    "apply_normalizer",
    "compute_classification_metrics",
    "compute_regression_metrics",
    "fit_normalizer",
    "load_dataset",
    "make_train_test_split",
    "parse_feature_vector",
    "predict",
    "summarize_coefficients",
    "train",
    "validate_dataset",
]
