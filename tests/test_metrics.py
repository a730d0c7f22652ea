import numpy as np
import pytest

from gd_models import compute_classification_metrics, compute_regression_metrics
from gd_models.metrics import log_loss, mse


def test_mse():
    assert mse([1.0, 2.0, 3.0], [1.0, 2.0, 5.0]) == pytest.approx(4.0 / 3.0)


def test_log_loss_epsilon_keeps_it_finite():
    assert np.isfinite(log_loss([1, 0], [0.0, 1.0]))
    assert log_loss([1, 0], [1.0, 0.0]) == pytest.approx(0.0, abs=1e-9)
    assert log_loss([1], [0.5]) == pytest.approx(np.log(2), abs=1e-8)


def test_regression_summary():
    m = compute_regression_metrics([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])
    assert m["mse"] == 0.0
    assert m["r2"] == pytest.approx(1.0)


def test_classification_summary():
    m = compute_classification_metrics(np.array([0, 1, 1, 0]), np.array([0.1, 0.8, 0.4, 0.3]))
    assert m["accuracy"] == pytest.approx(0.75)
    assert m["confusion_matrix"].tolist() == [[2, 0], [1, 1]]
