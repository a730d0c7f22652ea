import numpy as np
import pytest

from gd_models import (
    IDENTITY,
    SIGMOID,
    DimensionMismatchError,
    EmptyDatasetError,
    LinearRegressionGD,
    Link,
    LogisticRegressionGD,
    Parameters,
    apply_normalizer,
    predict,
    train,
)
from gd_models.metrics import log_loss
from gd_models.trainer import init_parameters, sigmoid

X_LINE = [[1.0], [2.0], [3.0], [4.0], [5.0]]
Y_LINE = [2.0, 4.0, 6.0, 8.0, 10.0]
Y_CLASS = [0, 0, 0, 1, 1]


def test_linear_converges_on_perfect_line():
    params = train(X_LINE, Y_LINE, IDENTITY, lr=0.03, epochs=1000)
    assert abs(params.bias) < 1e-2
    assert abs(params.weights[0] - 2.0) < 1e-2
    assert predict(params, [7.0]) == pytest.approx(14.0, abs=0.05)


def test_logistic_separates_toy_classes():
    model = LogisticRegressionGD(lr=0.1, epochs=1000, normalize=None).fit(X_LINE, Y_CLASS)
    assert model.predict([2.5]) == 0
    assert model.predict([4.5]) == 1
    probs = model.predict_proba(np.linspace(0, 6, 25))
    assert np.all(np.diff(probs) > 0)


def test_logistic_with_zscore_scaling():
    model = LogisticRegressionGD().fit(X_LINE, Y_CLASS)
    assert model.predict([2.5]) == 0
    assert model.predict([4.5]) == 1
    assert 0.0 < model.predict_proba([3.5]) < 1.0


def test_single_update_matches_hand_computed_gradient():
    # one epoch: pred=0, err=-y, grad_b=-6, grad_w=-mean(x*y)=-22
    params = train(X_LINE, Y_LINE, IDENTITY, lr=0.01, epochs=0)
    assert params.bias == pytest.approx(0.06)
    assert params.weights[0] == pytest.approx(0.22)


def test_epochs_are_inclusive_and_reported_every_100():
    seen = []
    train(X_LINE, Y_LINE, IDENTITY, lr=0.03, epochs=300, callback=lambda e, m: seen.append((e, m)))
    assert [e for e, _ in seen] == [0, 100, 200, 300]
    assert seen[-1][1] < seen[0][1]


def test_callback_does_not_change_result():
    quiet = train(X_LINE, Y_CLASS, SIGMOID, lr=0.1, epochs=250)
    loud = train(X_LINE, Y_CLASS, SIGMOID, lr=0.1, epochs=250, callback=lambda e, m: None)
    assert quiet.bias == loud.bias
    assert np.array_equal(quiet.weights, loud.weights)


def test_predict_is_idempotent():
    params = train(X_LINE, Y_CLASS, SIGMOID, lr=0.1, epochs=200)
    first = predict(params, [3.3], SIGMOID)
    second = predict(params, [3.3], SIGMOID)
    assert first == second


def test_init_parameters_not_mutated():
    init = Parameters(0.0, np.zeros(1))
    train(X_LINE, Y_LINE, IDENTITY, lr=0.03, epochs=10, init=init)
    assert np.array_equal(init.weights, np.zeros(1))


def test_ragged_rows_fail_before_any_gradient():
    def explode(z):
        raise AssertionError("gradient computed")

    link = Link("explode", explode, lambda y, p: 0.0, "none")
    with pytest.raises(DimensionMismatchError):
        train([[1.0, 2.0], [3.0]], [1.0, 2.0], link)


def test_label_count_mismatch():
    with pytest.raises(DimensionMismatchError):
        train(X_LINE, [1.0, 2.0], IDENTITY)


def test_empty_training_set():
    with pytest.raises(EmptyDatasetError):
        train([], [], IDENTITY)


def test_predict_rejects_wrong_width():
    params = Parameters(0.0, np.zeros(2))
    with pytest.raises(DimensionMismatchError):
        predict(params, [1.0, 2.0, 3.0])


def test_init_weights_must_match_feature_count():
    with pytest.raises(DimensionMismatchError):
        train(X_LINE, Y_LINE, IDENTITY, init=Parameters(0.0, np.zeros(3)))


def test_random_init_is_seeded_and_small():
    a = init_parameters(4, random_state=7)
    b = init_parameters(4, random_state=7)
    assert a.bias == b.bias
    assert np.array_equal(a.weights, b.weights)
    assert np.all(np.abs(a.weights) <= 0.5)
    zero = init_parameters(4)
    assert zero.bias == 0.0 and not zero.weights.any()


def test_divergence_is_not_guarded():
    with np.errstate(over="ignore", invalid="ignore"):
        params = train([[100.0], [200.0], [300.0]], [1.0, 2.0, 3.0], IDENTITY, lr=1.0, epochs=200)
    assert not np.all(np.isfinite(params.weights))


def test_sigmoid_values():
    assert sigmoid(0.0) == 0.5
    assert sigmoid(np.array([-50.0, 50.0])) == pytest.approx([0.0, 1.0], abs=1e-12)


def test_estimator_matches_manual_normalize_then_predict():
    rng = np.random.default_rng(3)
    X = rng.normal(size=(40, 3)) * [1.0, 10.0, 100.0]
    y = X @ [2.0, -0.5, 0.01] + 4.0
    model = LinearRegressionGD(lr=0.05, epochs=500).fit(X, y)

    manual = predict(model.params_, apply_normalizer(model.stats_, X), IDENTITY)
    assert np.allclose(model.predict(X), manual)
    assert model.predict(X[0]) == pytest.approx(manual[0])
    assert model.score(X, y) < 1e-2


def test_estimator_history_and_verbose(capsys):
    model = LinearRegressionGD(epochs=200, verbose=True).fit(X_LINE, Y_LINE)
    assert [e for e, _ in model.history_] == [0, 100, 200]
    out = capsys.readouterr().out
    assert "[GD] epoch=0, mse=" in out


def test_trained_model_pairs_params_stats_link():
    model = LogisticRegressionGD(normalize="minmax").fit(X_LINE, Y_CLASS)
    trained = model.trained_model()
    assert trained.link is SIGMOID
    assert trained.stats is model.stats_
    assert trained.predict([4.0]) == pytest.approx(model.predict_proba([4.0]))


def test_unfitted_estimator():
    with pytest.raises(RuntimeError):
        LinearRegressionGD().predict([[1.0]])


def test_logistic_history_reports_log_loss():
    model = LogisticRegressionGD(epochs=200).fit(X_LINE, Y_CLASS)
    last_epoch, last_metric = model.history_[-1]
    assert last_epoch == 200
    assert last_metric == pytest.approx(log_loss(Y_CLASS, model.predict_proba(X_LINE)))
    assert last_metric < model.history_[0][1]


def test_coef_is_a_copy_of_the_fitted_weights():
    model = LinearRegressionGD(normalize=None).fit(X_LINE, Y_LINE)
    before = model.predict([7.0])
    model.coef_[0] = 100.0
    assert model.predict([7.0]) == before
    assert model.params_.weights[0] != 100.0
