import numpy as np
import pytest

from fruit_logreg import (
    FruitLogisticRegression,
    gradient_descent_step,
    log_loss,
    logistic_regression,
    populate_all_fruit,
    predict,
    predict_proba,
    sigmoid,
)


def test_sigmoid_midpoint_and_symmetry():
    assert sigmoid(0.0) == 0.5
    for x in [-30.0, -3.5, -0.1, 0.7, 12.0, 35.0]:
        assert sigmoid(x) + sigmoid(-x) == pytest.approx(1.0)


def test_sigmoid_is_monotonic():
    z = np.linspace(-20, 20, 401)
    assert np.all(np.diff(sigmoid(z)) > 0)


def test_sigmoid_extreme_inputs_do_not_overflow():
    with np.errstate(over="raise"):
        assert sigmoid(-5000.0) >= 0.0
        assert sigmoid(5000.0) == pytest.approx(1.0)


@pytest.mark.parametrize("length", [1, 3, 7])
def test_predict_strictly_between_zero_and_one(length, rng):
    for _ in range(20):
        weights = rng.uniform(-1, 1, size=length)
        sample = rng.uniform(-5, 5, size=length)
        p = predict(weights, sample)
        assert 0.0 < p < 1.0


def test_predict_matches_manual_dot_product():
    weights = [0.1, -0.2, 0.3]
    sample = [5.0, 15.0, 1.0]
    expected = 1.0 / (1.0 + np.exp(-(0.5 - 3.0 + 0.3)))
    assert predict(weights, sample) == pytest.approx(expected)


def test_predict_is_pure():
    weights = np.array([-1.08, 0.31, 2.28])
    sample = np.array([5.02, 14.9, 1.0])
    first = predict(weights, sample)
    second = predict(weights, sample)
    assert first == second
    np.testing.assert_array_equal(weights, [-1.08, 0.31, 2.28])


def test_predict_rejects_length_mismatch():
    with pytest.raises(ValueError):
        predict([0.1, 0.1], [1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        predict_proba([0.1, 0.1, 0.1], np.ones((4, 2)))


def test_gradient_step_matches_per_sample_accumulation():
    """vectorised update equals the explicit sum over samples"""
    X = np.array([[5.0, 15.0, 1.0], [13.0, 24.0, 2.0], [150.0, 450.0, 1.0]])
    y = np.array([1.0, 0.0, 0.0])
    w = np.full(3, 0.1)

    gradient = np.zeros(3)
    for sample, label in zip(X, y):
        p = 1.0 / (1.0 + np.exp(-np.dot(w, sample)))
        gradient += (label - p) * sample
    expected = w + 0.05 * gradient / len(X)

    np.testing.assert_allclose(gradient_descent_step(w, X, y, 0.05), expected)
    # input untouched
    np.testing.assert_array_equal(w, np.full(3, 0.1))


def test_gradient_step_near_zero_when_labels_match_predictions():
    w = np.array([10.0, 10.0, 10.0])
    X = np.array([[1.0, 1.0, 1.0], [-1.0, -1.0, -1.0], [2.0, 1.0, 0.5]])
    y = np.round(predict_proba(w, X))
    new_w = gradient_descent_step(w, X, y, 0.05)
    assert np.max(np.abs(new_w - w)) < 1e-9


def test_gradient_step_single_sample():
    X = np.array([[5.0, 15.0, 1.0]])
    y = np.array([1.0])
    new_w = gradient_descent_step(np.full(3, 0.1), X, y, 0.05)
    assert np.all(np.isfinite(new_w))
    # positive label pulls every weight up
    assert np.all(new_w > 0.1)


def test_gradient_step_shape_errors():
    X = np.ones((3, 3))
    with pytest.raises(ValueError):
        gradient_descent_step(np.ones(3), X, np.ones(2), 0.05)
    with pytest.raises(ValueError):
        gradient_descent_step(np.ones(2), X, np.ones(3), 0.05)
    with pytest.raises(ValueError):
        gradient_descent_step(np.ones(3), np.empty((0, 3)), np.empty(0), 0.05)
    with pytest.raises(ValueError):
        gradient_descent_step(np.ones(3), np.ones(3), np.ones(3), 0.05)


def test_logistic_regression_zero_epochs_returns_initial_weights(rng):
    X, y = populate_all_fruit(5, rng)
    np.testing.assert_array_equal(logistic_regression(X, y, 0.05, 0), np.full(3, 0.1))


def test_logistic_regression_runs_exact_epoch_count(rng):
    X, y = populate_all_fruit(5, rng)
    w = np.full(3, 0.1)
    for _ in range(3):
        w = gradient_descent_step(w, X, y, 0.05)
    np.testing.assert_allclose(logistic_regression(X, y, 0.05, 3), w)


def test_logistic_regression_rejects_bad_input(rng):
    with pytest.raises(ValueError):
        logistic_regression(np.empty((0, 3)), np.empty(0), 0.05, 10)
    X, y = populate_all_fruit(2, rng)
    with pytest.raises(ValueError):
        logistic_regression(X, y[:-1], 0.05, 10)
    with pytest.raises(ValueError):
        logistic_regression(X, y, 0.05, -1)


def test_logistic_regression_verbose_prints_loss(rng, capsys):
    X, y = populate_all_fruit(3, rng)
    logistic_regression(X, y, 0.05, 100, verbose=True)
    out = capsys.readouterr().out
    assert "[GD] epoch=50" in out
    assert "[GD] epoch=100" in out


def test_estimator_fit_and_predict(rng):
    X, y = populate_all_fruit(200, rng)
    model = FruitLogisticRegression(lr=0.05, num_epochs=200)
    model.fit(X, y)

    assert model.coef_.shape == (3,)
    assert model.n_iter_ == 200
    assert len(model.loss_history_) == 200
    assert model.loss_history_[-1] < model.loss_history_[0]
    np.testing.assert_allclose(model.coef_, logistic_regression(X, y, 0.05, 200))

    preds = model.predict(X)
    assert set(np.unique(preds)) <= {0, 1}
    assert np.mean(preds == y) > 0.9


def test_estimator_requires_fit():
    with pytest.raises(RuntimeError):
        FruitLogisticRegression().predict_proba(np.ones((1, 3)))


def test_log_loss_is_small_for_confident_correct_model():
    w = np.array([10.0, 10.0, 10.0])
    X = np.array([[1.0, 1.0, 1.0], [-1.0, -1.0, -1.0]])
    assert log_loss(w, X, [1.0, 0.0]) < 1e-6
    assert log_loss(w, X, [0.0, 1.0]) > 10.0
