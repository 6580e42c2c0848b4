from __future__ import annotations

"""
Logistic regression from scratch: sigmoid, prediction and full-batch gradient
descent without bias, scaling or regularization.
"""

import numpy as np

from .constants import DEFAULT_COUNT, DEFAULT_EPOCHS, DEFAULT_LEARNING_RATE, INITIAL_WEIGHT
from .samples import populate_all_fruit


def sigmoid(z):
    """Logistic function, element-wise for arrays."""
    z = np.clip(z, -500, 500)
    return 1.0 / (1.0 + np.exp(-z))


def _check_weights(weights: np.ndarray, n_features: int):
    if weights.ndim != 1 or weights.shape[0] != n_features:
        raise ValueError(
            f"Weight vector has shape {weights.shape}, expected ({n_features},)"
        )


def _check_dataset(X: np.ndarray, y: np.ndarray):
    if X.ndim != 2:
        raise ValueError(f"Dataset must be 2-D (samples x features), got shape {X.shape}")
    if X.shape[0] == 0:
        raise ValueError("Cannot train on an empty dataset.")
    if y.shape != (X.shape[0],):
        raise ValueError(
            f"Label count {y.shape} does not match sample count {X.shape[0]}"
        )


def predict(weights, sample) -> float:
    """Probability that a single sample belongs to the target class."""
    w = np.asarray(weights, dtype=float)
    x = np.asarray(sample, dtype=float)
    if x.ndim != 1:
        raise ValueError(f"Sample must be 1-D, got shape {x.shape}")
    _check_weights(w, x.shape[0])
    return float(sigmoid(np.dot(w, x)))


def predict_proba(weights, X) -> np.ndarray:
    """Row-wise predict over an (n_samples, n_features) matrix."""
    w = np.asarray(weights, dtype=float)
    X_arr = np.asarray(X, dtype=float)
    if X_arr.ndim != 2:
        raise ValueError(f"Expected a 2-D matrix, got shape {X_arr.shape}")
    _check_weights(w, X_arr.shape[1])
    return sigmoid(X_arr @ w)


def log_loss(weights, X, y) -> float:
    """Average binary cross-entropy of the current weights."""
    y_arr = np.asarray(y, dtype=float)
    preds = predict_proba(weights, X)
    return float(
        -np.mean(y_arr * np.log(preds + 1e-12) + (1 - y_arr) * np.log(1 - preds + 1e-12))
    )


def gradient_descent_step(weights, X, y, learning_rate: float) -> np.ndarray:
    """
    One full-batch update.

    The gradient accumulates (label - probability) * feature over every sample
    and is averaged by the sample count before scaling by the learning rate.
    Returns the new weights; the input array is left untouched.
    """
    w = np.asarray(weights, dtype=float)
    X_arr = np.asarray(X, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    _check_dataset(X_arr, y_arr)
    _check_weights(w, X_arr.shape[1])

    probs = sigmoid(X_arr @ w)
    gradient = X_arr.T @ (y_arr - probs)
    return w + learning_rate * gradient / X_arr.shape[0]


def logistic_regression(
    X,
    y,
    learning_rate: float = DEFAULT_LEARNING_RATE,
    num_epochs: int = DEFAULT_EPOCHS,
    initial_weight: float = INITIAL_WEIGHT,
    verbose: bool = False,
    log_every: int = 50,
) -> np.ndarray:
    """Run exactly num_epochs gradient descent steps from a constant start."""
    X_arr = np.asarray(X, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    _check_dataset(X_arr, y_arr)
    if num_epochs < 0:
        raise ValueError(f"num_epochs must be non-negative, got {num_epochs}")

    weights = np.full(X_arr.shape[1], initial_weight, dtype=float)
    for epoch in range(1, num_epochs + 1):
        weights = gradient_descent_step(weights, X_arr, y_arr, learning_rate)
        if verbose and epoch % log_every == 0:
            print(f"[GD] epoch={epoch}, loss={log_loss(weights, X_arr, y_arr):.4f}")
    return weights


class FruitLogisticRegression:
    """
    Estimator wrapper around logistic_regression with a scikit-learn like API.
    No intercept and no feature scaling: the raw fruit measurements go in as is.
    """

    def __init__(
        self,
        lr: float = DEFAULT_LEARNING_RATE,
        num_epochs: int = DEFAULT_EPOCHS,
        initial_weight: float = INITIAL_WEIGHT,
        verbose: bool = False,
    ):
        self.lr = lr
        self.num_epochs = num_epochs
        self.initial_weight = initial_weight
        self.verbose = verbose
        self.coef_: np.ndarray | None = None
        self.n_iter_: int = 0
        self.loss_history_: list[float] = []

    def fit(self, X, y):
        """Train with full-batch gradient descent for a fixed epoch count."""
        X_arr = np.asarray(X, dtype=float)
        y_arr = np.asarray(y, dtype=float)
        _check_dataset(X_arr, y_arr)
        if self.num_epochs < 0:
            raise ValueError(f"num_epochs must be non-negative, got {self.num_epochs}")

        weights = np.full(X_arr.shape[1], self.initial_weight, dtype=float)
        self.loss_history_ = []
        for step in range(1, self.num_epochs + 1):
            weights = gradient_descent_step(weights, X_arr, y_arr, self.lr)
            loss = log_loss(weights, X_arr, y_arr)
            self.loss_history_.append(loss)
            self.n_iter_ = step

            if self.verbose and step % 50 == 0:
                print(f"[GD] epoch={step}, loss={loss:.4f}")

        self.coef_ = weights
        return self

    def predict_proba(self, X) -> np.ndarray:
        """Return P(cherry) for each row in X."""
        if self.coef_ is None:
            raise RuntimeError("Model is not fitted.")
        return predict_proba(self.coef_, X)

    def predict(self, X, threshold: float = 0.5) -> np.ndarray:
        """Binary predictions: 1 where the probability is above the threshold."""
        return (self.predict_proba(X) > threshold).astype(int)


def train(
    count: int = DEFAULT_COUNT,
    learning_rate: float = DEFAULT_LEARNING_RATE,
    num_epochs: int = DEFAULT_EPOCHS,
    rng: np.random.Generator | None = None,
    verbose: bool = False,
) -> np.ndarray:
    """Canonical run: generate count rounds of fruit and fit on them."""
    X, y = populate_all_fruit(count, rng)
    # The training data is not normalized before fitting
    return logistic_regression(X, y, learning_rate, num_epochs, verbose=verbose)
