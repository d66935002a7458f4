from __future__ import annotations

"""
Logistic regression trained with mini-batch gradient descent, internal
standardization and a cost-driven learning-rate controller.
"""

import logging
from dataclasses import dataclass, replace

import numpy as np

logger = logging.getLogger(__name__)


class ShapeMismatchError(ValueError):
    """Feature and label matrices (or model and input) disagree in shape."""


class ConfigurationError(ValueError):
    """A hyperparameter is outside its allowed range."""


@dataclass
class Hyperparameters:
    learning_rate: float = 0.1
    iterations: int = 1000
    batch_size: int = 1
    decision_boundary: float = 0.5

    def validate(self) -> None:
        if not self.learning_rate > 0:
            raise ConfigurationError(f"learning_rate must be > 0, got {self.learning_rate}")
        if not isinstance(self.iterations, (int, np.integer)) or self.iterations < 0:
            raise ConfigurationError(f"iterations must be an int >= 0, got {self.iterations}")
        if not isinstance(self.batch_size, (int, np.integer)) or self.batch_size < 1:
            raise ConfigurationError(f"batch_size must be an int >= 1, got {self.batch_size}")
        if not 0.0 <= self.decision_boundary <= 1.0:
            raise ConfigurationError(
                f"decision_boundary must be within [0, 1], got {self.decision_boundary}"
            )


class LogisticRegressionModel:
    """
    Binary logistic regression over a dense feature matrix.

    Mean and variance are taken from the training features on construction and
    reused for every later call to ``preprocess`` (prediction and testing
    included). The weight vector holds the bias at index 0.
    """

    def __init__(self, features, labels, hyperparameters: Hyperparameters | None = None):
        params = replace(hyperparameters) if hyperparameters is not None else Hyperparameters()
        params.validate()
        self.hyperparameters = params

        self.mean_: np.ndarray | None = None
        self.variance_: np.ndarray | None = None

        raw = self._as_matrix(features)
        self.labels = self._as_labels(labels)
        if raw.shape[0] != self.labels.shape[0]:
            raise ShapeMismatchError(
                f"{raw.shape[0]} feature rows but {self.labels.shape[0]} label rows"
            )

        self.n_features_in_ = raw.shape[1]
        self.features = self.preprocess(raw)
        self.weights = np.zeros((self.features.shape[1], 1))
        self.cost_history: list[float] = []

    @staticmethod
    def _as_matrix(values) -> np.ndarray:
        arr = np.asarray(values, dtype=float)
        if arr.ndim != 2:
            raise ShapeMismatchError(f"expected a 2-D feature matrix, got {arr.ndim} dimension(s)")
        return arr

    @staticmethod
    def _as_labels(values) -> np.ndarray:
        arr = np.asarray(values, dtype=float)
        if arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        if arr.ndim != 2 or arr.shape[1] != 1:
            raise ShapeMismatchError(f"labels must be a single column, got shape {arr.shape}")
        return arr

    @staticmethod
    def _sigmoid(z: np.ndarray) -> np.ndarray:
        with np.errstate(over="ignore"):
            return 1.0 / (1.0 + np.exp(-z))

    @staticmethod
    def _add_bias(X: np.ndarray) -> np.ndarray:
        return np.hstack([np.ones((X.shape[0], 1)), X])

    @property
    def learning_rate(self) -> float:
        return self.hyperparameters.learning_rate

    @property
    def intercept_(self) -> float:
        return float(self.weights[0, 0])

    @property
    def coef_(self) -> np.ndarray:
        return self.weights[1:, 0]

    def _standardize(self, X: np.ndarray) -> np.ndarray:
        if self.mean_ is None or self.variance_ is None:
            self.mean_ = X.mean(axis=0)
            self.variance_ = X.var(axis=0)
        scale = np.sqrt(np.asarray(self.variance_, dtype=float))
        scale = np.where(scale == 0, 1.0, scale)
        return (X - self.mean_) / scale

    def preprocess(self, features) -> np.ndarray:
        """Standardize with the stored moments and prepend the bias column."""
        X = self._as_matrix(features)
        if self.mean_ is not None and X.shape[1] != self.n_features_in_:
            raise ShapeMismatchError(
                f"expected {self.n_features_in_} feature columns, got {X.shape[1]}"
            )
        return self._add_bias(self._standardize(X))

    def gradient_descent(self, features: np.ndarray, labels: np.ndarray) -> None:
        """One update of the weights from a single batch."""
        preds = self._sigmoid(features @ self.weights)
        error = preds - labels
        grad = (features.T @ error) / features.shape[0]
        self.weights -= self.hyperparameters.learning_rate * grad

    def train(self) -> None:
        """
        Run ``iterations`` epochs of mini-batch gradient descent.

        Rows past the last full batch are skipped in every epoch. Calling train
        again continues from the current weights and extends the cost history.
        """
        params = self.hyperparameters
        batch_size = params.batch_size
        batch_count = self.features.shape[0] // batch_size
        if batch_count == 0:
            logger.warning(
                "batch_size=%d exceeds %d training rows; epochs will not update weights",
                batch_size,
                self.features.shape[0],
            )

        for epoch in range(1, params.iterations + 1):
            for j in range(batch_count):
                start = j * batch_size
                stop = start + batch_size
                self.gradient_descent(self.features[start:stop], self.labels[start:stop])

            self.record_cost()
            self.optimize_learning_rate()
            logger.debug(
                "[GD] epoch=%d, cost=%.6f, lr=%.6g",
                epoch,
                self.cost_history[-1],
                params.learning_rate,
            )

        if self.cost_history:
            logger.info(
                "Trained %d epochs, final cost %.6f, learning rate %.6g",
                params.iterations,
                self.cost_history[-1],
                params.learning_rate,
            )

    def record_cost(self) -> float:
        """Append the cross-entropy over the full training set to the history."""
        preds = self._sigmoid(self.features @ self.weights)
        y = self.labels
        with np.errstate(divide="ignore", invalid="ignore"):
            term_one = y.T @ np.log(preds)
            term_two = (1 - y).T @ np.log(1 - preds)
            cost = float(-(term_one + term_two)[0, 0] / self.features.shape[0])
        self.cost_history.append(cost)
        return cost

    def optimize_learning_rate(self) -> None:
        """Halve the rate when the latest cost went up, otherwise grow it by 5%."""
        if len(self.cost_history) < 2:
            return
        if self.cost_history[-1] > self.cost_history[-2]:
            self.hyperparameters.learning_rate /= 2
        else:
            self.hyperparameters.learning_rate *= 1.05

    def predict_proba(self, observations) -> np.ndarray:
        """Return P(y=1) for each row as a column vector."""
        X = self.preprocess(observations)
        return self._sigmoid(X @ self.weights)

    def predict(self, observations) -> np.ndarray:
        """Class labels (0.0/1.0); a probability equal to the boundary maps to 0."""
        probs = self.predict_proba(observations)
        return (probs > self.hyperparameters.decision_boundary).astype(float)

    def test(self, test_features, test_labels) -> float:
        """Fraction of test rows classified correctly."""
        labels = self._as_labels(test_labels)
        X = self._as_matrix(test_features)
        if X.shape[0] != labels.shape[0]:
            raise ShapeMismatchError(
                f"{X.shape[0]} test feature rows but {labels.shape[0]} test label rows"
            )
        if X.shape[0] == 0:
            raise ShapeMismatchError("test set is empty")
        predictions = self.predict(X)
        incorrect = float(np.abs(predictions - labels).sum())
        return (predictions.shape[0] - incorrect) / predictions.shape[0]
