from __future__ import annotations

"""
Metric helpers for the emissions classifier (classification summaries and coef dumps).
"""

import numpy as np
import pandas as pd
from sklearn import metrics

from .logreg import LogisticRegressionModel


def compute_classification_metrics(y_true: np.ndarray, y_pred: np.ndarray):
    """Compute standard binary metrics from 0/1 predictions."""
    y_true = np.asarray(y_true).ravel().astype(int)
    y_pred = np.asarray(y_pred).ravel().astype(int)
    precision, recall, f1, _ = metrics.precision_recall_fscore_support(
        y_true, y_pred, average="binary", zero_division=0
    )
    return {
        "accuracy": metrics.accuracy_score(y_true, y_pred),
        "precision": precision,
        "recall": recall,
        "f1": f1,
        "confusion_matrix": metrics.confusion_matrix(y_true, y_pred, labels=[0, 1]),
    }


def majority_baseline(y_train: np.ndarray, y_test: np.ndarray):
    """
    Predicts the majority class of the training labels for every test row.
    """
    majority = int(np.mean(y_train) >= 0.5)
    preds = np.full(np.asarray(y_test).ravel().shape, majority)
    return compute_classification_metrics(y_test, preds)


def summarize_coefficients(
    model: LogisticRegressionModel, feature_names: list[str]
) -> pd.Series:
    if len(feature_names) != model.n_features_in_:
        raise ValueError(
            f"Expected {model.n_features_in_} feature names, got {len(feature_names)}"
        )
    return pd.Series(model.weights[:, 0], index=["intercept", *feature_names])
