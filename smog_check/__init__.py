"""
Utilities for predicting whether a vintage car passes its smog-emissions test.

This package contains CSV loading and splitting helpers, a mini-batch logistic
regression implementation, evaluation utilities and plots used by main.py.
"""

from .constants import DATA_COLUMNS, LABEL_COLUMN, SHUFFLE_PHRASE
from .data_prep import load_csv, passed_emissions, shuffle_rows, split_test
from .logreg import (
    ConfigurationError,
    Hyperparameters,
    LogisticRegressionModel,
    ShapeMismatchError,
)
from .metrics import compute_classification_metrics, summarize_coefficients

__all__ = [
    "DATA_COLUMNS",
    "LABEL_COLUMN",
    "SHUFFLE_PHRASE",
    "load_csv",
    "passed_emissions",
    "shuffle_rows",
    "split_test",
    "ConfigurationError",
    "Hyperparameters",
    "LogisticRegressionModel",
    "ShapeMismatchError",
    "compute_classification_metrics",
    "summarize_coefficients",
]
