from __future__ import annotations

"""
Data preparation utilities: CSV loading, seeded shuffling and the
train/test split feeding the logistic regression model.
"""

import zlib
from pathlib import Path
from typing import Callable, Mapping, Sequence

import numpy as np
import pandas as pd
from sklearn.utils import shuffle as sk_shuffle


def passed_emissions(value: str) -> int:
    """Map the raw 'TRUE'/'FALSE' emissions column to 1/0."""
    return 1 if value == "TRUE" else 0


def _extract_columns(df: pd.DataFrame, columns: Sequence[str]) -> np.ndarray:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"Columns not found in CSV: {missing}")
    try:
        return df.loc[:, list(columns)].to_numpy(dtype=float)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Non-numeric values in columns {list(columns)}") from exc


def load_csv(
    csv_path: Path,
    data_columns: Sequence[str],
    label_columns: Sequence[str],
    converters: Mapping[str, Callable[[str], float]] | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Read the CSV and return (features, labels) as float matrices.

    Columns are returned in the order requested, not the file order.
    """
    df = pd.read_csv(csv_path, converters=dict(converters or {}))
    features = _extract_columns(df, data_columns)
    labels = _extract_columns(df, label_columns)
    return features, labels


def shuffle_rows(
    features: np.ndarray, labels: np.ndarray, phrase: str
) -> tuple[np.ndarray, np.ndarray]:
    """Shuffle rows with a permutation seeded by ``phrase``; pairs stay aligned."""
    seed = zlib.crc32(phrase.encode("utf-8"))
    features, labels = sk_shuffle(features, labels, random_state=seed)
    return features, labels


def split_test(
    features: np.ndarray, labels: np.ndarray, test_size: int | None = None
):
    """
    Hold out the first ``test_size`` rows for testing (half when None).

    Returns (train_features, train_labels, test_features, test_labels).
    """
    n_rows = len(features)
    if len(labels) != n_rows:
        raise ValueError(f"{n_rows} feature rows but {len(labels)} label rows")
    if test_size is None:
        test_size = n_rows // 2
    if not 0 <= test_size <= n_rows:
        raise ValueError(f"test_size must be within [0, {n_rows}], got {test_size}")

    return (
        features[test_size:],
        labels[test_size:],
        features[:test_size],
        labels[:test_size],
    )
