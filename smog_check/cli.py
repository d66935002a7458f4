from __future__ import annotations

"""
CLI entrypoint: train the smog-emissions logistic regression on the vintage
cars CSV, report test accuracy and save the cost history chart.
"""

import argparse
import logging
from pathlib import Path

from . import (
    DATA_COLUMNS,
    LABEL_COLUMN,
    SHUFFLE_PHRASE,
    Hyperparameters,
    LogisticRegressionModel,
    compute_classification_metrics,
    load_csv,
    passed_emissions,
    shuffle_rows,
    split_test,
    summarize_coefficients,
)
from . import constants
from .metrics import majority_baseline
from .plots import plot_cost_history

logger = logging.getLogger(__name__)


def print_metrics(label: str, metrics: dict):
    """Nicely format the metric dict produced by compute_classification_metrics."""
    cm = metrics["confusion_matrix"]
    print(
        f"[{label}] Acc {metrics['accuracy']:.3f} | "
        f"Prec {metrics['precision']:.3f} | Rec {metrics['recall']:.3f} | "
        f"F1 {metrics['f1']:.3f}"
    )
    print(f"    Confusion matrix [[TN, FP], [FN, TP]]: {cm.tolist()}")


def build_arg_parser():
    """CLI parser with knobs for data columns, splitting and model params."""
    parser = argparse.ArgumentParser(
        description="Predict whether a vintage car passes its smog-emissions test."
    )
    parser.add_argument("--csv-path", type=Path, default=constants.CSV_PATH)
    parser.add_argument(
        "--data-columns",
        type=str,
        default=",".join(DATA_COLUMNS),
        help="Comma-separated feature columns.",
    )
    parser.add_argument("--label-column", type=str, default=LABEL_COLUMN)
    parser.add_argument("--no-shuffle", action="store_true", help="Keep CSV row order.")
    parser.add_argument(
        "--shuffle-phrase",
        type=str,
        default=SHUFFLE_PHRASE,
        help="Seed phrase; the same phrase always gives the same split.",
    )
    parser.add_argument(
        "--test-size",
        type=int,
        default=constants.TEST_SIZE,
        help="Number of leading rows held out for testing.",
    )
    parser.add_argument("--lr", type=float, default=constants.LEARNING_RATE)
    parser.add_argument("--iterations", type=int, default=constants.ITERATIONS)
    parser.add_argument("--batch-size", type=int, default=constants.BATCH_SIZE)
    parser.add_argument(
        "--decision-boundary", type=float, default=constants.DECISION_BOUNDARY
    )
    parser.add_argument(
        "--plot-path",
        type=str,
        default=str(constants.COST_PLOT_PATH),
        help="Where to save the cost history chart; empty string skips it.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every epoch.")
    return parser


def main(args: argparse.Namespace | None = None) -> float:
    """Load, train, test and report."""
    args = args or build_arg_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s:%(name)s: %(message)s",
    )

    data_columns = [c.strip() for c in args.data_columns.split(",") if c.strip()]
    features, labels = load_csv(
        args.csv_path,
        data_columns=data_columns,
        label_columns=[args.label_column],
        converters={args.label_column: passed_emissions},
    )
    logger.info("Loaded %d rows from %s", len(features), args.csv_path)

    if not args.no_shuffle:
        features, labels = shuffle_rows(features, labels, args.shuffle_phrase)

    X_train, y_train, X_test, y_test = split_test(features, labels, args.test_size)
    print(f"Train size: {len(X_train)}, Test size: {len(X_test)}")

    model = LogisticRegressionModel(
        X_train,
        y_train,
        Hyperparameters(
            learning_rate=args.lr,
            iterations=args.iterations,
            batch_size=args.batch_size,
            decision_boundary=args.decision_boundary,
        ),
    )
    model.train()

    accuracy = model.test(X_test, y_test)
    print(f"\n[+] Model Accuracy: {accuracy * 100:.2f}%\n")

    print_metrics("Majority baseline", majority_baseline(y_train, y_test))
    print_metrics(
        "Mini-batch GD logistic",
        compute_classification_metrics(y_test, model.predict(X_test)),
    )
    print("\nLearned weights (standardized space):")
    print(summarize_coefficients(model, data_columns))

    if args.plot_path:
        saved = plot_cost_history(model.cost_history, Path(args.plot_path))
        logger.info("Cost history chart saved to %s", saved)

    return accuracy


if __name__ == "__main__":
    main()
