from __future__ import annotations

"""
CLI entrypoint: generate synthetic fruit, train the cherry classifier with plain
gradient descent and report how it does on freshly drawn fruit.
"""

import argparse

import numpy as np

from fruit_logreg import (
    TARGET_FRUIT,
    FruitLogisticRegression,
    describe_dataset,
    evaluate,
    format_report,
    populate_all_fruit,
    summarize_coefficients,
)
from fruit_logreg.constants import (
    DEFAULT_COUNT,
    DEFAULT_EPOCHS,
    DEFAULT_LEARNING_RATE,
    DEFAULT_NUM_TESTS,
    DEFAULT_THRESHOLD,
)


def describe_features(meta: dict):
    """Print a short summary of dataset size, balance, and feature ranges."""
    print(f"Training samples: {meta['num_samples']}")
    print(f"Positive rate for {TARGET_FRUIT}: {meta['positive_rate']:.3f}")
    print(f"Samples per fruit: {meta['fruit_counts']}")
    for name, (low, high) in meta["feature_ranges"].items():
        print(f"    {name}: {low:.3f} -> {high:.3f}")


def print_metrics(label: str, metrics: dict):
    """Nicely format the metric dict produced by compute_classification_metrics."""
    cm = metrics["confusion_matrix"]
    print(
        f"[{label}] Acc {metrics['accuracy']:.3f} | "
        f"Prec {metrics['precision']:.3f} | Rec {metrics['recall']:.3f} | "
        f"F1 {metrics['f1']:.3f} | ROC-AUC {metrics['roc_auc']:.3f}"
    )
    print(f"    Confusion matrix [[TN, FP], [FN, TP]]: {cm.tolist()}")


def build_arg_parser():
    """CLI parser with knobs for data size, gradient descent and evaluation."""
    parser = argparse.ArgumentParser(
        description="Train a logistic regression that tells cherries from grapes and apples."
    )
    parser.add_argument(
        "--count",
        type=int,
        default=DEFAULT_COUNT,
        help="Rounds of cherry/grape/apple to generate (3 samples per round).",
    )
    parser.add_argument(
        "--lr", type=float, default=DEFAULT_LEARNING_RATE, help="Learning rate for GD."
    )
    parser.add_argument(
        "--epochs", type=int, default=DEFAULT_EPOCHS, help="Fixed number of GD epochs."
    )
    parser.add_argument(
        "--num-tests",
        type=int,
        default=DEFAULT_NUM_TESTS,
        help="Fresh draws per fruit used for evaluation.",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=DEFAULT_THRESHOLD,
        help="Probability above which a sample is called a cherry.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed one shared generator for a reproducible run (default: fresh entropy per draw).",
    )
    parser.add_argument("--verbose", action="store_true", help="Print loss during training.")
    return parser


def main(args: argparse.Namespace | None = None):
    """Train, then evaluate on unseen draws."""
    args = args or build_arg_parser().parse_args()
    rng = np.random.default_rng(args.seed) if args.seed is not None else None

    X, y = populate_all_fruit(args.count, rng)
    describe_features(describe_dataset(X, y))

    model = FruitLogisticRegression(lr=args.lr, num_epochs=args.epochs, verbose=args.verbose)
    model.fit(X, y)
    if model.loss_history_:
        print(f"GD epochs: {model.n_iter_}, final loss: {model.loss_history_[-1]:.4f}")

    print("\nLearned weights:")
    print(summarize_coefficients(model.coef_))

    report = evaluate(model.coef_, num_tests=args.num_tests, threshold=args.threshold, rng=rng)
    print()
    for line in format_report(report):
        print(line)
    print_metrics("Fresh draws", report.metrics)
    return report


if __name__ == "__main__":
    main()
