from __future__ import annotations

"""
Evaluate a trained weight vector on fresh fruit draws: how many cherries are
recognised and how many grapes and apples are mistaken for cherries.
"""

from dataclasses import dataclass, field

import numpy as np

from .constants import DEFAULT_NUM_TESTS, DEFAULT_THRESHOLD
from .logreg import predict_proba
from .metrics import compute_classification_metrics
from .samples import APPLE, CHERRY, GRAPE, draw_archetype


@dataclass
class EvaluationReport:
    num_tests: int
    threshold: float
    true_positives: int
    false_positives: int
    true_positive_rate: float  # percent of cherries above threshold
    false_positive_rate: float  # percent of grapes and apples above threshold
    metrics: dict = field(default_factory=dict)


def evaluate(
    weights,
    num_tests: int = DEFAULT_NUM_TESTS,
    threshold: float = DEFAULT_THRESHOLD,
    rng: np.random.Generator | None = None,
) -> EvaluationReport:
    """
    Score the model on num_tests new cherries and num_tests of each confounder.

    Every call draws new samples, so rates vary slightly from run to run.
    """
    if num_tests <= 0:
        raise ValueError(f"num_tests must be positive, got {num_tests}")

    cherries = draw_archetype(CHERRY, num_tests, rng)
    cherry_probs = predict_proba(weights, cherries)
    true_positives = int(np.sum(cherry_probs > threshold))

    # Now the false positives
    others = np.vstack(
        [draw_archetype(APPLE, num_tests, rng), draw_archetype(GRAPE, num_tests, rng)]
    )
    other_probs = predict_proba(weights, others)
    false_positives = int(np.sum(other_probs > threshold))

    y_true = np.concatenate([np.ones(num_tests), np.zeros(2 * num_tests)])
    probs = np.concatenate([cherry_probs, other_probs])

    return EvaluationReport(
        num_tests=num_tests,
        threshold=threshold,
        true_positives=true_positives,
        false_positives=false_positives,
        true_positive_rate=true_positives / num_tests * 100.0,
        false_positive_rate=false_positives / (2 * num_tests) * 100.0,
        metrics=compute_classification_metrics(y_true, probs, threshold=threshold),
    )


def format_report(report: EvaluationReport) -> list[str]:
    """Console lines for the two headline percentages."""
    return [
        f"Percentage of correct predictions: {report.true_positive_rate:g}%",
        f"Percentage false positives: {report.false_positive_rate:g}%",
    ]
