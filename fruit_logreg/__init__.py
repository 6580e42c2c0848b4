"""
Logistic regression from scratch on synthetic fruit: is this a cherry?

This package contains the fruit sample generator, a plain gradient descent
logistic regression, and evaluation utilities used by main.py.
"""

from .constants import COLOUR_BLACK, COLOUR_RED, FEATURE_NAMES, TARGET_FRUIT, VARIANCE
from .evaluation import EvaluationReport, evaluate, format_report
from .logreg import (
    FruitLogisticRegression,
    gradient_descent_step,
    log_loss,
    logistic_regression,
    predict,
    predict_proba,
    sigmoid,
    train,
)
from .metrics import compute_classification_metrics, summarize_coefficients
from .samples import (
    APPLE,
    ARCHETYPES,
    CHERRY,
    GRAPE,
    FruitArchetype,
    build_fruit_frame,
    describe_dataset,
    draw_archetype,
    make_apple,
    make_archetype,
    make_cherry,
    make_fruit,
    make_grape,
    populate_all_fruit,
)

__all__ = [
    "COLOUR_BLACK",
    "COLOUR_RED",
    "FEATURE_NAMES",
    "TARGET_FRUIT",
    "VARIANCE",
    "EvaluationReport",
    "evaluate",
    "format_report",
    "FruitLogisticRegression",
    "gradient_descent_step",
    "log_loss",
    "logistic_regression",
    "predict",
    "predict_proba",
    "sigmoid",
    "train",
    "compute_classification_metrics",
    "summarize_coefficients",
    "APPLE",
    "ARCHETYPES",
    "CHERRY",
    "GRAPE",
    "FruitArchetype",
    "build_fruit_frame",
    "describe_dataset",
    "draw_archetype",
    "make_apple",
    "make_archetype",
    "make_cherry",
    "make_fruit",
    "make_grape",
    "populate_all_fruit",
]
