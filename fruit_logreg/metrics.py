from __future__ import annotations

"""
Metric helpers: classification summaries and coefficient dumps.
"""

import numpy as np
import pandas as pd
from sklearn import metrics

from .constants import FEATURE_NAMES


def compute_classification_metrics(
    y_true: np.ndarray | pd.Series, probs: np.ndarray, threshold: float = 0.5
):
    """Standard binary metrics; a row counts as positive when above the threshold."""
    preds = (np.asarray(probs) > threshold).astype(int)
    y_int = np.asarray(y_true).astype(int)
    precision, recall, f1, _ = metrics.precision_recall_fscore_support(
        y_int, preds, average="binary", zero_division=0
    )
    try:
        roc_auc = metrics.roc_auc_score(y_int, probs)
    except ValueError:
        roc_auc = float("nan")

    return {
        "accuracy": metrics.accuracy_score(y_int, preds),
        "precision": precision,
        "recall": recall,
        "f1": f1,
        "roc_auc": roc_auc,
        "confusion_matrix": metrics.confusion_matrix(y_int, preds, labels=[0, 1]),
    }


def summarize_coefficients(
    coef: np.ndarray, feature_names: list[str] | None = None
) -> pd.Series:
    """Learned weights indexed by feature name, largest first."""
    names = feature_names if feature_names is not None else FEATURE_NAMES
    if len(names) != len(coef):
        raise ValueError(f"{len(coef)} coefficients for {len(names)} feature names")
    return pd.Series(coef, index=names, name="coef").sort_values(ascending=False)
