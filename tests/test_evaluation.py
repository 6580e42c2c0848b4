import numpy as np
import pytest

from fruit_logreg import EvaluationReport, evaluate, format_report, train


def test_evaluate_counts_against_threshold(rng):
    """all-zero weights give probability 0.5 everywhere, never strictly above 0.5"""
    report = evaluate(np.zeros(3), num_tests=50, threshold=0.5, rng=rng)
    assert report.true_positives == 0
    assert report.false_positives == 0
    assert report.true_positive_rate == 0.0
    assert report.false_positive_rate == 0.0

    report = evaluate(np.zeros(3), num_tests=50, threshold=0.4, rng=rng)
    assert report.true_positive_rate == 100.0
    assert report.false_positive_rate == 100.0


def test_false_positive_rate_uses_both_confounders(rng):
    """colour weight alone flags every grape (black) but no apple (red)"""
    weights = np.array([0.0, 0.0, 1.0])
    report = evaluate(weights, num_tests=40, threshold=0.8, rng=rng)
    # red gives sigmoid(1) ~ 0.73, black gives sigmoid(2) ~ 0.88
    assert report.true_positives == 0
    assert report.false_positives == 40
    assert report.false_positive_rate == pytest.approx(50.0)


def test_evaluate_rejects_non_positive_num_tests():
    with pytest.raises(ValueError):
        evaluate(np.zeros(3), num_tests=0)


def test_evaluate_reports_sklearn_metrics(rng):
    report = evaluate(np.array([0.0, 0.0, 1.0]), num_tests=20, threshold=0.8, rng=rng)
    cm = report.metrics["confusion_matrix"]
    # [[TN, FP], [FN, TP]] over 20 cherries, 20 apples and 20 grapes
    assert cm.tolist() == [[20, 20], [20, 0]]
    assert report.metrics["recall"] == 0.0


def test_format_report_lines():
    report = EvaluationReport(
        num_tests=1000,
        threshold=0.5,
        true_positives=987,
        false_positives=3,
        true_positive_rate=98.7,
        false_positive_rate=0.15,
    )
    assert format_report(report) == [
        "Percentage of correct predictions: 98.7%",
        "Percentage false positives: 0.15%",
    ]


def test_canonical_training_separates_cherries():
    """statistical smoke test: fresh entropy on every draw"""
    weights = train(count=1000, learning_rate=0.05, num_epochs=200)
    report = evaluate(weights, num_tests=1000, threshold=0.5)
    assert report.true_positive_rate > 80.0
    assert report.false_positive_rate < 20.0
    assert report.true_positive_rate > report.false_positive_rate
