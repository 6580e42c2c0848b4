import sys
import os

# Add parent directory to sys.path
sys.path.append(os.path.abspath(".."))

import numpy as np
import matplotlib.pyplot as plt
from sklearn.metrics import roc_curve, auc, confusion_matrix, ConfusionMatrixDisplay

from fruit_logreg import (
    ARCHETYPES,
    CHERRY,
    GRAPE,
    APPLE,
    FruitLogisticRegression,
    draw_archetype,
    populate_all_fruit,
    predict_proba,
    train,
)

# Configuration
COUNT = 1000
LEARNING_RATE = 0.05
EPOCHS = 200
NUM_TESTS = 1000
THRESHOLD = 0.5
SEED = 42


def plot_confusion_matrix_and_roc(y_test, y_probs, y_pred, filename_cm, filename_roc):
    # Confusion Matrix
    cm = confusion_matrix(y_test, y_pred, labels=[0, 1])
    disp = ConfusionMatrixDisplay(confusion_matrix=cm, display_labels=["other", "cherry"])
    plt.figure(figsize=(6, 5))
    disp.plot(cmap="Blues", values_format="d")
    plt.title("Confusion Matrix: cherry vs grape/apple")
    plt.tight_layout()
    plt.savefig(filename_cm)
    plt.close()

    # ROC Curve
    fpr, tpr, _ = roc_curve(y_test, y_probs)
    roc_auc = auc(fpr, tpr)

    plt.figure(figsize=(8, 6))
    plt.plot(fpr, tpr, color="darkorange", lw=2, label=f"ROC curve (area = {roc_auc:.3f})")
    plt.plot([0, 1], [0, 1], color="navy", lw=2, linestyle="--")
    plt.xlim([0.0, 1.0])
    plt.ylim([0.0, 1.05])
    plt.xlabel("False Positive Rate")
    plt.ylabel("True Positive Rate")
    plt.title("ROC Curve: cherry")
    plt.legend(loc="lower right")
    plt.grid(True)
    plt.tight_layout()
    plt.savefig(filename_roc)
    plt.close()


def run_evaluation_plots(rng):
    print("Generating confusion matrix and ROC on fresh draws...")
    weights = train(COUNT, LEARNING_RATE, EPOCHS, rng=rng)

    cherries = draw_archetype(CHERRY, NUM_TESTS, rng)
    others = np.vstack([draw_archetype(APPLE, NUM_TESTS, rng), draw_archetype(GRAPE, NUM_TESTS, rng)])
    X_test = np.vstack([cherries, others])
    y_test = np.concatenate([np.ones(NUM_TESTS), np.zeros(2 * NUM_TESTS)]).astype(int)

    probs = predict_proba(weights, X_test)
    preds = (probs > THRESHOLD).astype(int)

    plot_confusion_matrix_and_roc(
        y_test, probs, preds,
        "confusion_matrix_cherry.png",
        "roc_curve_cherry.png"
    )


def run_probability_histogram(rng):
    print("Generating per-fruit probability histogram...")
    weights = train(COUNT, LEARNING_RATE, EPOCHS, rng=rng)

    plt.figure(figsize=(8, 6))
    for archetype in ARCHETYPES:
        probs = predict_proba(weights, draw_archetype(archetype, NUM_TESTS, rng))
        plt.hist(probs, bins=50, range=(0.0, 1.0), alpha=0.6, label=archetype.name)

    plt.axvline(THRESHOLD, color="black", linestyle="--", label="threshold")
    plt.xlabel("Predicted P(cherry)")
    plt.ylabel("Samples")
    plt.title("Predicted probability per fruit")
    plt.legend()
    plt.grid(axis="y", linestyle="--", alpha=0.7)
    plt.tight_layout()
    plt.savefig("probability_per_fruit.png")
    plt.close()


def run_loss_curve(rng):
    print("Generating training loss curve...")
    X, y = populate_all_fruit(COUNT, rng)
    model = FruitLogisticRegression(lr=LEARNING_RATE, num_epochs=EPOCHS)
    model.fit(X, y)

    plt.figure(figsize=(8, 6))
    plt.plot(np.arange(1, model.n_iter_ + 1), model.loss_history_, lw=2)
    plt.yscale("log")
    plt.xlabel("Epoch")
    plt.ylabel("Log loss")
    plt.title("Full-batch gradient descent")
    plt.grid(True)
    plt.tight_layout()
    plt.savefig("loss_curve.png")
    plt.close()


if __name__ == "__main__":
    rng = np.random.default_rng(SEED)
    run_evaluation_plots(rng)
    run_probability_histogram(rng)
    run_loss_curve(rng)
    print("All plots generated successfully.")
