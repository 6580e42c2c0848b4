from __future__ import annotations

"""
Synthetic fruit generation: class archetypes and labeled training batches.
"""

from dataclasses import dataclass

import numpy as np
import pandas as pd

from .constants import COLOUR_BLACK, COLOUR_RED, FEATURE_NAMES, VARIANCE


@dataclass(frozen=True)
class FruitArchetype:
    """Generation parameters for one synthetic fruit class."""

    name: str
    mean_weight: float
    mean_volume: float
    colour: float
    variance: float = VARIANCE
    label: float = 0.0


CHERRY = FruitArchetype("cherry", 5.0, 15.0, COLOUR_RED, label=1.0)
GRAPE = FruitArchetype("grape", 13.0, 24.0, COLOUR_BLACK)
APPLE = FruitArchetype("apple", 150.0, 450.0, COLOUR_RED)

# Order matters: populate_all_fruit interleaves samples in this order
ARCHETYPES = (CHERRY, GRAPE, APPLE)


def _fresh_rng(rng: np.random.Generator | None) -> np.random.Generator:
    # Without an explicit generator every call gets its own OS-seeded one
    return rng if rng is not None else np.random.default_rng()


def make_fruit(
    mean_weight: float,
    mean_volume: float,
    colour: float,
    variance: float,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """
    Draw one [weight, volume, colour] sample.

    Weight and volume are sampled independently and uniformly from
    [mean * (1 - variance), mean * (1 + variance)]; colour is passed through.
    """
    if variance <= 0:
        raise ValueError(f"variance must be strictly positive, got {variance}")

    rng = _fresh_rng(rng)
    wdiff = mean_weight * variance
    vdiff = mean_volume * variance

    weight = rng.uniform(mean_weight - wdiff, mean_weight + wdiff)
    volume = rng.uniform(mean_volume - vdiff, mean_volume + vdiff)
    return np.array([weight, volume, colour], dtype=float)


def make_archetype(
    archetype: FruitArchetype, rng: np.random.Generator | None = None
) -> np.ndarray:
    return make_fruit(
        archetype.mean_weight,
        archetype.mean_volume,
        archetype.colour,
        archetype.variance,
        rng=rng,
    )


def make_cherry(rng: np.random.Generator | None = None) -> np.ndarray:
    return make_archetype(CHERRY, rng)


def make_grape(rng: np.random.Generator | None = None) -> np.ndarray:
    return make_archetype(GRAPE, rng)


def make_apple(rng: np.random.Generator | None = None) -> np.ndarray:
    return make_archetype(APPLE, rng)


def draw_archetype(
    archetype: FruitArchetype, n: int, rng: np.random.Generator | None = None
) -> np.ndarray:
    """Stack n independent draws of one archetype into an (n, 3) matrix."""
    if n < 0:
        raise ValueError(f"Number of draws must be non-negative, got {n}")
    if n == 0:
        return np.empty((0, len(FEATURE_NAMES)))
    return np.vstack([make_archetype(archetype, rng) for _ in range(n)])


def populate_all_fruit(
    count: int, rng: np.random.Generator | None = None
) -> tuple[np.ndarray, np.ndarray]:
    """
    Build the training set: count rounds of cherry, grape, apple.

    Returns X with shape (3 * count, 3) and labels with exactly count ones.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    samples: list[np.ndarray] = []
    labels: list[float] = []
    for _ in range(count):
        # Staggered so no class sits in one contiguous block
        for archetype in ARCHETYPES:
            samples.append(make_archetype(archetype, rng))
            labels.append(archetype.label)

    if not samples:
        return np.empty((0, len(FEATURE_NAMES))), np.empty(0)
    return np.vstack(samples), np.asarray(labels, dtype=float)


def build_fruit_frame(X: np.ndarray, y: np.ndarray) -> pd.DataFrame:
    """
    Tabular view of a generated dataset, one row per sample.

    The fruit column names the archetype of the same colour with the closest
    mean weight.
    """
    X_arr = np.asarray(X, dtype=float)
    df = pd.DataFrame(X_arr, columns=FEATURE_NAMES)
    df["label"] = np.asarray(y, dtype=float)

    def _closest(row: pd.Series) -> str:
        candidates = [a for a in ARCHETYPES if a.colour == row["colour"]] or list(ARCHETYPES)
        return min(candidates, key=lambda a: abs(a.mean_weight - row["weight"])).name

    df["fruit"] = df.apply(_closest, axis=1) if len(df) else pd.Series(dtype=str)
    return df


def describe_dataset(X: np.ndarray, y: np.ndarray) -> dict:
    """Size, balance and per-feature ranges of a generated dataset."""
    df = build_fruit_frame(X, y)
    return {
        "num_samples": len(df),
        "positive_rate": float(df["label"].mean()) if len(df) else float("nan"),
        "fruit_counts": df["fruit"].value_counts().to_dict(),
        "feature_ranges": {
            name: (float(df[name].min()), float(df[name].max())) for name in FEATURE_NAMES
        }
        if len(df)
        else {},
    }
