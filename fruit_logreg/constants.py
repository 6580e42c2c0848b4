from __future__ import annotations

"""
Shared constants: colour codes, feature layout and the canonical run settings.
"""

# How much weight and volume may drift around the mean for the same fruit
VARIANCE = 0.02

# Fruit colour mapped to a plain number
COLOUR_RED = 1.0
COLOUR_BLACK = 2.0

# Training data layout: [weight in grams, volume in cm^3, colour]
FEATURE_NAMES = ["weight", "volume", "colour"]

TARGET_FRUIT = "cherry"

INITIAL_WEIGHT = 0.1
DEFAULT_COUNT = 1000
DEFAULT_LEARNING_RATE = 0.05
DEFAULT_EPOCHS = 200
DEFAULT_NUM_TESTS = 1000
DEFAULT_THRESHOLD = 0.5
