import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded generator so a failing run can be replayed."""
    return np.random.default_rng(1234)
