import os

import numpy as np
import pytest

@pytest.fixture(scope="session")
def rng_seed():
    return int(os.environ.get("TRISAMPLE_TEST_SEED", "1234"))

@pytest.fixture
def rng(rng_seed):
    return np.random.default_rng(rng_seed)
