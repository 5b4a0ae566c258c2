from __future__ import annotations

import os
import random

import numpy as np
import pytest

from sparse_ids.utils import config as sparse_config

DEFAULT_SEED = int(os.getenv("SPARSE_IDS_SEED", "1234"))


def pytest_configure(config) -> None:  # pylint: disable=unused-argument
    random.seed(DEFAULT_SEED)
    np.random.seed(DEFAULT_SEED)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(DEFAULT_SEED)


@pytest.fixture
def debug_config():
    previous = sparse_config.debug
    sparse_config.debug = True
    yield sparse_config
    sparse_config.debug = previous
