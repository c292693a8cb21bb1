# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest


def pytest_configure() -> None:
    # Ensure `src` is importable when running tests from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if src_dir.exists():
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def stepped_data() -> list[float]:
    """n=10 dataset with mean 3, median 3, mode 4."""
    return [1, 2, 2, 3, 3, 3, 4, 4, 4, 4]


@pytest.fixture
def flat_data() -> list[float]:
    """Zero-range dataset."""
    return [5, 5, 5]


@pytest.fixture
def normal_sample() -> np.ndarray:
    """Reproducible normal sample for property-style checks."""
    rng = np.random.default_rng(42)
    return rng.normal(loc=50.0, scale=12.0, size=500)
