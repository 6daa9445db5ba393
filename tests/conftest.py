"""Test configuration: local packages importable, shared word samples."""

from __future__ import annotations

import pathlib
import random
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

EDGE_WORDS = [0, 1, 2, 3, 0x80000000, 0x7FFFFFFF, 0xFFFFFFFF, 0xAAAAAAAA, 0x55555555, 0xDEADBEEF]


@pytest.fixture(scope="session")
def words32() -> list[int]:
    """Edge-case 32-bit words plus a seeded random sample."""
    rng = random.Random(0xB175)
    return EDGE_WORDS + [rng.getrandbits(32) for _ in range(300)]


@pytest.fixture(scope="session")
def bytes8() -> range:
    """Every 8-bit word, for exhaustive checks with width=8."""
    return range(256)
